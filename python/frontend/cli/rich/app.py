"""Rich terminal frontend — coloured tiles, panels, and animated cascades.

Move the cursor with the arrow keys or WASD and press space on two
neighbouring tiles to swap them. Every board the engine returns is drawn
in turn, so merges, falls and cascades play out on screen.
"""

from __future__ import annotations

import colorsys
import logging
import time
from datetime import datetime
from enum import StrEnum
from pathlib import Path

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import Solver
from backend.models.board import Board, Direction, Position
from backend.models.highscore import HighScoreEntry, HighScoreManager
from backend.models.match import BoardSnapshot
from backend.models.savegame import SaveGameManager
from backend.models.tile import Tile, TileSource
from frontend.cli.input_handler import get_key

logger = logging.getLogger(__name__)

console = Console()

MIN_SIZE = 3
MAX_SIZE = 12


class AnimationSpeed(StrEnum):
    instant = "instant"
    fast = "fast"
    medium = "medium"
    slow = "slow"

    @property
    def seconds(self) -> float:
        return _SPEED_SECONDS[self]

    @property
    def frame_delay(self) -> float:
        # Even "instant" keeps a short pause so cascades stay visible.
        return max(0.12, self.seconds) + 0.06


_SPEED_SECONDS: dict[AnimationSpeed, float] = {
    AnimationSpeed.instant: 0.0,
    AnimationSpeed.fast: 0.2,
    AnimationSpeed.medium: 0.4,
    AnimationSpeed.slow: 0.7,
}

_PALETTE = [
    "#0a9396",
    "#e9d8a6",
    "#ee9b00",
    "#ca6702",
    "#005f73",
    "#ae2012",
    "#86350f",
    "#94d2bd",
    "#9b2226",
]


# -- tile colours -------------------------------------------------------------


def _tile_colour(tile: Tile) -> str:
    if tile.value > len(_PALETTE) - 1:
        hue = ((tile.value - len(_PALETTE)) * 36 % 360) / 360
        r, g, b = colorsys.hls_to_rgb(hue, 0.75, 1.0)
        return f"#{int(r * 255):02x}{int(g * 255):02x}{int(b * 255):02x}"
    return _PALETTE[max(tile.value - 1, 0)]


def _text_colour(background: str) -> str:
    """Pick dark or light text for a hex background by relative luminance."""

    def linear(channel: str) -> float:
        c = int(channel, 16) / 255.0
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    r, g, b = (linear(background[i : i + 2]) for i in (1, 3, 5))
    luminance = 0.2126 * r + 0.7152 * g + 0.0722 * b
    return "#101050" if luminance > 0.5 else "#fafafa"


# -- board rendering ----------------------------------------------------------


def _render_board(
    board: Board,
    cursor: Position | None = None,
    selected: Position | None = None,
    marked: tuple[Position, ...] = (),
) -> Table:
    """Return a Rich Table representing the grid (row 0 on top)."""
    width = max(len(str(tile.display_value)) for column in board.columns for tile in column)
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 2, justify="center")

    for y in range(board.size):
        cells: list[Text] = []
        for x in range(board.size):
            position = Position(x, y)
            tile = board.tile_at(position)
            label = f"{tile.display_value:>{width}}"

            if tile.consumed:
                cells.append(Text(f" {label} ", style="dim strike"))
                continue

            bg = _tile_colour(tile)
            style = f"bold {_text_colour(bg)} on {bg}"
            if position == selected or position in marked:
                style += " reverse"
            if position == cursor:
                label = f"[{label}]"
            else:
                label = f" {label} "
            cells.append(Text(label, style=style))
        table.add_row(*cells)

    return table


# -- screens ------------------------------------------------------------------


def _draw_menu(sel_size: int, resumable: bool) -> None:
    console.clear()

    sizes = Text()
    for s in range(MIN_SIZE, MAX_SIZE + 1):
        if s > MIN_SIZE:
            sizes.append(" ")
        if s == sel_size:
            sizes.append(f" {s}×{s} ", style="bold green on #313244")
        else:
            sizes.append(f" {s}×{s} ", style="dim")

    nav = Text("  ← →  change size", style="dim")

    opts = Text()
    opts.append("  1", style="bold cyan")
    opts.append("  New game    ")
    if resumable:
        opts.append("2", style="bold yellow")
        opts.append("  Resume    ")
    opts.append("H", style="dim bold")
    opts.append("  Scores    ", style="dim")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    panel = Panel(
        Group(
            Text(""),
            Align.center(sizes),
            Align.center(nav),
            Text(""),
            Align.center(opts),
            Text(""),
        ),
        title="[bold]T I L E   M E R G E[/bold]",
        border_style="bright_blue",
        padding=(1, 4),
    )

    console.print()
    console.print(Align.center(panel))


def _draw_game(
    game: GamePlay,
    best: int,
    board: Board | None = None,
    cursor: Position | None = None,
    selected: Position | None = None,
    marked: tuple[Position, ...] = (),
    status: str = "",
    points: int | None = None,
) -> None:
    console.clear()

    size = game.size
    if points is None:
        points = game.state.points
    if board is None:
        board = game.state.board
    board_table = _render_board(board, cursor=cursor, selected=selected, marked=marked)

    stats = Text()
    stats.append("  Points: ", style="dim")
    stats.append(str(points), style="bold yellow")
    stats.append("    Moves: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")
    stats.append("    Best: ", style="dim")
    stats.append(str(max(best, points)), style="bold yellow")

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  cursor   ", style="dim")
    controls.append("Space", style="bold cyan")
    controls.append("  select   ", style="dim")
    controls.append("N", style="bold cyan")
    controls.append("  hint   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  restart   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  back", style="dim")

    panel = Panel(
        Align.center(board_table),
        title=f"[bold cyan]Tile Merge  {size}×{size}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(stats))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _draw_game_over(game: GamePlay) -> None:
    console.clear()

    size = game.size

    banner = Text()
    banner.append("\n  ★ ", style="bold yellow")
    banner.append("GAME OVER", style="bold red")
    banner.append("  No more moves.  ", style="red")
    banner.append("★\n", style="bold yellow")

    stats = Text()
    stats.append("  Points: ", style="dim")
    stats.append(str(game.state.points), style="bold yellow")
    stats.append("    Moves: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")

    panel = Panel(
        Group(
            Align.center(_render_board(game.state.board)),
            Align.center(banner),
            Align.center(stats),
        ),
        title=f"[bold red]Tile Merge  {size}×{size}[/bold red]",
        border_style="bold red",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(
        Align.center(Text("\n  Press R to play again, Q to go back.\n", style="dim"))
    )


def _score_tables(manager: HighScoreManager) -> list[Align]:
    parts: list[Align] = []
    for size in manager.get_all_sizes():
        hs_table = Table(
            title=f"{size}×{size}",
            title_style="bold cyan",
            box=rich.box.ROUNDED,
            border_style="dim",
        )
        hs_table.add_column("#", justify="right", style="dim", width=3)
        hs_table.add_column("Points", justify="right", style="yellow")
        hs_table.add_column("Moves", justify="right", style="yellow")
        hs_table.add_column("Date", style="dim")

        for i, e in enumerate(manager.get_scores(size)[:10], 1):
            hs_table.add_row(str(i), str(e.points), str(e.moves), e.date)
        parts.append(Align.center(hs_table))
    return parts


def print_highscores(manager: HighScoreManager) -> None:
    """Print the high-score tables without entering the interactive UI."""
    parts = _score_tables(manager)
    if not parts:
        console.print(Text("  No high scores yet.", style="dim"))
        return
    console.print(Group(*parts))


def _draw_highscores(manager: HighScoreManager) -> None:
    console.clear()

    parts = _score_tables(manager) or [
        Align.center(Text("  No high scores yet.", style="dim"))
    ]
    panel = Panel(
        Group(*parts),
        title="[bold]HIGH  SCORES[/bold]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(Text("\n  Press any key to go back.\n", style="dim")))
    get_key()


# -- playback -----------------------------------------------------------------


def _play_snapshots(
    game: GamePlay,
    snapshots: list[BoardSnapshot],
    speed: AnimationSpeed,
    best: int,
) -> None:
    """Redraw each snapshot in order, counting points up as they land."""
    points = game.state.points - sum(s.points for s in snapshots)

    for i, snapshot in enumerate(snapshots):
        points += snapshot.points
        _draw_game(game, best, board=snapshot.board, points=points)
        if i < len(snapshots) - 1:
            time.sleep(speed.frame_delay)


# -- game loop ----------------------------------------------------------------


def _record_score(game: GamePlay, manager: HighScoreManager) -> None:
    manager.add_score(
        game.size,
        HighScoreEntry(
            points=game.state.points,
            moves=game.state.moves,
            date=datetime.now().strftime("%Y-%m-%d %H:%M"),
        ),
    )


def _play_game(
    game: GamePlay,
    speed: AnimationSpeed,
    scores: HighScoreManager,
    saves: SaveGameManager,
) -> None:
    cursor = Position(0, 0)
    selected: Position | None = None
    marked: tuple[Position, ...] = ()
    status = ""

    while True:
        best = scores.best(game.size)

        if game.is_over:
            _record_score(game, scores)
            saves.clear()
            _draw_game_over(game)
            while True:
                key = get_key()
                if key == "restart":
                    game.restart()
                    break
                if key == "quit":
                    return
            continue

        _draw_game(game, best, cursor=cursor, selected=selected, marked=marked, status=status)
        status = ""
        marked = ()
        key = get_key()

        if key in ("up", "down", "left", "right"):
            moved = cursor.step(Direction(key))
            if game.state.board.in_bounds(moved):
                cursor = moved
        elif key == "select":
            if selected is None:
                selected = cursor
            elif selected == cursor or not Solver.are_adjacent(selected, cursor):
                selected = None
            else:
                before = game.state.points
                snapshots = game.swap(selected, cursor)
                selected = None
                _play_snapshots(game, snapshots, speed, best)
                if len(snapshots) == 2:
                    status = "[yellow]No match there.[/yellow]"
                else:
                    status = f"[green]+{game.state.points - before} points[/green]"
                saves.save(game.state)
        elif key == "hint":
            pair = game.hint()
            if pair is not None:
                marked = pair
                status = "[cyan]Hint:[/cyan] swap the highlighted tiles"
        elif key == "restart":
            if game.state.points > 0:
                _record_score(game, scores)
            saves.clear()
            game.restart()
            cursor, selected = Position(0, 0), None
            status = "[yellow]New board![/yellow]"
        elif key == "quit":
            return


# -- menu loop ----------------------------------------------------------------


def _menu_loop(
    size: int,
    speed: AnimationSpeed,
    data_dir: Path,
    source: TileSource,
    resume: bool,
) -> None:
    scores = HighScoreManager(data_dir / "highscores.json")
    saves = SaveGameManager(data_dir / "savegame.json", source)
    sel_size = size

    while True:
        saved = saves.load() if resume else None
        _draw_menu(sel_size, saved is not None)
        key = get_key()

        if key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
        elif key == "left":
            sel_size = max(MIN_SIZE, sel_size - 1)
        elif key == "right":
            sel_size = min(MAX_SIZE, sel_size + 1)
        elif key in ("1", "select"):
            saves.clear()
            _play_game(GamePlay(sel_size, source), speed, scores, saves)
            resume = True
        elif key == "2" and saved is not None:
            logger.info("Resuming saved %d×%d game", saved.size, saved.size)
            _play_game(GamePlay.from_state(saved, source), speed, scores, saves)
        elif key == "scores":
            _draw_highscores(scores)


# -- public entry point -------------------------------------------------------


def run(
    size: int,
    data_dir: Path,
    speed: AnimationSpeed = AnimationSpeed.medium,
    seed: int | None = None,
    resume: bool = True,
) -> None:
    """Launch the Rich CLI with interactive menu."""
    _menu_loop(size, speed, data_dir, TileSource(seed=seed), resume)
