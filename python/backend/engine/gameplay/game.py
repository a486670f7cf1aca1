"""Core gameplay logic — resolves swaps and tracks score."""

from __future__ import annotations

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamesolver import Solver
from backend.engine.gamestate import GameState
from backend.engine.resolver import MoveResolver
from backend.models.board import Position
from backend.models.match import BoardSnapshot
from backend.models.tile import TileSource, default_source


class GamePlay:
    """Orchestrates a single game session."""

    def __init__(self, size: int, source: TileSource | None = None) -> None:
        self.size = size
        self.source = source or default_source()
        self.state = GameState(GameGenerator.generate(size, self.source))

    @classmethod
    def from_state(
        cls, state: GameState, source: TileSource | None = None
    ) -> GamePlay:
        """Resume a session from an existing state (e.g. loaded from file)."""
        obj = object.__new__(cls)
        obj.size = state.size
        obj.source = source or default_source()
        obj.state = state
        return obj

    # -- moves ----------------------------------------------------------------

    def swap(self, a: Position, b: Position) -> list[BoardSnapshot]:
        """Swap the tiles at *a* and *b* and apply the outcome.

        Returns the snapshots so a front end can animate them. Every
        attempted swap counts as a move, except ones that fall off the
        board.
        """
        snapshots = MoveResolver.resolve_swap(a, b, self.state.board, self.source)
        if len(snapshots) > 1:
            self.state.increment_moves()
        self.state.apply(snapshots)
        return snapshots

    def restart(self) -> None:
        self.state = GameState(GameGenerator.generate(self.size, self.source))

    # -- queries --------------------------------------------------------------

    def hint(self) -> tuple[Position, Position] | None:
        return Solver.hint(self.state.board)

    @property
    def is_over(self) -> bool:
        return Solver.is_terminal(self.state.board)

    def contains_tile(self, display_value: int) -> bool:
        """True if some tile shows *display_value* (e.g. 2048)."""
        return any(
            tile.display_value == display_value
            for column in self.state.board.columns
            for tile in column
        )
