"""Saved-game persistence.

Boards are stored as their size plus a flat list of tile values indexed
``y*size + x``. Tile ids and consumed flags are not stored; loading mints
fresh tiles.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from backend.engine.gamestate import GameState
from backend.models.board import Board
from backend.models.tile import TileSource

logger = logging.getLogger(__name__)


# -- codec --------------------------------------------------------------------


def encode_board(board: Board) -> dict[str, Any]:
    return {"size": board.size, "values": board.to_flat()}


def decode_board(data: dict[str, Any], source: TileSource | None = None) -> Board:
    """Rebuild a board from :func:`encode_board` output.

    Raises ``ValueError`` if *data* does not describe a valid board.
    """
    size = data.get("size")
    values = data.get("values")

    if not isinstance(size, int) or isinstance(size, bool) or size < 1:
        raise ValueError(f"Invalid board size: {size!r}")
    if not isinstance(values, list):
        raise ValueError("Board values must be a list.")
    if not all(isinstance(v, int) and not isinstance(v, bool) and v >= 1 for v in values):
        raise ValueError("Board values must be positive integers.")

    return Board.from_flat(size, values, source)


def encode_state(state: GameState) -> dict[str, Any]:
    return {
        **encode_board(state.board),
        "points": state.points,
        "moves": state.moves,
    }


def decode_state(data: dict[str, Any], source: TileSource | None = None) -> GameState:
    if not isinstance(data, dict):
        raise ValueError("Saved game must be a JSON object.")

    points = data.get("points", 0)
    moves = data.get("moves", 0)
    if not isinstance(points, int) or points < 0:
        raise ValueError(f"Invalid points: {points!r}")
    if not isinstance(moves, int) or moves < 0:
        raise ValueError(f"Invalid move count: {moves!r}")

    return GameState(decode_board(data, source), points=points, moves=moves)


# -- storage ------------------------------------------------------------------


class SaveGameManager:
    """Loads and saves the game in progress as a JSON file."""

    def __init__(self, filepath: Path, source: TileSource | None = None) -> None:
        self.filepath = filepath
        self.source = source

    def load(self) -> GameState | None:
        """Return the saved game, or ``None`` if there is nothing to resume.

        A game without any points yet is not worth resuming.
        """
        if not self.filepath.exists():
            return None

        try:
            state = decode_state(json.loads(self.filepath.read_text()), self.source)
        except (OSError, json.JSONDecodeError, ValueError) as e:
            logger.warning(f"Failed to load saved game from {self.filepath}: {e}")
            return None

        if state.points == 0:
            return None
        return state

    def save(self, state: GameState) -> None:
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        self.filepath.write_text(json.dumps(encode_state(state)) + "\n")
        logger.debug(f"Saved game: {state.points} points, {state.moves} moves")

    def clear(self) -> None:
        self.filepath.unlink(missing_ok=True)
