"""Generates starting boards without pre-existing matches."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from backend.engine.matcher import Matcher
from backend.models.board import Board
from backend.models.match import Match
from backend.models.tile import TileSource, default_source

logger = logging.getLogger(__name__)


class GameGenerator:
    """Creates match-free boards by rerolling match origins."""

    @staticmethod
    def generate(
        size: int,
        source: TileSource | None = None,
        max_rounds: int = 10_000,
    ) -> Board:
        """Return a random *size*×*size* board on which nothing matches."""
        if size < 1:
            raise ValueError(f"Board size must be at least 1, got {size}.")

        source = source or default_source()
        board = Board.random(size, source)

        rounds = 0
        while matches := Matcher.scan_all(board):
            rounds += 1
            if rounds > max_rounds:
                raise RuntimeError(
                    f"Could not generate a match-free {size}×{size} board "
                    f"in {max_rounds} rounds."
                )
            GameGenerator.reroll(board, matches, source)

        logger.debug("Generated %d×%d board after %d reroll round(s)", size, size, rounds)
        return board

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def reroll(board: Board, matches: Iterable[Match], source: TileSource) -> None:
        """Give each match origin a new random value in place, keeping its id."""
        for match in matches:
            tile = board.tile_at(match.origin)
            board.set_tile(match.origin, tile.upgrade(source.random_value()))
