"""Resolves a swap into the sequence of boards the player sees."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from backend.engine.gamesolver import Solver
from backend.engine.gravity import Gravity
from backend.engine.matcher import Matcher
from backend.models.board import Board, Position
from backend.models.match import BoardSnapshot, Match
from backend.models.tile import TileSource, default_source

logger = logging.getLogger(__name__)


class MoveResolver:
    """Stateless move resolver — all methods are static."""

    @staticmethod
    def resolve_swap(
        from_: Position,
        to: Position,
        board: Board,
        source: TileSource | None = None,
    ) -> list[BoardSnapshot]:
        """Swap two tiles and play out every merge, fall and cascade.

        Returns the boards to animate through, in order:

        * out-of-bounds input: ``[board]``, nothing happens;
        * a rejected swap: ``[swapped, board]``, there and back again;
        * a valid swap: ``[swapped, marked, upgraded, fallen]`` followed by
          ``[marked, upgraded, fallen]`` for each cascade.

        Only the ``upgraded`` snapshots carry points. *board* is never
        modified.
        """
        if not (board.in_bounds(from_) and board.in_bounds(to)):
            logger.debug("Ignoring out-of-bounds swap %s -> %s", from_, to)
            return [BoardSnapshot(board)]

        source = source or default_source()

        swapped = board.copy()
        swapped.swap(from_, to)

        matches = MoveResolver._swap_matches(from_, to, swapped)
        if not matches:
            logger.debug("Rejected swap %s -> %s", from_, to)
            return [BoardSnapshot(swapped), BoardSnapshot(board)]

        snapshots = [BoardSnapshot(swapped)]
        settled = MoveResolver._resolve_step(matches, swapped, source, snapshots)

        depth = 0
        while matches := Matcher.unique(settled):
            depth += 1
            settled = MoveResolver._resolve_step(matches, settled, source, snapshots)

        logger.debug(
            "Swap %s -> %s resolved: %d cascade(s), %d points",
            from_, to, depth, sum(s.points for s in snapshots),
        )
        return snapshots

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _swap_matches(from_: Position, to: Position, swapped: Board) -> list[Match]:
        """Matches created at either end of the swap; empty if illegal."""
        if not Solver.are_adjacent(from_, to):
            return []

        found = [
            match
            for match in (Matcher.detect(from_, swapped), Matcher.detect(to, swapped))
            if match is not None
        ]
        return Matcher.claim(found, swapped.size)

    @staticmethod
    def _resolve_step(
        matches: Sequence[Match],
        board: Board,
        source: TileSource,
        snapshots: list[BoardSnapshot],
    ) -> Board:
        """Append the marked, upgraded and fallen boards for *matches*.

        Returns the board after gravity.
        """
        marked = Gravity.mark_consumed(matches, board)

        upgraded = marked.copy()
        for match in matches:
            upgraded.set_tile(
                match.origin, upgraded.tile_at(match.origin).upgrade(match.new_value)
            )

        fallen = Gravity.fall(matches, upgraded, source)

        snapshots.append(BoardSnapshot(marked))
        snapshots.append(BoardSnapshot(upgraded, sum(m.points for m in matches)))
        snapshots.append(BoardSnapshot(fallen))
        return fallen
