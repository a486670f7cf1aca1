"""Value types produced by the matching engine."""

from __future__ import annotations

from dataclasses import dataclass

from backend.models.board import Board, Position


@dataclass(frozen=True)
class Match:
    """A run of three or more equal tiles collapsing into ``origin``.

    ``consumed`` lists every merged position except the origin itself.
    """

    origin: Position
    new_value: int
    consumed: tuple[Position, ...]

    @property
    def points(self) -> int:
        return 2**self.new_value

    @property
    def positions(self) -> tuple[Position, ...]:
        return (self.origin, *self.consumed)


@dataclass(frozen=True)
class BoardSnapshot:
    """One animation beat: a board plus the points earned reaching it."""

    board: Board
    points: int = 0
