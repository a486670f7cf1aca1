"""Board model for the tile-merge puzzle."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum

from backend.models.tile import Tile, TileSource, default_source


class OutOfBoundsError(IndexError):
    """A position lies outside the board."""


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def offset(self) -> tuple[int, int]:
        return _OFFSETS[self]


# Row 0 is the top of the board; gravity pulls towards the last row.
_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


@dataclass(frozen=True)
class Position:
    x: int
    y: int

    def step(self, direction: Direction) -> Position:
        dx, dy = direction.offset
        return Position(self.x + dx, self.y + dy)


def position_to_index(position: Position, size: int) -> int:
    """Flatten *position* to ``y * size + x``."""
    return position.y * size + position.x


def index_to_position(index: int, size: int) -> Position:
    if not 0 <= index < size * size:
        raise OutOfBoundsError(f"Index {index} outside a {size}×{size} board.")
    y, x = divmod(index, size)
    return Position(x, y)


@dataclass
class Board:
    """A square grid of tiles stored column-major: ``board[x][y]``.

    Every cell always holds a tile. Engine code never writes to a board it
    was handed; it copies first and writes to the copy.
    """

    columns: list[list[Tile]]

    def __post_init__(self) -> None:
        size = len(self.columns)
        if any(len(column) != size for column in self.columns):
            raise ValueError("Board must be square: every column needs "
                             f"{size} cells.")

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(
        cls,
        size: int,
        values: list[int],
        source: TileSource | None = None,
    ) -> Board:
        """Create a board from a flat list of values indexed ``y*size + x``.

        The list reads like the board, top row first::

            Board.from_flat(3, [1, 2, 3,
                                4, 1, 2,
                                3, 4, 1])
        """
        if len(values) != size * size:
            raise ValueError(
                f"Expected {size * size} values for a {size}×{size} board, "
                f"got {len(values)}."
            )
        source = source or default_source()
        columns = [
            [source.tile(values[y * size + x]) for y in range(size)]
            for x in range(size)
        ]
        return cls(columns=columns)

    @classmethod
    def random(cls, size: int, source: TileSource | None = None) -> Board:
        """Create a board of independent random tiles (matches allowed)."""
        source = source or default_source()
        return cls(columns=[[source.tile() for _ in range(size)] for _ in range(size)])

    # -- queries --------------------------------------------------------------

    @property
    def size(self) -> int:
        return len(self.columns)

    def __getitem__(self, x: int) -> list[Tile]:
        return self.columns[x]

    def __len__(self) -> int:
        return len(self.columns)

    def in_bounds(self, position: Position) -> bool:
        return 0 <= position.x < self.size and 0 <= position.y < self.size

    def positions(self) -> Iterator[Position]:
        """Yield every position in column-major order."""
        for x in range(self.size):
            for y in range(self.size):
                yield Position(x, y)

    def tile_at(self, position: Position) -> Tile:
        if not self.in_bounds(position):
            raise OutOfBoundsError(
                f"Board cell out of bounds: x={position.x} y={position.y}"
            )
        return self.columns[position.x][position.y]

    def position_to_index(self, position: Position) -> int:
        return position_to_index(position, self.size)

    def index_to_position(self, index: int) -> Position:
        return index_to_position(index, self.size)

    def values(self) -> list[list[int]]:
        """Return the tile values, column-major like the board itself."""
        return [[tile.value for tile in column] for column in self.columns]

    def to_flat(self) -> list[int]:
        """Inverse of :meth:`from_flat`: values indexed ``y*size + x``."""
        return [
            self.columns[x][y].value
            for y in range(self.size)
            for x in range(self.size)
        ]

    # -- mutation (private copies only) ---------------------------------------

    def set_tile(self, position: Position, tile: Tile) -> None:
        if not self.in_bounds(position):
            raise OutOfBoundsError(
                f"Board cell out of bounds: x={position.x} y={position.y}"
            )
        self.columns[position.x][position.y] = tile

    def swap(self, a: Position, b: Position) -> None:
        """Exchange the tiles at *a* and *b* in place."""
        tile_a = self.tile_at(a)
        self.set_tile(a, self.tile_at(b))
        self.set_tile(b, tile_a)

    def copy(self) -> Board:
        # Tiles are immutable, so sharing them between copies is safe.
        return Board(columns=[column[:] for column in self.columns])
