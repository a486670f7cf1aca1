"""Tile model and the entropy source that spawns new tiles."""

from __future__ import annotations

import itertools
import random
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from backend.models.board import Position

# Spawned tiles are drawn uniformly from 1..MAX_SPAWN_VALUE (displayed 2..16).
MAX_SPAWN_VALUE = 4

# Shared by every source so ids stay unique across injected sources.
_ids = itertools.count(1)


@dataclass(frozen=True)
class Tile:
    """A single tile on the board.

    ``value`` is a power-of-two exponent; the player sees ``2 ** value``.
    A consumed tile stays on the board until gravity removes it and
    remembers the position it merged into.
    """

    id: int
    value: int
    consumed: bool = False
    merged_target: Position | None = None

    @property
    def display_value(self) -> int:
        return 2**self.value

    def consume(self, target: Position) -> Tile:
        """Return this tile marked as merged into *target*."""
        return replace(self, consumed=True, merged_target=target)

    def upgrade(self, value: int) -> Tile:
        """Return the same logical tile carrying *value*."""
        return replace(self, value=value)


class TileSource:
    """Mints tiles with fresh ids and random values.

    Pass a seed (or a ready ``random.Random``) to get a reproducible
    stream of tiles::

        source = TileSource(seed=7)
        source.tile()
    """

    def __init__(
        self,
        seed: int | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random(seed)

    def next_id(self) -> int:
        return next(_ids)

    def random_value(self) -> int:
        return self.rng.randint(1, MAX_SPAWN_VALUE)

    def tile(self, value: int | None = None) -> Tile:
        """Return a new unconsumed tile, random unless *value* is given."""
        if value is None:
            value = self.random_value()
        return Tile(id=self.next_id(), value=value)


_default_source = TileSource()


def default_source() -> TileSource:
    """Source used when callers do not inject their own."""
    return _default_source
