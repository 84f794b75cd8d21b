"""Board storage: owner and region id of every field."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

# East, north, west, south. Row 0 is the bottom of the rendered board.
DIRECTIONS = [
    (1, 0),
    (0, 1),
    (-1, 0),
    (0, -1),
]


@dataclass(frozen=True)
class Cell:
    owner: int | None = None
    region: int | None = None


class Board:
    """Rectangular grid kept in two flat lists indexed by ``y * width + x``.

    Callers check bounds with :meth:`contains` before reading or writing.
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self._owners: list[int | None] = [None] * (width * height)
        self._regions: list[int | None] = [None] * (width * height)

    @property
    def size(self) -> int:
        return self.width * self.height

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Cell:
        i = y * self.width + x
        return Cell(self._owners[i], self._regions[i])

    def owner_at(self, x: int, y: int) -> int | None:
        return self._owners[y * self.width + x]

    def region_at(self, x: int, y: int) -> int | None:
        return self._regions[y * self.width + x]

    def set_owner(self, x: int, y: int, player: int | None):
        self._owners[y * self.width + x] = player

    def set_region(self, x: int, y: int, region: int | None):
        self._regions[y * self.width + x] = region

    def clear(self, x: int, y: int):
        i = y * self.width + x
        self._owners[i] = None
        self._regions[i] = None

    def neighbors(self, x: int, y: int) -> Iterator[tuple[int, int]]:
        """Yield the on-board 4-neighbours of (x, y) in E, N, W, S order."""
        for dx, dy in DIRECTIONS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < self.width and 0 <= ny < self.height:
                yield nx, ny

    def cells(self) -> Iterator[tuple[int, int]]:
        """Yield every coordinate, row by row from the bottom."""
        for y in range(self.height):
            for x in range(self.width):
                yield x, y
