"""Byte grids, terrain heights and open-space analysis."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

_OFFSETS4 = ((1, 0), (-1, 0), (0, 1), (0, -1))


@dataclass
class ByteGrid:
    """A width x height grid of byte values; reads outside it give 0."""

    width: int
    height: int
    data: bytearray = field(default=None)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("grid dimensions must not be negative")
        size = self.width * self.height
        if self.data is None:
            self.data = bytearray(size)
        else:
            self.data = bytearray(self.data)
            if len(self.data) != size:
                raise ValueError(f"expected {size} bytes, got {len(self.data)}")

    @classmethod
    def from_bools(cls, rows: Iterable[Iterable[bool]]) -> ByteGrid:
        """Build a grid from rows indexed by y; true cells become 255, false 0."""
        grid_rows = [list(row) for row in rows]
        width = len(grid_rows[0]) if grid_rows else 0
        if any(len(row) != width for row in grid_rows):
            raise ValueError("all rows must have the same length")
        data = bytearray(255 if value else 0 for row in grid_rows for value in row)
        return cls(width, len(grid_rows), data)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            return 0
        return self.data[y * self.width + x]

    def set(self, x: int, y: int, value: int) -> None:
        """Store a byte; writes outside the grid are ignored."""
        if not 0 <= value <= 255:
            raise ValueError(f"byte value out of range: {value}")
        if self.in_bounds(x, y):
            self.data[y * self.width + x] = value

    def copy(self) -> ByteGrid:
        return ByteGrid(self.width, self.height, bytearray(self.data))


@dataclass
class HeightMap:
    """Terrain heights decoded from a byte grid, one larger in each direction."""

    data: ByteGrid

    @property
    def width(self) -> int:
        return self.data.width + 1

    @property
    def height(self) -> int:
        return self.data.height + 1

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> float:
        return self._decode(x, y)

    def interpolate(self, x: float, y: float) -> float:
        """Bilinear interpolated height at fractional map coordinates."""
        x0, y0 = int(x), int(y)
        f00 = self._decode(x0, y0)
        f01 = self._decode(x0, y0 + 1)
        f10 = self._decode(x0 + 1, y0)
        f11 = self._decode(x0 + 1, y0 + 1)
        fx, fy = x - x0, y - y0
        return (
            f00 * (1 - fx) * (1 - fy)
            + f01 * (1 - fx) * fy
            + f10 * fx * (1 - fy)
            + f11 * fx * fy
        )

    def _decode(self, x: int, y: int) -> float:
        if self.data.in_bounds(x, y):
            return (self.data.get(x, y) - 127) / 8
        return -127 / 8


def compute_depth(placement: ByteGrid, pathing: ByteGrid) -> tuple[ByteGrid, int]:
    """Propagate depth values outward from blocked, unbuildable cells.

    Returns the depth grid and the lowest depth assigned.
    """
    if (placement.width, placement.height) != (pathing.width, pathing.height):
        raise ValueError("placement and pathing grids differ in size")

    depth = pathing.copy()
    todo: dict[tuple[int, int], None] = {}
    for y in range(depth.height):
        for x in range(depth.width):
            if depth.get(x, y) == 255:
                if placement.get(x, y):
                    depth.set(x, y, 0)
                else:
                    todo[(x, y)] = None

    processed: set[tuple[int, int]] = set()
    lowest = 255
    while todo:
        current, todo = todo, {}
        for x, y in current:
            neighbors = [(x + dx, y + dy) for dx, dy in _OFFSETS4]
            if depth.get(x, y) != 255:
                value = (max(depth.get(nx, ny) for nx, ny in neighbors) - 1) % 256
                depth.set(x, y, value)
                lowest = min(lowest, value)
            processed.add((x, y))
            for n in neighbors:
                if depth.in_bounds(*n) and n not in processed:
                    todo[n] = None

    total = depth.width * depth.height
    if len(processed) != total:
        raise RuntimeError(f"only processed {len(processed)} of {total} cells")
    return depth, lowest


def compute_openness(placement: ByteGrid, pathing: ByteGrid) -> ByteGrid:
    """Invert the depth grid so that open areas have high values."""
    depth, _ = compute_depth(placement, pathing)
    for y in range(depth.height):
        for x in range(depth.width):
            depth.set(x, y, 255 - depth.get(x, y))
    return depth