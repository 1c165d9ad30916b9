"""Building footprints and a grid of where structures can be placed."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from sc2kit.cluster import Point2D, Unit
from sc2kit.expansions import DebugBox
from sc2kit.grid import ByteGrid, HeightMap

log = logging.getLogger(__name__)

_size_cache: dict[int, tuple[int, int]] = {}


def unit_placement_size(unit: Unit) -> tuple[int, int]:
    """Estimate a structure's (width, height) footprint from its radius.

    Results are cached per unit type.
    """
    cached = _size_cache.get(unit.unit_type)
    if cached is not None:
        return cached

    # Round to the nearest half tile
    x2, y2 = int(unit.pos.x * 2 + 0.5), int(unit.pos.y * 2 + 0.5)
    x, y = x2 / 2, y2 / 2
    x_even, y_even = x2 % 2 == 0, y2 % 2 == 0

    # Bounds from the radius the game reports
    x_min, y_min = int(x - unit.radius + 0.5), int(y - unit.radius + 0.5)
    x_max, y_max = int(x + unit.radius + 0.5), int(y + unit.radius + 0.5)

    # If the radii are not symmetric, take the smaller one
    rx = min(x - x_min, x_max - x)
    ry = min(y - y_min, y_max - y)

    x_min, y_min = int(unit.pos.x - rx + 0.5), int(unit.pos.y - ry + 0.5)
    x_max, y_max = int(unit.pos.x + rx + 0.5), int(unit.pos.y + ry + 0.5)

    # Non-square structures
    if x_even != y_even:
        if y_even:
            x_min += 1
            x_max -= 1
        else:
            y_min += 1
            y_max -= 1

    size = (x_max - x_min, y_max - y_min)
    _size_cache[unit.unit_type] = size
    log.debug("type %s at %s radius %s -> %s", unit.unit_type, unit.pos, unit.radius, size)
    return size


@dataclass(frozen=True)
class _Structure:
    point: Point2D
    size: tuple[int, int]


def _footprint(pos: Point2D, size: tuple[int, int]) -> Iterable[tuple[int, int]]:
    x_min, y_min = int(pos.x - size[0] / 2), int(pos.y - size[1] / 2)
    for y in range(y_min, y_min + size[1]):
        for x in range(x_min, x_min + size[0]):
            yield x, y


class PlacementGrid:
    """Tracks which tiles are free of structures on top of the map's placement grid."""

    def __init__(self, raw: ByteGrid, units: Iterable[Unit] = ()) -> None:
        self.raw = raw
        self.grid = raw.copy()
        self._structures: dict[int, _Structure] = {}
        self.update(units)

    def update(self, units: Iterable[Unit]) -> None:
        """Sync the grid with the structures currently present among ``units``."""
        units = list(units)
        by_tag = {u.tag: u for u in units}

        for tag, info in list(self._structures.items()):
            unit = by_tag.get(tag)
            if (
                unit is None
                or not unit.is_structure
                or unit.pos != info.point
                or unit_placement_size(unit) != info.size
            ):
                self._mark(info.point, info.size, True)
                del self._structures[tag]

        for unit in units:
            if unit.tag not in self._structures and unit.is_structure:
                info = _Structure(unit.pos, unit_placement_size(unit))
                self._mark(info.point, info.size, False)
                self._structures[unit.tag] = info

    def _mark(self, pos: Point2D, size: tuple[int, int], value: bool) -> None:
        byte = 255 if value else 0
        for x, y in _footprint(pos, size):
            self.grid.set(x, y, byte)

    def _check(self, pos: Point2D, size: tuple[int, int], value: bool) -> bool:
        return all(bool(self.grid.get(x, y)) == value for x, y in _footprint(pos, size))

    def can_place(self, unit: Unit, pos: Point2D) -> bool:
        """Whether a structure of ``unit``'s type fits at ``pos`` right now."""
        return self._check(pos, unit_placement_size(unit), True)

    def debug_boxes(self, height_map: HeightMap) -> list[DebugBox]:
        """Boxes outlining every tracked structure footprint."""
        boxes = []
        for info in self._structures.values():
            z = height_map.interpolate(info.point.x, info.point.y)
            half_w, half_h = info.size[0] / 2, info.size[1] / 2
            boxes.append(
                DebugBox(
                    None,
                    (info.point.x - half_w, info.point.y - half_h, z),
                    (info.point.x + half_w, info.point.y + half_h, z + 1),
                )
            )
        return boxes