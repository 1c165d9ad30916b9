"""Finding the best town hall location for each resource cluster."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from sc2kit.cluster import Point2D, Unit, UnitCluster, cluster
from sc2kit.grid import ByteGrid, HeightMap

MINERAL_FIELD_450 = 1961

BUILDABLE = 255
NEAR_RESOURCE = 128
RESOURCE_BLOCKED = 1


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int


WHITE = Color(255, 255, 255)
RED = Color(255, 1, 1)
BLUE = Color(1, 1, 255)
GREEN = Color(1, 255, 1)


@dataclass(frozen=True)
class DebugBox:
    """An axis-aligned box to draw in-game."""

    color: Color | None
    min_point: tuple[float, float, float]
    max_point: tuple[float, float, float]


@dataclass
class BaseLocation:
    """A resource cluster and the best town hall location for it."""

    resources: UnitCluster
    location: Point2D


def calculate_base_locations(resources: Iterable[Unit], placement: ByteGrid) -> list[BaseLocation]:
    """Group resources into clusters and pick a town hall location for each.

    ``placement`` is marked in place so it can be passed on to ``debug_boxes``.
    """
    resources = list(resources)
    clusters = cluster((u for u in resources if u.unit_type != MINERAL_FIELD_450), 15)

    for u in resources:
        if u.has_minerals:
            mark_unbuildable(placement, int(u.pos.x - 0.5), int(u.pos.y), 2, 1)
    for u in resources:
        if u.has_vespene:
            mark_unbuildable(placement, int(u.pos.x - 1), int(u.pos.y - 1), 3, 3)

    for y in range(placement.height):
        for x in range(placement.width):
            if placement.get(x, y) < NEAR_RESOURCE:
                expand_unbuildable(placement, x, y)

    return [BaseLocation(group, _nearest_buildable(placement, group.center())) for group in clusters]


def _nearest_buildable(placement: ByteGrid, pt: Point2D) -> Point2D:
    px, py = int(pt.x), int(pt.y)
    r2_min, x_best, y_best = 256, -1, -1
    r = 0
    while r * r <= r2_min:
        x_min, x_max, y_min, y_max = px - r, px + r, py - r, py + r
        for y in range(y_min, y_max + 1):
            for x in range(x_min, x_max + 1):
                on_ring = x in (x_min, x_max) or y in (y_min, y_max)
                if on_ring and placement.get(x, y) == BUILDABLE:
                    dx, dy = x - px, y - py
                    r2 = dx * dx + dy * dy
                    if r2 < r2_min:
                        r2_min, x_best, y_best = r2, x, y
        r += 1
    return Point2D(x_best + 0.5, y_best + 0.5)


def mark_unbuildable(placement: ByteGrid, px: int, py: int, w: int, h: int) -> None:
    """Mark a w x h area around (px, py), less its corners, as too close to resources."""
    x_min, x_max = px - 3, px + w + 2
    y_min, y_max = py - 3, py + h + 2
    for y in range(y_min, y_max + 1):
        for x in range(x_min, x_max + 1):
            if y in (y_min, y_max) and x in (x_min, x_max):
                continue
            if placement.get(x, y) == BUILDABLE:
                placement.set(x, y, RESOURCE_BLOCKED)


def expand_unbuildable(placement: ByteGrid, px: int, py: int) -> None:
    """Mark every buildable tile within 2 of (px, py) as unsuitable for a centre."""
    for y in range(py - 2, py + 3):
        for x in range(px - 2, px + 3):
            if placement.get(x, y) == BUILDABLE:
                placement.set(x, y, NEAR_RESOURCE)


def base_loc_color(value: int, pathable: bool) -> Color | None:
    """Display colour for a placement value."""
    if value == BUILDABLE:
        return WHITE
    if value == NEAR_RESOURCE:
        return BLUE
    if value == RESOURCE_BLOCKED:
        return RED
    if pathable:
        return GREEN
    return None


def debug_boxes(
    locations: Iterable[BaseLocation],
    placement: ByteGrid,
    pathable: ByteGrid,
    height_map: HeightMap,
) -> list[DebugBox]:
    """Boxes visualising the placement search and the chosen base locations."""
    boxes: list[DebugBox] = []
    for y in range(placement.height):
        for x in range(placement.width):
            color = base_loc_color(placement.get(x, y), bool(pathable.get(x, y)))
            if color is not None:
                z = height_map.interpolate(x + 0.5, y + 0.5)
                boxes.append(DebugBox(color, (x + 0.25, y + 0.25, z), (x + 0.75, y + 0.75, z)))

    for loc in locations:
        points = [u.pos for u in loc.resources]
        if not points:
            raise ValueError("base location has no resources")
        low_x, high_x = min(p.x for p in points), max(p.x for p in points)
        low_y, high_y = min(p.y for p in points), max(p.y for p in points)

        pt = loc.location
        z = height_map.interpolate(pt.x + 0.5, pt.y + 0.5)
        cm = loc.resources.center()
        cmz = height_map.interpolate(cm.x, cm.y)
        boxes.extend(
            [
                DebugBox(GREEN, (pt.x - 2.5, pt.y - 2.5, z), (pt.x + 2.5, pt.y + 2.5, z)),
                DebugBox(GREEN, (pt.x - 0.05, pt.y - 0.05, z), (pt.x + 0.05, pt.y + 0.05, z)),
                DebugBox(WHITE, (cm.x - 0.05, cm.y - 0.05, cmz - 1), (cm.x + 0.05, cm.y + 0.05, cmz + 1)),
                DebugBox(WHITE, (low_x, low_y, cmz - 1), (high_x, high_y, cmz + 1)),
            ]
        )
    return boxes