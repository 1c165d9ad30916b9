"""Points, units and simple centre-of-mass clustering."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(frozen=True)
class Point2D:
    """A point on the map plane."""

    x: float = 0.0
    y: float = 0.0

    def distance2(self, other: Point2D) -> float:
        """Squared Euclidean distance to another point."""
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def distance(self, other: Point2D) -> float:
        """Euclidean distance to another point."""
        return math.sqrt(self.distance2(other))


class Alliance(enum.IntEnum):
    """Relationship of a unit's owner to the observing player."""

    SELF = 1
    ALLY = 2
    NEUTRAL = 3
    ENEMY = 4


@dataclass
class Unit:
    """The observed state of one unit."""

    tag: int
    pos: Point2D
    unit_type: int = 0
    name: str = ""
    alliance: Alliance = Alliance.NEUTRAL
    radius: float = 0.0
    has_minerals: bool = False
    has_vespene: bool = False
    mineral_contents: int = 0
    vespene_contents: int = 0
    is_snapshot: bool = False
    is_structure: bool = False
    is_town_hall: bool = False
    is_gas_building: bool = False
    is_worker: bool = False


class UnitCluster:
    """A group of units together with their centre of mass."""

    def __init__(self, units: Iterable[Unit] = ()) -> None:
        self._sum_x = 0.0
        self._sum_y = 0.0
        self._units: list[Unit] = []
        for unit in units:
            self.add(unit)

    def add(self, unit: Unit) -> None:
        """Add a unit and update the centre of mass."""
        self._sum_x += unit.pos.x
        self._sum_y += unit.pos.y
        self._units.append(unit)

    def clear(self) -> None:
        """Remove every unit from the cluster."""
        self._sum_x = 0.0
        self._sum_y = 0.0
        self._units.clear()

    def center(self) -> Point2D:
        """Centre of mass, or the origin for an empty cluster."""
        if not self._units:
            return Point2D()
        n = len(self._units)
        return Point2D(self._sum_x / n, self._sum_y / n)

    def count(self) -> int:
        """Number of units in the cluster."""
        return len(self._units)

    @property
    def units(self) -> tuple[Unit, ...]:
        """The units in the order they were added."""
        return tuple(self._units)

    def __len__(self) -> int:
        return len(self._units)

    def __iter__(self) -> Iterator[Unit]:
        return iter(self._units)


def cluster(units: Iterable[Unit], distance: float) -> list[UnitCluster]:
    """Group units greedily: each joins the nearest cluster within ``distance``."""
    max_distance = distance * distance
    clusters: list[UnitCluster] = []
    for unit in units:
        best: UnitCluster | None = None
        min_dist = math.inf
        for candidate in clusters:
            d = unit.pos.distance2(candidate.center())
            if d < min_dist:
                best, min_dist = candidate, d
        if best is None or min_dist > max_distance:
            best = UnitCluster()
            clusters.append(best)
        best.add(unit)
    return clusters