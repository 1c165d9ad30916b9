"""Expansion bases, their resources, and the distances between them."""

from __future__ import annotations

import dataclasses
from typing import Callable, Iterable, Sequence

from sc2kit.cluster import Alliance, Point2D, Unit, UnitCluster
from sc2kit.expansions import BaseLocation

PathingQuery = Callable[[Sequence[tuple[Point2D, Point2D]]], Sequence[float]]

_MAX_DIST = 256.0 * 256.0


class Base:
    """One expansion: its resources, location and what currently occupies it."""

    def __init__(self, game_map: GameMap, index: int, location: BaseLocation) -> None:
        self._map = game_map
        self.index = index

        # Geysers are weighted 4x so unbalanced gas bases get a better centre
        weighted = UnitCluster()
        minerals = UnitCluster()
        for unit in location.resources:
            if unit.has_vespene:
                for _ in range(3):
                    weighted.add(unit)
            else:
                minerals.add(unit)
            weighted.add(unit)

        self.resource_center: Point2D = weighted.center()
        self.mineral_center: Point2D = minerals.center()
        self.minerals: list[Unit] = []
        self.geysers: list[Unit] = []
        self.location: Point2D = location.location
        self.town_hall: Unit | None = None
        self.gas_buildings: dict[Point2D, Unit] = {}
        self.self_workers: set[int] = set()
        self.other_workers: set[int] = set()

    def update_resource(self, unit: Unit) -> None:
        """Record the latest observation of a mineral field or geyser."""
        if unit.has_minerals:
            self._update_or_add(self.minerals, unit)
        elif unit.has_vespene:
            self._update_or_add(self.geysers, unit)
        else:
            raise ValueError(f"unknown resource: {unit}")

    def refresh(self, observed_tags: Iterable[int]) -> None:
        """Drop exhausted minerals and clear the per-step occupancy fields."""
        observed = set(observed_tags)
        self.minerals = [u for u in self.minerals if u.tag in observed]
        self.town_hall = None
        self.gas_buildings.clear()
        self.self_workers.clear()
        self.other_workers.clear()

    def _update_or_add(self, units: list[Unit], unit: Unit) -> None:
        for i, existing in enumerate(units):
            if existing.pos.distance2(unit.pos) < 1:
                if existing.pos != unit.pos:
                    raise ValueError(f"{existing.pos} != {unit.pos}")
                if unit.is_snapshot:
                    # Snapshots do not carry resource contents
                    unit = dataclasses.replace(
                        unit,
                        mineral_contents=existing.mineral_contents,
                        vespene_contents=existing.vespene_contents,
                    )
                units[i] = unit
                return

        # Keep sorted: large patches by distance, then small patches by distance
        is_small = unit.name.endswith("750")
        dist = unit.pos.distance2(self.location)
        for i, existing in enumerate(units):
            existing_small = existing.name.endswith("750")
            if not existing_small and is_small:
                continue
            if is_small != existing_small or dist < existing.pos.distance2(self.location):
                units.insert(i, unit)
                return
        units.append(unit)

    def is_self_owned(self) -> bool:
        return self.town_hall is not None and self.town_hall.alliance == Alliance.SELF

    def is_enemy_owned(self) -> bool:
        return self.town_hall is not None and self.town_hall.alliance == Alliance.ENEMY

    def is_unowned(self) -> bool:
        return self.town_hall is None

    def natural(self) -> Base | None:
        """The closest other base by walking distance."""
        best: Base | None = None
        min_dist = _MAX_DIST
        for other in self._map.bases:
            dist = self.walk_distance(other)
            if 0 < dist < min_dist:
                best, min_dist = other, dist
        return best

    def walk_distance(self, other: Base) -> float:
        """Ground distance between the two bases."""
        return self._map.distance(self.index, other.index)


class GameMap:
    """All expansion bases on a map with their pairwise distances."""

    def __init__(
        self,
        locations: Iterable[BaseLocation],
        start_location: Point2D = Point2D(),
        pathing: PathingQuery | None = None,
    ) -> None:
        """``pathing`` answers a batch of (start, end) path queries with distances."""
        self.start_location = start_location
        self.bases: list[Base] = []
        self._distances: list[float] = []
        self._cache: dict[Point2D, Base | None] = {}

        queries: list[tuple[Point2D, Point2D]] = []
        for j, loc in enumerate(locations):
            base = Base(self, j, loc)
            self.bases.append(base)
            for earlier in self.bases[:j]:
                # Path queries are not always symmetric, so ask both ways and keep the max
                queries.append((earlier.resource_center, base.resource_center))
                queries.append((base.resource_center, earlier.resource_center))
                self._distances.append(earlier.resource_center.distance(base.resource_center))

        if pathing is not None and queries:
            for k, dist in enumerate(pathing(queries)):
                if self._distances[k // 2] < dist:
                    self._distances[k // 2] = dist

    def distance(self, i: int, j: int) -> float:
        """Distance between bases ``i`` and ``j``."""
        if i == j:
            return 0.0
        if i > j:
            i, j = j, i
        return self._distances[j * (j - 1) // 2 + i]

    def update(self, resources: Iterable[Unit], units: Iterable[Unit], observed_tags: Iterable[int]) -> None:
        """Apply one step of observations to every base."""
        for resource in resources:
            base = self.nearest_base(resource.pos)
            if base is not None:
                base.update_resource(resource)

        observed = set(observed_tags)
        for base in self.bases:
            base.refresh(observed)

        for unit in units:
            base = self.nearest_base(unit.pos)
            if base is None:
                continue
            if unit.is_town_hall:
                current = base.town_hall
                if current is None or unit.pos.distance2(base.location) < current.pos.distance2(base.location):
                    base.town_hall = unit
            elif unit.is_gas_building:
                base.gas_buildings[unit.pos] = unit
            elif unit.is_worker:
                if unit.alliance == Alliance.SELF:
                    base.self_workers.add(unit.tag)
                else:
                    base.other_workers.add(unit.tag)

    def nearest_base(self, pos: Point2D) -> Base | None:
        """Nearest base to a position, memoised per half tile."""
        key = Point2D(int(pos.x * 2) / 2, int(pos.y * 2) / 2)
        if key not in self._cache:
            self._cache[key] = self.nearest_base_if(key, lambda _: True)
        return self._cache[key]

    def nearest_base_if(self, pos: Point2D, predicate: Callable[[Base], bool]) -> Base | None:
        """Nearest base to a position among those accepted by ``predicate``."""
        best: Base | None = None
        min_dist = _MAX_DIST
        for base in self.bases:
            dist = pos.distance2(base.location)
            if dist < min_dist and predicate(base):
                best, min_dist = base, dist
        return best

    def nearest_self_base(self, pos: Point2D) -> Base | None:
        return self.nearest_base_if(pos, Base.is_self_owned)

    def nearest_enemy_base(self, pos: Point2D) -> Base | None:
        return self.nearest_base_if(pos, Base.is_enemy_owned)