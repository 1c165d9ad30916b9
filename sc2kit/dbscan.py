"""Density-based clustering of units."""

from __future__ import annotations

from typing import Mapping

from sc2kit.cluster import Point2D, Unit, UnitCluster


class DBSCAN:
    """Clusters a set of units keyed by tag with the DBSCAN algorithm."""

    def __init__(self, units: Mapping[int, Unit] | None = None) -> None:
        self.units: dict[int, Unit] = dict(units or {})

    def cluster(self, min_pts: int, eps: float) -> tuple[list[UnitCluster], list[Unit]]:
        """Return the clusters found and the units that were outliers when visited."""
        eps2 = eps * eps
        clustered: set[int] = set()
        clusters: list[UnitCluster] = []
        outliers: list[Unit] = []

        for tag, unit in self.units.items():
            if tag in clustered:
                continue

            neighbors = self._neighbors(unit.pos, eps2)
            if len(neighbors) < min_pts:
                outliers.append(unit)
                continue

            group = UnitCluster()
            clusters.append(group)
            group.add(unit)
            clustered.add(unit.tag)
            members = [unit]
            self._absorb(neighbors, group, members, clustered)

            # members grows while being walked, expanding the cluster outwards
            for member in members:
                neighbors = self._neighbors(member.pos, eps2)
                if len(neighbors) >= min_pts:
                    self._absorb(neighbors, group, members, clustered)

        return clusters, outliers

    def _neighbors(self, pos: Point2D, eps2: float) -> list[int]:
        return [tag for tag, other in self.units.items() if pos.distance2(other.pos) <= eps2]

    def _absorb(
        self,
        neighbors: list[int],
        group: UnitCluster,
        members: list[Unit],
        clustered: set[int],
    ) -> None:
        for tag in neighbors:
            if tag not in clustered:
                unit = self.units[tag]
                group.add(unit)
                members.append(unit)
                clustered.add(tag)