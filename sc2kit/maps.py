"""Ladder map pools and map path resolution."""

from __future__ import annotations

import os
import random
import sys

MAPS_2018_SEASON_3 = (
    "AcidPlantLE",
    "BlueshiftLE",
    "CeruleanFallLE",
    "DreamcatcherLE",
    "FractureLE",
    "LostAndFoundLE",
    "ParaSiteLE",
)

MAPS_2018_SEASON_4 = (
    "AutomatonLE",
    "BlueshiftLE",
    "CeruleanFallLE",
    "DarknessSanctuaryLE",
    "KairosJunctionLE",
    "ParaSiteLE",
    "PortAleksanderLE",
)

MAPS_2019_LADDER_8_PRE_2 = (
    "Acropolis",
    "Artana",
    "CrystalCavern",
    "DigitalFrontier",
    "OldSunshine",
    "Treachery",
    "Triton",
)

MAPS_2019_LADDER_8 = (
    "AcropolisLE",
    "DiscoBloodbathLE",
    "EphemeronLE",
    "ThunderbirdLE",
    "TritonLE",
    "WintersGateLE",
    "WorldofSleepersLE",
)

MAPS_2021_SEASON_1 = (
    "DeathAura506",
    "EternalEmpire506",
    "EverDream506",
    "GoldenWall506",
    "IceandChrome506",
    "PillarsofGold506",
    "Submarine506",
)

CURRENT_MAP_POOL = MAPS_2021_SEASON_1

MAP_EXTENSION = ".SC2Map"


def random_1v1_map(rng: random.Random | None = None) -> str:
    """A random map file name from the current 1v1 ladder pool."""
    rng = rng or random.Random()
    return rng.choice(CURRENT_MAP_POOL) + MAP_EXTENSION


def map_path(map_name: str, sc2_root: str, platform: str | None = None) -> str:
    """Where the game expects to find ``map_name``.

    Outside Windows the game looks in the ``Maps`` directory of the install.
    """
    platform = platform or sys.platform
    if platform.startswith("win"):
        return map_name
    return os.path.join(sc2_root, "Maps", map_name)