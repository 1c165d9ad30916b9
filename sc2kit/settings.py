"""Command line settings for running an agent."""

from __future__ import annotations

import argparse
import enum
import logging
import re
from dataclasses import dataclass, field
from typing import Sequence

from sc2kit.maps import random_1v1_map
from sc2kit.process import default_executable

log = logging.getLogger(__name__)


class _ProtoEnum(enum.IntEnum):
    @property
    def proto_name(self) -> str:
        """The protocol's spelling of this value, such as ``VeryEasy``."""
        return "".join(part.capitalize() for part in self.name.split("_"))

    @classmethod
    def from_proto_name(cls, name: str):
        for member in cls:
            if member.proto_name == name:
                return member
        raise ValueError(name)


class Race(_ProtoEnum):
    NO_RACE = 0
    TERRAN = 1
    ZERG = 2
    PROTOSS = 3
    RANDOM = 4


class Difficulty(_ProtoEnum):
    VERY_EASY = 1
    EASY = 2
    MEDIUM = 3
    MEDIUM_HARD = 4
    HARD = 5
    HARDER = 6
    VERY_HARD = 7
    CHEAT_VISION = 8
    CHEAT_MONEY = 9
    CHEAT_INSANE = 10


class AIBuild(_ProtoEnum):
    RANDOM_BUILD = 1
    RUSH = 2
    TIMING = 3
    POWER = 4
    MACRO = 5
    AIR = 6


def parse_race(value: str) -> Race:
    """A race by name; the first letter may be lower case."""
    value = value[:1].upper() + value[1:]
    try:
        return Race.from_proto_name(value)
    except ValueError:
        raise ValueError(f"Unknown race: {value}") from None


def parse_difficulty(value: str) -> Difficulty:
    try:
        return Difficulty.from_proto_name(value)
    except ValueError:
        raise ValueError(f"Unknown difficulty: {value}") from None


def parse_build(value: str) -> AIBuild:
    try:
        return AIBuild.from_proto_name(value)
    except ValueError:
        raise ValueError(f"Unknown build: {value}") from None


_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False"}


def _parse_bool(value: str) -> bool:
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"invalid boolean: {value}")


def _parse_int(value: str) -> int:
    return int(value, 0)


_DURATION_UNITS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "μs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}
_COMPONENT = r"([0-9]+\.?[0-9]*|\.[0-9]+)(ns|us|µs|μs|ms|s|m|h)"


def _parse_duration(value: str) -> float:
    """Seconds in a duration such as ``2m``, ``1h30m`` or ``250ms``."""
    text = value
    sign = 1.0
    if text[:1] in "+-" and text:
        sign = -1.0 if text[0] == "-" else 1.0
        text = text[1:]
    if text == "0":
        return 0.0
    if not text or not re.fullmatch(f"(?:{_COMPONENT})+", text):
        raise ValueError(f"invalid duration: {value}")
    return sign * sum(float(num) * _DURATION_UNITS[unit] for num, unit in re.findall(_COMPONENT, text))


@dataclass
class Settings:
    """Everything a run can be configured with from the command line."""

    computer_opponent: bool = False
    computer_race: Race = Race.TERRAN
    computer_difficulty: Difficulty = Difficulty.EASY
    computer_build: AIBuild = AIBuild.RANDOM_BUILD
    map_name: str = field(default_factory=random_1v1_map)
    executable: str = field(default_factory=default_executable)
    realtime: bool = False
    connect_timeout: float = 120.0
    game_port: int = 0
    start_port: int = 0
    ladder_server: str = ""
    opponent_id: str = ""

    def set_computer(self, race: Race, difficulty: Difficulty, build: AIBuild) -> None:
        """Play against a built-in computer opponent."""
        self.computer_opponent = True
        self.computer_race = race
        self.computer_difficulty = difficulty
        self.computer_build = build

    def has_process_path(self) -> bool:
        return bool(self.executable)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    """A parser for the command line flags, defaulting to ``settings``.

    Parse into ``settings`` itself with ``parser.parse_args(argv, namespace=settings)``.
    """
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument("-h", "-help", "--help", action="help", help="Prints help message")

    def flag(name, dest, help_text, **kwargs):
        parser.add_argument(f"-{name}", f"--{name}", dest=dest, default=getattr(settings, dest), help=help_text, **kwargs)

    def bool_flag(name, dest, help_text):
        flag(name, dest, help_text, nargs="?", const=True, type=_parse_bool, metavar="BOOL")

    bool_flag("ComputerOpponent", "computer_opponent", "If we set up a computer opponent")
    flag("ComputerRace", "computer_race", "Race of computer opponent", type=parse_race)
    flag("ComputerDifficulty", "computer_difficulty", "Difficulty of computer opponent", type=parse_difficulty)
    flag("ComputerBuild", "computer_build", "Build of computer opponent", type=parse_build)
    flag("map", "map_name", "Which map to run.")
    flag("executable", "executable", "The path to StarCraft II.")
    bool_flag("realtime", "realtime", "Whether to run StarCraft II in real time or not.")
    flag(
        "timeout",
        "connect_timeout",
        "Timeout for how long the library will block for a response.",
        type=_parse_duration,
    )
    flag("GamePort", "game_port", "Port of client to connect to", type=_parse_int)
    flag("StartPort", "start_port", "Starting server port", type=_parse_int)
    flag("LadderServer", "ladder_server", "Ladder server address")
    flag("OpponentId", "opponent_id", "Ladder ID of the opponent (for learning bots)")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> Settings:
    """Settings from the command line, starting from the defaults."""
    settings = Settings()
    build_parser(settings).parse_args(argv, namespace=settings)
    if not settings.has_process_path():
        log.warning(
            "Can't find executable path, hope that it's ok. If not, "
            "please run StarCraft II first or use the --executable <path> arg"
        )
    return settings