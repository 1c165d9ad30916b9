"""Locating the game executable on disk."""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from pathlib import Path
from typing import Mapping

from sc2kit.properties import read_properties

log = logging.getLogger(__name__)

_SHELL_FOLDERS_KEY = "HKCU\\Software\\Microsoft\\Windows\\CurrentVersion\\Explorer\\Shell Folders"
_PERSONAL_PREFIX = "    Personal    REG_SZ    "


def _is_windows(platform: str) -> bool:
    return platform.startswith("win")


def sc2_path(path: str) -> str:
    """The install root above a ``Versions`` directory in ``path``, or ``""``."""
    while True:
        prev = path
        path = os.path.dirname(path)
        if os.path.basename(path) == "Versions":
            return os.path.dirname(path)
        if path == prev:
            return ""


def get_subdirs(directory: str) -> list[str]:
    """Sorted names of the subdirectories of ``directory``; empty if unreadable."""
    try:
        with os.scandir(directory) as entries:
            return sorted(entry.name for entry in entries if entry.is_dir())
    except OSError:
        return []


def bin_path(platform: str | None = None) -> str:
    """The executable's path relative to a version directory."""
    platform = platform or sys.platform
    if _is_windows(platform):
        return "SC2_x64.exe"
    if platform == "darwin":
        return "SC2.app/Contents/MacOS/SC2"
    return "SC2_x64"


def user_directory(platform: str | None = None) -> str:
    """The directory holding the game's per-user files.

    Raises OSError if it cannot be determined.
    """
    platform = platform or sys.platform
    if _is_windows(platform):
        completed = subprocess.run(
            ["reg", "query", _SHELL_FOLDERS_KEY, "/v", "Personal"],
            capture_output=True,
            check=False,
        )
        output = (completed.stdout + completed.stderr).decode(errors="replace").strip()
        if completed.returncode != 0:
            log.warning("Documents directory lookup failed: %s", output)
            raise OSError(f"documents directory lookup failed: {output}")
        lines = output.split("\r\n")
        if len(lines) < 2:
            raise OSError(f"unexpected registry output: {output}")
        return lines[1][len(_PERSONAL_PREFIX):]

    try:
        home = str(Path.home())
    except RuntimeError as exc:
        raise OSError(f"cannot determine home directory: {exc}") from exc
    if platform == "darwin":
        return os.path.join(home, "Library", "Application Support", "Blizzard")
    return home


def default_executable(environ: Mapping[str, str] | None = None, platform: str | None = None) -> str:
    """Best guess at the newest installed game executable, or ``""``."""
    environ = os.environ if environ is None else environ
    platform = platform or sys.platform
    path = ""

    sc2path = environ.get("SC2PATH", "")
    if sc2path:
        log.info("SC2PATH: %s", sc2path)
        path = os.path.join(sc2path, "Versions", "dummy")

    info_file = ""
    try:
        user_dir = user_directory(platform)
    except OSError as exc:
        log.warning("Error getting user directory: %s", exc)
    else:
        if user_dir:
            info_file = os.path.join(user_dir, "Starcraft II", "ExecuteInfo.txt")
            log.info("ExecuteInfo path: %s", info_file)

    try:
        props = read_properties(info_file)
    except OSError as exc:
        log.info("Error reading `executable`: %s", exc)
    else:
        path = props.get_string("executable", path)
        log.info("  executable = %s", path)

    root = sc2_path(path)
    if root:
        versions = os.path.join(root, "Versions")
        for sub in reversed(get_subdirs(versions)):
            candidate = os.path.join(versions, sub, bin_path(platform))
            if os.path.exists(candidate):
                path = candidate
                break
    return path


def process_path_for_build(path: str, build: int) -> str:
    """The executable for base build ``build`` next to ``path``; ``path`` if build is 0."""
    if build == 0:
        return path
    exe = os.path.basename(path)
    root = sc2_path(path)
    if not root:
        log.warning("Can't find game dir: %s", path)
    result = os.path.join(root, "Versions", f"Base{build}", exe)
    if not os.path.exists(result):
        log.warning("Base version not found: %s", result)
    return result