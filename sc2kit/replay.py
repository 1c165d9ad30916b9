"""Finding replay files to run."""

from __future__ import annotations

import os

REPLAY_EXTENSION = ".sc2replay"


def is_replay_file(extension: str) -> bool:
    """Whether a file extension (with its dot) is a replay's, ignoring case."""
    return extension.lower() == REPLAY_EXTENSION


def collect_replays(path: str) -> list[str]:
    """Absolute paths of the replays at ``path``.

    A path with a replay extension is taken as a single replay; otherwise it
    is read as a directory and its replay files are returned in name order.
    Raises OSError if the directory cannot be read.
    """
    path = os.path.abspath(path)
    if is_replay_file(os.path.splitext(path)[1]):
        return [path]

    with os.scandir(path) as entries:
        names = sorted(
            entry.name
            for entry in entries
            if not entry.is_dir() and is_replay_file(os.path.splitext(entry.name)[1])
        )
    return [os.path.join(path, name) for name in names]