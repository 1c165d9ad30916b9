"""Launching game processes and assigning the ports a multiplayer game uses."""

from __future__ import annotations

import logging
import os
import signal
import subprocess
import sys
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from sc2kit.process import sc2_path

log = logging.getLogger(__name__)

DEFAULT_NET_ADDRESS = "127.0.0.1"
LAUNCH_PORT_START = 8168


@dataclass(frozen=True)
class PortSet:
    """A pair of ports used by one side of a game connection."""

    game_port: int
    base_port: int


@dataclass
class Ports:
    """Ports a multiplayer game is played over; empty for single-player games."""

    shared_port: int = 0
    server_ports: PortSet | None = None
    client_ports: list[PortSet] = field(default_factory=list)


def setup_ports(num_agents: int, start_port: int, participants: int | None = None) -> Ports:
    """Ports for a game of ``num_agents`` agents, counting up from ``start_port``.

    ``participants`` is the number of human (agent) players when it should be
    checked; with ``None`` every agent counts. A game with at most one such
    player needs no ports and gets an empty ``Ports``.
    """
    humans = num_agents if participants is None else participants
    if humans <= 1:
        return Ports()

    clients = []
    for i in range(num_agents):
        base = start_port + 4 + i * 2
        clients.append(PortSet(base, base + 1))
    return Ports(
        shared_port=start_port + 1,
        server_ports=PortSet(start_port + 2, start_port + 3),
        client_ports=clients,
    )


def launch_args(
    net_address: str,
    port: int,
    data_version: str = "",
    extra_args: Sequence[str] = (),
) -> list[str]:
    """Command line arguments for a game process listening on ``net_address:port``."""
    # DirectX fails if several games start fullscreen, so force windowed mode.
    args = ["-listen", net_address, "-port", str(port), "-displayMode", "0"]
    if data_version:
        args += ["-dataVersion", data_version]
    args.extend(extra_args)
    return args


def working_directory(path: str, platform: str | None = None) -> str | None:
    """The directory the game must be started in, or ``None`` where it does not matter."""
    platform = platform or sys.platform
    if not platform.startswith("win"):
        return None
    exe = os.path.basename(path)
    support = "Support64" if "_x64" in exe else "Support"
    return os.path.join(sc2_path(path), support)


def start_process(path: str, args: Sequence[str], platform: str | None = None) -> int:
    """Start the executable and return its process id, or 0 if it could not start."""
    cwd = working_directory(path, platform)
    try:
        proc = subprocess.Popen([path, *args], cwd=cwd)
    except OSError as exc:
        log.warning("Unable to start %s: %s", path, exc)
        return 0
    log.info("Launched %s, PID: %s", path, proc.pid)
    return proc.pid


def kill_all(pids: Iterable[int]) -> list[int]:
    """Kill each process; returns the ids a kill signal was delivered to."""
    sig = getattr(signal, "SIGKILL", signal.SIGTERM)
    killed = []
    for pid in pids:
        if pid <= 0:
            continue
        try:
            os.kill(pid, sig)
        except OSError as exc:
            log.debug("Could not kill %s: %s", pid, exc)
            continue
        killed.append(pid)
    return killed