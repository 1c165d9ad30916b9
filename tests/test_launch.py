import os
import subprocess
import sys

import pytest

from sc2kit.launch import (
    LAUNCH_PORT_START,
    PortSet,
    Ports,
    kill_all,
    launch_args,
    setup_ports,
    start_process,
    working_directory,
)


def test_single_agent_gets_no_ports():
    assert setup_ports(1, 5000) == Ports()


def test_single_participant_among_agents_gets_no_ports():
    assert setup_ports(2, 5000, participants=1) == Ports()


@pytest.mark.parametrize("start", [0, 5000, LAUNCH_PORT_START])
def test_multiplayer_port_layout(start):
    ports = setup_ports(2, start)
    assert ports.shared_port == start + 1
    assert ports.server_ports == PortSet(start + 2, start + 3)
    assert ports.client_ports == [PortSet(start + 4, start + 5), PortSet(start + 6, start + 7)]


def test_ports_are_all_distinct():
    ports = setup_ports(4, 9000, participants=4)
    used = [ports.shared_port, ports.server_ports.game_port, ports.server_ports.base_port]
    for client in ports.client_ports:
        used += [client.game_port, client.base_port]
    assert len(ports.client_ports) == 4
    assert len(set(used)) == len(used)


def test_launch_args_minimal():
    assert launch_args("127.0.0.1", 8168) == [
        "-listen", "127.0.0.1", "-port", "8168", "-displayMode", "0",
    ]


def test_launch_args_with_data_version_and_extras():
    args = launch_args("127.0.0.1", 8168, "ABCDEF", ["-verbose"])
    assert args[6:] == ["-dataVersion", "ABCDEF", "-verbose"]


def test_working_directory_outside_windows():
    assert working_directory("/opt/sc2/Versions/Base1/SC2_x64", "linux") is None


@pytest.mark.parametrize(
    "exe, support",
    [("SC2_x64.exe", "Support64"), ("SC2.exe", "Support")],
)
def test_working_directory_on_windows(exe, support):
    root = os.path.join(os.sep, "games", "StarCraft II")
    path = os.path.join(root, "Versions", "Base1", exe)
    assert working_directory(path, "win32") == os.path.join(root, support)


def test_start_process_missing_executable(tmp_path):
    assert start_process(str(tmp_path / "missing"), [], "linux") == 0


def test_start_process_returns_pid():
    pid = start_process(sys.executable, ["-c", "pass"], "linux")
    assert pid > 0


def test_kill_all_empty_and_invalid():
    assert kill_all([]) == []
    assert kill_all([0, -1]) == []


def test_kill_all_kills_process():
    proc = subprocess.Popen([sys.executable, "-c", "import time; time.sleep(30)"])
    try:
        assert kill_all([proc.pid]) == [proc.pid]
        assert proc.wait(timeout=10) != 0
    finally:
        if proc.poll() is None:
            proc.kill()
            proc.wait()