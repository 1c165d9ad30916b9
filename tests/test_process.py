import os
import subprocess
from unittest import mock

import pytest

from sc2kit.process import (
    bin_path,
    default_executable,
    get_subdirs,
    process_path_for_build,
    sc2_path,
    user_directory,
)


def _make_exe(root, version):
    exe = root / "Versions" / version / "SC2_x64"
    exe.parent.mkdir(parents=True)
    exe.write_text("")
    return exe


def test_sc2_path_finds_root():
    path = os.path.join("games", "SC2", "Versions", "Base1", "SC2_x64")
    assert sc2_path(path) == os.path.join("games", "SC2")


def test_sc2_path_without_versions():
    assert sc2_path(os.path.join("games", "SC2", "bin", "SC2_x64")) == ""
    assert sc2_path("") == ""


def test_get_subdirs_sorted(tmp_path):
    (tmp_path / "b").mkdir()
    (tmp_path / "a").mkdir()
    (tmp_path / "file.txt").write_text("x")
    assert get_subdirs(str(tmp_path)) == ["a", "b"]


def test_get_subdirs_missing(tmp_path):
    assert get_subdirs(str(tmp_path / "nope")) == []


def test_bin_path_per_platform():
    assert bin_path("win32") == "SC2_x64.exe"
    assert bin_path("darwin") == "SC2.app/Contents/MacOS/SC2"
    assert bin_path("linux") == "SC2_x64"


def test_user_directory_linux(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert user_directory("linux") == str(tmp_path)


def test_user_directory_darwin(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    expected = os.path.join(str(tmp_path), "Library", "Application Support", "Blizzard")
    assert user_directory("darwin") == expected


def test_user_directory_windows_parses_registry():
    out = (
        b"\r\nHKEY_CURRENT_USER\\Software\\Shell Folders\r\n"
        b"    Personal    REG_SZ    C:\\Users\\player\\Documents\r\n\r\n"
    )
    result = subprocess.CompletedProcess(args=[], returncode=0, stdout=out, stderr=b"")
    with mock.patch("subprocess.run", return_value=result) as run:
        assert user_directory("win32") == "C:\\Users\\player\\Documents"
    assert run.call_args[0][0][0] == "reg"


def test_user_directory_windows_failure():
    result = subprocess.CompletedProcess(args=[], returncode=1, stdout=b"", stderr=b"error")
    with mock.patch("subprocess.run", return_value=result):
        with pytest.raises(OSError):
            user_directory("win32")


def test_default_executable_from_execute_info(tmp_path, monkeypatch):
    home = tmp_path / "home"
    root = tmp_path / "sc2"
    _make_exe(root, "Base1")
    newest = _make_exe(root, "Base2")
    (root / "Versions" / "Base3").mkdir()  # no executable inside
    info = home / "Starcraft II" / "ExecuteInfo.txt"
    info.parent.mkdir(parents=True)
    info.write_text(f"executable = {root / 'Versions' / 'Base1' / 'SC2_x64'}\n")
    monkeypatch.setenv("HOME", str(home))
    assert default_executable({}, "linux") == str(newest)


def test_default_executable_from_env(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path / "empty_home"))
    root = tmp_path / "sc2"
    newest = _make_exe(root, "Base9")
    assert default_executable({"SC2PATH": str(root)}, "linux") == str(newest)


def test_default_executable_nothing_found(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert default_executable({}, "linux") == ""


def test_process_path_for_build_zero_unchanged():
    path = os.path.join("sc2", "Versions", "Base1", "SC2_x64")
    assert process_path_for_build(path, 0) == path


def test_process_path_for_build_switches_version():
    path = os.path.join("sc2", "Versions", "Base1", "SC2_x64")
    expected = os.path.join("sc2", "Versions", "Base75689", "SC2_x64")
    assert process_path_for_build(path, 75689) == expected