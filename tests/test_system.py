import subprocess
import sys

import platform
import pytest

from nrclaunch.system import (
    Architecture,
    OperatingSystem,
    UnsupportedPlatformError,
    current_os,
    get_architecture,
    is_rosetta,
    os_version,
    total_memory,
)


def _fake_sysctl(output):
    def run(*args, **kwargs):
        return subprocess.CompletedProcess(args, 0, stdout=output, stderr=b"")

    return run


def test_path_separators():
    assert OperatingSystem.WINDOWS.path_separator() == ";"
    assert OperatingSystem.LINUX.path_separator() == ":"
    assert OperatingSystem.OSX.path_separator() == ":"


def test_unknown_os_has_no_names():
    with pytest.raises(UnsupportedPlatformError):
        OperatingSystem.UNKNOWN.path_separator()
    with pytest.raises(UnsupportedPlatformError):
        OperatingSystem.UNKNOWN.simple_name()
    with pytest.raises(UnsupportedPlatformError):
        OperatingSystem.UNKNOWN.adoptium_name()


def test_adoptium_names():
    assert OperatingSystem.OSX.adoptium_name() == "mac"
    assert OperatingSystem.WINDOWS.adoptium_name() == "windows"
    assert OperatingSystem.LINUX.adoptium_name() == "linux"


def test_display_uses_simple_name():
    assert OperatingSystem.OSX.simple_name() == "osx"
    assert str(OperatingSystem.OSX) == OperatingSystem.OSX.simple_name()
    assert Architecture.AARCH64.simple_name() == "aarch64"
    assert str(Architecture.AARCH64) == Architecture.AARCH64.simple_name()


def test_architecture_names():
    assert Architecture.X64.simple_name() == "x64"
    with pytest.raises(UnsupportedPlatformError):
        Architecture.UNKNOWN.simple_name()


@pytest.mark.parametrize(
    "name, expected",
    [
        ("win32", OperatingSystem.WINDOWS),
        ("darwin", OperatingSystem.OSX),
        ("linux", OperatingSystem.LINUX),
        ("sunos5", OperatingSystem.UNKNOWN),
    ],
)
def test_current_os(monkeypatch, name, expected):
    monkeypatch.setattr(sys, "platform", name)
    assert current_os() is expected


def test_rosetta_false_off_macos(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setattr(subprocess, "run", _fake_sysctl(b"1"))
    assert is_rosetta() is False


def test_rosetta_detected(monkeypatch):
    monkeypatch.setattr(sys, "platform", "darwin")
    monkeypatch.setattr(subprocess, "run", _fake_sysctl(b"sysctl.proc_translated: 1\n"))
    assert is_rosetta() is True


def test_rosetta_not_translated(monkeypatch):
    monkeypatch.setattr(sys, "platform", "darwin")
    monkeypatch.setattr(subprocess, "run", _fake_sysctl(b"sysctl.proc_translated: 0\n"))
    assert is_rosetta() is False


@pytest.mark.parametrize(
    "machine, expected",
    [
        ("x86_64", Architecture.X64),
        ("AMD64", Architecture.X64),
        ("i686", Architecture.X86),
        ("aarch64", Architecture.AARCH64),
        ("arm64", Architecture.AARCH64),
        ("armv7l", Architecture.ARM),
        ("riscv64", Architecture.UNKNOWN),
    ],
)
def test_get_architecture(monkeypatch, machine, expected):
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setattr(platform, "machine", lambda: machine)
    assert get_architecture() is expected


def test_x64_under_rosetta_reports_aarch64(monkeypatch):
    monkeypatch.setattr(sys, "platform", "darwin")
    monkeypatch.setattr(platform, "machine", lambda: "x86_64")
    monkeypatch.setattr(subprocess, "run", _fake_sysctl(b"sysctl.proc_translated: 1\n"))
    assert get_architecture() is Architecture.AARCH64


def test_os_version_on_windows(monkeypatch):
    monkeypatch.setattr(sys, "platform", "win32")
    monkeypatch.setattr(platform, "version", lambda: "10.0.19045")
    assert os_version() == "10.0.19045"


def test_total_memory_positive():
    assert total_memory() > 0