"""Operating system and CPU architecture detection."""

from __future__ import annotations

import enum
import logging
import platform
import subprocess
import sys

import psutil

log = logging.getLogger(__name__)


class UnsupportedPlatformError(ValueError):
    """Raised when a platform has no name or separator the launcher knows."""


class OperatingSystem(enum.Enum):
    WINDOWS = "windows"
    LINUX = "linux"
    OSX = "osx"
    UNKNOWN = "unknown"

    def path_separator(self) -> str:
        """Separator used between class path entries."""
        if self is OperatingSystem.WINDOWS:
            return ";"
        if self in (OperatingSystem.LINUX, OperatingSystem.OSX):
            return ":"
        raise UnsupportedPlatformError("Invalid OS")

    def simple_name(self) -> str:
        """Name used in version profile rules."""
        if self is OperatingSystem.UNKNOWN:
            raise UnsupportedPlatformError("Invalid OS")
        return self.value

    def adoptium_name(self) -> str:
        """Name used by the JRE distribution service."""
        if self is OperatingSystem.OSX:
            return "mac"
        return self.simple_name()

    def __str__(self) -> str:
        return self.simple_name()


class Architecture(enum.Enum):
    X86 = "x86"
    X64 = "x64"
    ARM = "arm"
    AARCH64 = "aarch64"
    UNKNOWN = "unknown"

    def simple_name(self) -> str:
        if self is Architecture.UNKNOWN:
            raise UnsupportedPlatformError("Invalid architecture")
        return self.value

    def __str__(self) -> str:
        return self.simple_name()


def current_os() -> OperatingSystem:
    """The operating system this process runs on."""
    name = sys.platform
    if name.startswith("win"):
        return OperatingSystem.WINDOWS
    if name == "darwin":
        return OperatingSystem.OSX
    if name.startswith("linux"):
        return OperatingSystem.LINUX
    return OperatingSystem.UNKNOWN


def is_rosetta() -> bool:
    """True when running translated under Rosetta on macOS."""
    if current_os() is not OperatingSystem.OSX:
        return False
    try:
        result = subprocess.run(
            ["sysctl", "sysctl.proc_translated"],
            capture_output=True,
            check=False,
        )
    except OSError:
        return False
    output = result.stdout.decode("utf-8", errors="replace")
    log.debug("Rosetta Output: %r", output)
    return "1" in output


_X86_NAMES = {"x86", "i386", "i486", "i586", "i686"}
_X64_NAMES = {"x86_64", "amd64", "x64"}
_AARCH64_NAMES = {"aarch64", "arm64"}


def get_architecture() -> Architecture:
    """The CPU architecture, reporting aarch64 under Rosetta."""
    machine = platform.machine().lower()
    if machine in _X86_NAMES:
        return Architecture.X86
    if machine in _X64_NAMES:
        return Architecture.AARCH64 if is_rosetta() else Architecture.X64
    if machine in _AARCH64_NAMES:
        return Architecture.AARCH64
    if machine.startswith("arm"):
        return Architecture.ARM
    return Architecture.UNKNOWN


def os_version() -> str:
    """Version string of the running operating system."""
    system = current_os()
    if system is OperatingSystem.WINDOWS:
        return platform.version()
    if system is OperatingSystem.OSX:
        return platform.mac_ver()[0] or platform.release()
    if system is OperatingSystem.LINUX:
        try:
            release = platform.freedesktop_os_release()
        except OSError:
            release = {}
        return release.get("VERSION_ID") or platform.release()
    return platform.release()


def total_memory() -> int:
    """Total physical memory in bytes."""
    return int(psutil.virtual_memory().total)