"""Launcher start-up: directories, logging and the entry point."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Sequence

import platformdirs

from .system import get_architecture, is_rosetta

log = logging.getLogger(__name__)

APP_NAME = "NoRiskClient"
APP_AUTHOR = "norisk"
PACKAGE_NAME = "nrclaunch"
LAUNCHER_VERSION = "0.1.0"

TRIGGER_FILE_SIZE = 2 * 1024 * 1000
LOG_FILE_COUNT = 10
LOG_FORMAT = "[%(asctime)s] | %(levelname)-5.5s | %(message)s"
DATE_FORMAT = "%d-%m-%Y %H:%M:%S"

_FILE_HANDLER = "nrclaunch-logfile"
_STDERR_HANDLER = "nrclaunch-stderr"
_LEVEL_NAMES = {"WARNING": "WARN", "CRITICAL": "ERROR"}
_BANNER = (
    "",
    "###############################",
    "",
    "",
    "      NEW LAUNCHER LOG",
    "",
    "",
    "###############################",
    "",
)


class _LevelFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = _LEVEL_NAMES.get(record.levelname, record.levelname)
        return super().format(record)


def launcher_dirs() -> platformdirs.PlatformDirs:
    """The per-user directories of the launcher."""
    return platformdirs.PlatformDirs(appname=APP_NAME, appauthor=APP_AUTHOR)


def user_agent() -> str:
    """The HTTP user agent of the launcher."""
    return f"{PACKAGE_NAME}/{LAUNCHER_VERSION}"


def _archive_namer(archive: Path):
    def namer(default_name: str) -> str:
        index = int(default_name.rsplit(".", 1)[1]) - 1
        return os.fspath(archive / f"launcher.{index}.log")

    return namer


def configure_logging(log_folder: str | os.PathLike) -> list[logging.Handler]:
    """Log to ``latest.log`` with size-based archiving and to stderr."""
    folder = Path(log_folder)
    archive = folder / "archive"
    archive.mkdir(parents=True, exist_ok=True)
    formatter = _LevelFormatter(LOG_FORMAT, DATE_FORMAT)

    file_handler = RotatingFileHandler(
        folder / "latest.log",
        maxBytes=TRIGGER_FILE_SIZE,
        backupCount=LOG_FILE_COUNT,
        encoding="utf-8",
    )
    file_handler.namer = _archive_namer(archive)
    file_handler.set_name(_FILE_HANDLER)
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.set_name(_STDERR_HANDLER)

    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() in (_FILE_HANDLER, _STDERR_HANDLER):
            root.removeHandler(handler)
            handler.close()

    handlers: list[logging.Handler] = [file_handler, stderr_handler]
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(logging.DEBUG)
    return handlers


def prepare_directories(data_dir: str | os.PathLike, config_dir: str | os.PathLike) -> list[Path]:
    """Create the data, config and cache directories; return them."""
    data_dir, config_dir = Path(data_dir), Path(config_dir)
    created = [data_dir, config_dir, data_dir / "nrc_cache"]
    for directory in created:
        directory.mkdir(parents=True, exist_ok=True)
    return created


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Set up logging and the launcher directories."""
    parser = argparse.ArgumentParser(prog=PACKAGE_NAME, description="Game launcher start-up.")
    parser.add_argument("--data-dir", type=Path, help="directory for launcher data")
    parser.add_argument("--config-dir", type=Path, help="directory for launcher settings")
    args = parser.parse_args(argv)

    dirs = launcher_dirs()
    data_dir = args.data_dir or Path(dirs.user_data_dir)
    config_dir = args.config_dir or Path(dirs.user_config_dir)

    configure_logging(data_dir / "logs")
    for line in _BANNER:
        log.info(line)
    log.info("Rosetta: %s", is_rosetta())
    log.info("Architecture: %s", get_architecture().simple_name())

    log.info("Creating launcher directories...")
    prepare_directories(data_dir, config_dir)
    log.info("Finish launcher directories...")
    return 0