"""Copying of game data between installations and branches."""

from __future__ import annotations

import logging
import os
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator, Optional

log = logging.getLogger(__name__)

_CATEGORIES = ("resourcepacks", "shaderpacks", "saves", "NoRiskClient")
_COPIED_FILES = ("servers.dat", "options.txt")
_MC_DIRECTORIES = ("resourcepacks", "shaderpacks", "saves")
_BRANCH_DIRECTORIES = ("resourcepacks", "shaderpacks", "saves", "NoRiskClient")


@dataclass(frozen=True)
class CopyEvent:
    """Progress of a directory copy."""

    category: str
    file: str
    total_type_entry_count: int
    current_type_entry_count: int

    def to_dict(self) -> dict:
        return {
            "type": self.category,
            "file": self.file,
            "total_type_entry_count": self.total_type_entry_count,
            "current_type_entry_count": self.current_type_entry_count,
        }


EventHandler = Optional[Callable[[CopyEvent], object]]


def _entries(directory: str | os.PathLike) -> Iterator[os.DirEntry]:
    with os.scandir(directory) as scan:
        entries = sorted(scan, key=lambda e: e.name)
    for entry in entries:
        yield entry
        if entry.is_dir(follow_symlinks=False):
            yield from _entries(entry.path)


def _count_files(directory: Path) -> int:
    return sum(1 for entry in _entries(directory) if entry.is_file())


def copy_dir_all(
    src: str | os.PathLike, dst: str | os.PathLike, on_event: EventHandler = None
) -> int:
    """Copy a directory tree, reporting progress per category; return files copied."""
    src, dst = Path(src), Path(dst)
    current_type = ""
    total = 0
    current = 0
    copied = 0

    def emit(event: CopyEvent) -> None:
        if on_event is not None:
            on_event(event)

    try:
        for entry in _entries(src):
            path = Path(entry.path)
            target = dst / path.relative_to(src)
            if entry.is_dir(follow_symlinks=False):
                try:
                    target.mkdir(parents=True, exist_ok=True)
                except OSError:
                    pass
                parent = path.parent
                if parent.name in _CATEGORIES and current_type != parent.name:
                    current_type = parent.name
                    total = _count_files(parent)
                    current = 0
                    emit(CopyEvent(current_type, "", total, current))
            else:
                try:
                    target.parent.mkdir(parents=True, exist_ok=True)
                    shutil.copy(path, target)
                    copied += 1
                except OSError as err:
                    log.error("unable to copy %s: %s", path, err)
                current += 1
                emit(CopyEvent(current_type, entry.name, total, current))
    except OSError as err:
        log.error("error: %s", err)
    return copied


def _copy_contents(
    src: Path, dst: Path, directories: tuple[str, ...], on_event: EventHandler
) -> None:
    for name in _COPIED_FILES:
        if (src / name).exists():
            shutil.copy(src / name, dst / name)
    for name in directories:
        if (src / name).exists():
            copy_dir_all(src / name, dst / name, on_event)


def copy_mc_data(
    mc_folder: str | os.PathLike, branch_dir: str | os.PathLike, on_event: EventHandler = None
) -> None:
    """Copy servers, options, resource packs, shader packs and saves into a branch."""
    mc_folder, branch_dir = Path(mc_folder), Path(branch_dir)
    if not mc_folder.exists():
        raise FileNotFoundError("Minecraft folder does not exist")
    branch_dir.mkdir(parents=True, exist_ok=True)
    _copy_contents(mc_folder, branch_dir, _MC_DIRECTORIES, on_event)


def copy_branch_data(
    old_branch_dir: str | os.PathLike,
    new_branch_dir: str | os.PathLike,
    on_event: EventHandler = None,
) -> None:
    """Copy game data and launcher data from one branch directory to another."""
    old_branch_dir, new_branch_dir = Path(old_branch_dir), Path(new_branch_dir)
    if not old_branch_dir.exists():
        log.error("Old branch directory does not exist: %s", old_branch_dir)
    elif not new_branch_dir.exists():
        new_branch_dir.mkdir(parents=True)
    _copy_contents(old_branch_dir, new_branch_dir, _BRANCH_DIRECTORIES, on_event)