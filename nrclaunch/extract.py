"""Archive extraction into launcher folders."""

from __future__ import annotations

import io
import os
import re
import shutil
import tarfile
import zipfile
from pathlib import Path
from typing import BinaryIO, Union

Archive = Union[str, os.PathLike, bytes, BinaryIO]

_ILLEGAL = re.compile(r'[/?<>\\:*|"]')
_CONTROL = re.compile(r"[\x00-\x1f\x80-\x9f]")
_RESERVED = re.compile(r"^\.+$")
_WINDOWS_RESERVED = re.compile(r"^(con|prn|aux|nul|com[0-9]|lpt[0-9])(\..*)?$", re.IGNORECASE)
_WINDOWS_TRAILING = re.compile(r"[. ]+$")
_MAX_NAME_BYTES = 255


def _sanitize_component(name: str) -> str:
    name = _ILLEGAL.sub("", name)
    name = _CONTROL.sub("", name)
    name = _RESERVED.sub("", name)
    name = _WINDOWS_RESERVED.sub("", name)
    name = _WINDOWS_TRAILING.sub("", name)
    return name.encode("utf-8")[:_MAX_NAME_BYTES].decode("utf-8", errors="ignore")


def sanitize_file_path(path: str) -> Path:
    """Relative path without reserved names, redundant separators, '.' or '..'."""
    parts = (_sanitize_component(part) for part in path.replace("\\", "/").split("/"))
    return Path(*[part for part in parts if part])


def _as_source(archive: Archive):
    if isinstance(archive, (bytes, bytearray, memoryview)):
        return io.BytesIO(bytes(archive))
    return archive


def zip_extract(archive: Archive, out_dir: str | os.PathLike) -> None:
    """Extract every entry of a ZIP archive below ``out_dir``."""
    out_dir = Path(out_dir)
    with zipfile.ZipFile(_as_source(archive)) as zf:
        for info in zf.infolist():
            relative = sanitize_file_path(info.filename)
            if not relative.parts:
                continue
            target = out_dir / relative
            if info.filename.endswith("/"):
                target.mkdir(parents=True, exist_ok=True)
                continue
            target.parent.mkdir(parents=True, exist_ok=True)
            with zf.open(info) as src, open(target, "wb") as dst:
                shutil.copyfileobj(src, dst)


def tar_gz_extract(archive: Archive, out_dir: str | os.PathLike) -> None:
    """Unpack a gzip-compressed tar archive into ``out_dir``."""
    source = _as_source(archive)
    if isinstance(source, (str, os.PathLike)):
        opened = tarfile.open(name=source, mode="r:gz")
    else:
        opened = tarfile.open(fileobj=source, mode="r:gz")
    with opened as tf:
        if hasattr(tarfile, "tar_filter"):
            tf.extractall(out_dir, filter="tar")
        else:
            tf.extractall(out_dir)