"""HTTP downloads with the launcher's shared session."""

from __future__ import annotations

import functools
import logging
import os
from pathlib import Path
from typing import Callable

import requests

log = logging.getLogger(__name__)

USER_AGENT = "nrclaunch"
_CHUNK_SIZE = 64 * 1024


@functools.lru_cache(maxsize=None)
def http_session() -> requests.Session:
    """The shared HTTP session carrying the launcher's user agent."""
    session = requests.Session()
    session.headers["User-Agent"] = USER_AGENT
    return session


def download_file_untracked(url: str, path: str | os.PathLike) -> None:
    """Download ``url`` into ``path`` without progress reporting."""
    response = http_session().get(url)
    response.raise_for_status()
    Path(path).write_bytes(response.content)


def download_private_file_untracked(url: str, token: str, path: str | os.PathLike) -> None:
    """Download ``url`` into ``path`` using a bearer token."""
    response = http_session().get(url, headers={"Authorization": f"Bearer {token}"})
    response.raise_for_status()
    Path(path).write_bytes(response.content)


def download_file(url: str, on_progress: Callable[[int, int], object]) -> bytes:
    """Download ``url`` into memory, calling ``on_progress(done, total)`` as data arrives."""
    log.debug("Downloading file %r", url)
    with http_session().get(url.strip(), stream=True) as response:
        response.raise_for_status()
        try:
            total = int(response.headers.get("Content-Length") or 0)
        except ValueError:
            total = 0
        output = bytearray()
        on_progress(0, total)
        for chunk in response.iter_content(chunk_size=_CHUNK_SIZE):
            if chunk:
                output.extend(chunk)
                on_progress(len(output), total)
    on_progress(total, total)
    log.debug("Downloaded file")
    return bytes(output)