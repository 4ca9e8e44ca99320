"""Downloading of game assets, launcher assets and libraries."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import requests

from .checksum import md5sum, sha1sum
from .download import download_file_untracked, download_private_file_untracked, http_session
from .progress import ProgressReceiver, ProgressUpdate
from .version import AssetObject, LibraryDownloadInfo

log = logging.getLogger(__name__)

RESOURCES_URL = "https://resources.download.minecraft.net"
NORISK_CDN_URL = "https://cdn.norisk.gg/branches"


class ChecksumMismatchError(ValueError):
    """Raised when a downloaded file does not match its expected hash."""


def _label(progress: Optional[ProgressReceiver], text: str) -> None:
    if progress is not None:
        progress.progress_update(ProgressUpdate.set_label(text))


def download_asset(
    asset: AssetObject,
    objects_folder: str | os.PathLike,
    progress: Optional[ProgressReceiver] = None,
) -> bool:
    """Fetch a game asset into the object store; True if it was downloaded."""
    prefix = asset.hash[:2]
    asset_folder = Path(objects_folder) / prefix
    asset_folder.mkdir(parents=True, exist_ok=True)
    asset_path = asset_folder / asset.hash
    if asset_path.exists():
        return False
    _label(progress, f"translation.downloadingAssetObject&hash%{asset.hash}")
    log.info("Downloading %s", asset.hash)
    download_file_untracked(f"{RESOURCES_URL}/{prefix}/{asset.hash}", asset_path)
    log.info("Downloaded %s", asset.hash)
    return True


def download_norisk_asset(
    asset: AssetObject,
    branch: str,
    file_path: str,
    norisk_token: str,
    target_folder: str | os.PathLike,
    progress: Optional[ProgressReceiver] = None,
    experimental: bool = False,
) -> bool:
    """Fetch a launcher asset unless a copy with a matching MD5 exists; True if downloaded."""
    parts = file_path.split("/")
    target_folder = Path(target_folder)
    asset_file_path = target_folder.joinpath(*parts)
    target_folder.joinpath(*parts[:-1]).mkdir(parents=True, exist_ok=True)

    if asset_file_path.exists():
        md5 = md5sum(asset_file_path)
        if md5 == asset.hash:
            log.info("Norisk asset %s already exists and matches md5.", asset.hash)
            return False
        log.info(
            "Norisk asset %s != %s already exists but does not match md5.", md5, asset.hash
        )

    _label(progress, f"translation.downloadingNoriskAssetObject&hash%{asset.hash}")
    log.info("Downloading %s", asset.hash)
    channel = "exp" if experimental else "prod"
    url = f"{NORISK_CDN_URL}/{channel}/{branch}/assets/{file_path}"
    download_private_file_untracked(url, norisk_token, asset_file_path)
    log.info("Downloaded %s", asset.hash)
    return True


def fetch_library_sha1(info: LibraryDownloadInfo) -> str:
    """The SHA-1 published next to a library at ``<url>.sha1``."""
    response = http_session().get(f"{info.url}.sha1")
    response.raise_for_status()
    return response.text


def _expected_sha1(info: LibraryDownloadInfo, library_path: Path) -> Optional[str]:
    if info.sha1 is not None:
        return info.sha1
    sha1_path = library_path.with_suffix(".sha1")
    if sha1_path.exists():
        return sha1_path.read_text(encoding="utf-8")
    try:
        sha1 = fetch_library_sha1(info)
    except requests.RequestException:
        return None
    sha1_path.write_text(sha1, encoding="utf-8")
    return sha1


def download_library(
    info: LibraryDownloadInfo,
    name: str,
    libraries_folder: str | os.PathLike,
    progress: Optional[ProgressReceiver] = None,
) -> Path:
    """Make sure a library is present and intact; return its path."""
    log.info("Downloading library %s, sha1: %r, size: %r", name, info.sha1, info.size)
    log.debug("Library download url: %s", info.url)

    library_path = Path(libraries_folder) / info.path
    library_path.parent.mkdir(parents=True, exist_ok=True)
    sha1 = _expected_sha1(info, library_path)

    if library_path.exists():
        if sha1 is None:
            log.info("Library %s already exists.", name)
            return library_path
        if sha1sum(library_path) == sha1:
            log.info("Library %s already exists and matches sha1.", name)
            return library_path
        log.info("Library %s already exists but sha1 doesn't match, redownloading", name)
        library_path.unlink()

    _label(progress, f"translation.downloadingLibrary&library%{name}")
    download_file_untracked(info.url, library_path)
    log.info("Downloaded %s", info.url)

    if sha1 is not None and sha1sum(library_path) != sha1:
        raise ChecksumMismatchError(f"sha1 of downloaded library {name} doesn't match")
    return library_path