"""Steps that run before the game itself is prepared: mods and the version profile."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .maven import InvalidVersionProfileError
from .version import VersionManifest, VersionProfile

log = logging.getLogger(__name__)

CHILD_PROFILE_FILE = "child_sub_system.json"
PARENT_PROFILE_FILE = "parent_sub_system.json"


def clear_mods(data_dir: str | os.PathLike, branch: str) -> list[Path]:
    """Delete the files in the branch's mods folder; return what was removed."""
    mods_path = Path(data_dir) / "gameDir" / branch / "mods"
    if not mods_path.exists():
        return []
    removed: list[Path] = []
    for entry in sorted(mods_path.iterdir()):
        if entry.is_file():
            entry.unlink()
            removed.append(entry)
    return removed


def fabric_manifest_url(template: str, mc_version: str, loader_version: str) -> str:
    """Fill the game and loader version into a loader manifest URL template."""
    return template.replace("{MINECRAFT_VERSION}", mc_version).replace(
        "{FABRIC_LOADER_VERSION}", loader_version
    )


def resolve_version_profile(
    cache_dir: str | os.PathLike,
    manifest_url: str,
    version_manifest: VersionManifest,
) -> VersionProfile:
    """Fetch the loader profile and merge in the game version it inherits from."""
    cache = Path(cache_dir)
    cache.mkdir(parents=True, exist_ok=True)

    log.info("Loading version profile...")
    profile = VersionProfile.download(cache / CHILD_PROFILE_FILE, manifest_url)

    inherited = profile.inherits_from
    if inherited is not None:
        entry = version_manifest.find(inherited)
        if entry is None:
            raise InvalidVersionProfileError(
                f"unable to find inherited version manifest {inherited}"
            )
        log.debug("Determined %s's download url to be %s", inherited, entry.url)
        log.info("Downloading inherited version %s...", inherited)
        parent = VersionProfile.download(cache / PARENT_PROFILE_FILE, entry.url)
        profile.merge(parent)
    return profile