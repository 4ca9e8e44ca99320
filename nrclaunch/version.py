"""Version manifests, version profiles and the download descriptions they carry."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import requests

from .arguments import (
    ArgumentDeclaration,
    LegacyArguments,
    ModernArguments,
    declaration_from_dict,
)
from .download import download_file_untracked, http_session
from .maven import InvalidVersionProfileError, get_maven_artifact_path
from .rules import Rule

log = logging.getLogger(__name__)

MANIFEST_URL = "https://launchermeta.mojang.com/mc/game/version_manifest.json"
DEFAULT_LIBRARY_URL = "https://libraries.minecraft.net/"
MANIFEST_FILE_NAME = "version_manifest.json"

_FALLBACK_ERRORS = (requests.RequestException, ValueError, TypeError, InvalidVersionProfileError)


def _require(data: Any, key: str, what: str) -> Any:
    try:
        return data[key]
    except (KeyError, TypeError):
        raise InvalidVersionProfileError(f"{what} lacks field '{key}'") from None


def _optional(data: dict[str, Any], key: str, parse):
    value = data.get(key)
    return parse(value) if value is not None else None


@dataclass
class ManifestVersion:
    id: str
    version_type: str
    url: str
    time: str
    release_time: str

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "ManifestVersion":
        return ManifestVersion(
            id=_require(data, "id", "manifest version"),
            version_type=_require(data, "type", "manifest version"),
            url=_require(data, "url", "manifest version"),
            time=_require(data, "time", "manifest version"),
            release_time=_require(data, "releaseTime", "manifest version"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.version_type,
            "url": self.url,
            "time": self.time,
            "releaseTime": self.release_time,
        }


@dataclass
class VersionManifest:
    """The list of all published game versions."""

    versions: list[ManifestVersion] = field(default_factory=list)

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "VersionManifest":
        versions = _require(data, "versions", "version manifest")
        return VersionManifest([ManifestVersion.from_dict(v) for v in versions])

    def to_dict(self) -> dict[str, Any]:
        return {"versions": [v.to_dict() for v in self.versions]}

    def find(self, version_id: str) -> Optional[ManifestVersion]:
        """The entry with the given id, or None."""
        return next((v for v in self.versions if v.id == version_id), None)

    @staticmethod
    def load(app_data: str | os.PathLike) -> "VersionManifest":
        """Read the cached manifest from ``app_data``."""
        text = (Path(app_data) / MANIFEST_FILE_NAME).read_text(encoding="utf-8")
        return VersionManifest.from_dict(json.loads(text))

    def store(self, app_data: str | os.PathLike) -> None:
        """Write the manifest to ``app_data`` as the cached copy."""
        (Path(app_data) / MANIFEST_FILE_NAME).write_text(
            json.dumps(self.to_dict(), indent=2), encoding="utf-8"
        )
        log.debug("Version manifest was stored...")

    @staticmethod
    def download(app_data: str | os.PathLike) -> "VersionManifest":
        """Fetch the manifest and cache it; fall back to the cache on failure."""
        try:
            response = http_session().get(MANIFEST_URL)
            manifest = VersionManifest.from_dict(response.json())
        except _FALLBACK_ERRORS as error:
            log.error("Error Downloading Mojang Version Manifest %r", error)
            return VersionManifest.load(app_data)
        manifest.store(app_data)
        return manifest


@dataclass
class Download:
    sha1: str
    size: int
    url: str

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "Download":
        return Download(
            sha1=_require(data, "sha1", "download"),
            size=_require(data, "size", "download"),
            url=_require(data, "url", "download"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"sha1": self.sha1, "size": self.size, "url": self.url}


_DOWNLOAD_KEYS = ("client", "client_mappings", "server", "server_mappings", "windows_server")


@dataclass
class Downloads:
    client: Optional[Download] = None
    client_mappings: Optional[Download] = None
    server: Optional[Download] = None
    server_mappings: Optional[Download] = None
    windows_server: Optional[Download] = None

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "Downloads":
        return Downloads(**{key: _optional(data, key, Download.from_dict) for key in _DOWNLOAD_KEYS})

    def to_dict(self) -> dict[str, Any]:
        result = {}
        for key in _DOWNLOAD_KEYS:
            value = getattr(self, key)
            result[key] = value.to_dict() if value is not None else None
        return result


@dataclass
class AssetObject:
    hash: str
    size: int

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "AssetObject":
        return AssetObject(
            hash=_require(data, "hash", "asset object"),
            size=_require(data, "size", "asset object"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"hash": self.hash, "size": self.size}


@dataclass
class AssetIndex:
    objects: dict[str, AssetObject] = field(default_factory=dict)

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "AssetIndex":
        objects = _require(data, "objects", "asset index")
        return AssetIndex({name: AssetObject.from_dict(obj) for name, obj in objects.items()})

    def to_dict(self) -> dict[str, Any]:
        return {"objects": {name: obj.to_dict() for name, obj in self.objects.items()}}


@dataclass
class AssetIndexLocation:
    id: str
    sha1: str
    size: int
    total_size: int
    url: str

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "AssetIndexLocation":
        return AssetIndexLocation(
            id=_require(data, "id", "asset index location"),
            sha1=_require(data, "sha1", "asset index location"),
            size=_require(data, "size", "asset index location"),
            total_size=_require(data, "totalSize", "asset index location"),
            url=_require(data, "url", "asset index location"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "sha1": self.sha1,
            "size": self.size,
            "totalSize": self.total_size,
            "url": self.url,
        }

    def load_asset_index(self, assets_root: str | os.PathLike) -> AssetIndex:
        """Read the asset index below ``assets_root``, downloading it first if absent."""
        index_path = Path(assets_root) / f"{self.id}.json"
        if not index_path.exists():
            log.info("Downloading assets index of %s", self.id)
            download_file_untracked(self.url, index_path)
            log.info("Downloaded %s", self.url)
        return AssetIndex.from_dict(json.loads(index_path.read_bytes()))


@dataclass
class LibraryArtifact:
    path: str
    sha1: str
    size: int
    url: str

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "LibraryArtifact":
        return LibraryArtifact(
            path=_require(data, "path", "library artifact"),
            sha1=_require(data, "sha1", "library artifact"),
            size=_require(data, "size", "library artifact"),
            url=_require(data, "url", "library artifact"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"path": self.path, "sha1": self.sha1, "size": self.size, "url": self.url}


@dataclass
class LibraryDownloads:
    artifact: Optional[LibraryArtifact] = None
    classifiers: Optional[dict[str, LibraryArtifact]] = None

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "LibraryDownloads":
        classifiers = data.get("classifiers")
        return LibraryDownloads(
            artifact=_optional(data, "artifact", LibraryArtifact.from_dict),
            classifiers=(
                {name: LibraryArtifact.from_dict(a) for name, a in classifiers.items()}
                if classifiers is not None
                else None
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "artifact": self.artifact.to_dict() if self.artifact is not None else None,
            "classifiers": (
                {name: a.to_dict() for name, a in self.classifiers.items()}
                if self.classifiers is not None
                else None
            ),
        }


@dataclass
class LibraryDownloadInfo:
    """Where a library file lives locally and where to fetch it from."""

    path: str
    url: str
    sha1: Optional[str] = None
    size: Optional[int] = None

    @staticmethod
    def from_artifact(artifact: LibraryArtifact) -> "LibraryDownloadInfo":
        return LibraryDownloadInfo(
            path=artifact.path, url=artifact.url, sha1=artifact.sha1, size=artifact.size
        )


@dataclass
class Library:
    name: str
    downloads: Optional[LibraryDownloads] = None
    natives: Optional[dict[str, str]] = None
    rules: list[Rule] = field(default_factory=list)
    url: Optional[str] = None

    def get_library_download(self) -> LibraryDownloadInfo:
        """The declared artifact, or one derived from the Maven coordinates."""
        if self.downloads is not None and self.downloads.artifact is not None:
            return LibraryDownloadInfo.from_artifact(self.downloads.artifact)
        path = get_maven_artifact_path(self.name)
        base = self.url if self.url is not None else DEFAULT_LIBRARY_URL
        return LibraryDownloadInfo(path=path, url=f"{base}{path}")

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "Library":
        natives = data.get("natives")
        return Library(
            name=_require(data, "name", "library"),
            downloads=_optional(data, "downloads", LibraryDownloads.from_dict),
            natives=dict(natives) if natives is not None else None,
            rules=[Rule.from_dict(rule) for rule in data.get("rules") or []],
            url=data.get("url"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "downloads": self.downloads.to_dict() if self.downloads is not None else None,
            "natives": dict(self.natives) if self.natives is not None else None,
            "rules": [rule.to_dict() for rule in self.rules],
            "url": self.url,
        }


def _larger(a: Optional[int], b: Optional[int]) -> Optional[int]:
    if a is not None and b is not None:
        return max(a, b)
    return b if a is None else a


@dataclass
class VersionProfile:
    """A game version description: libraries, assets, main class and arguments."""

    id: str
    version_type: str
    libraries: list[Library] = field(default_factory=list)
    arguments: ArgumentDeclaration = field(default_factory=LegacyArguments)
    asset_index_location: Optional[AssetIndexLocation] = None
    assets: Optional[str] = None
    inherits_from: Optional[str] = None
    minimum_launcher_version: Optional[int] = None
    downloads: Optional[Downloads] = None
    compliance_level: Optional[int] = None
    main_class: Optional[str] = None
    logging: Optional[dict[str, Any]] = None

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "VersionProfile":
        if not isinstance(data, dict):
            raise InvalidVersionProfileError("version profile must be a map")
        libraries = _require(data, "libraries", "version profile")
        return VersionProfile(
            id=_require(data, "id", "version profile"),
            version_type=_require(data, "type", "version profile"),
            libraries=[Library.from_dict(lib) for lib in libraries],
            arguments=declaration_from_dict(data),
            asset_index_location=_optional(data, "assetIndex", AssetIndexLocation.from_dict),
            assets=data.get("assets"),
            inherits_from=data.get("inheritsFrom"),
            minimum_launcher_version=data.get("minimumLauncherVersion"),
            downloads=_optional(data, "downloads", Downloads.from_dict),
            compliance_level=data.get("complianceLevel"),
            main_class=data.get("mainClass"),
            logging={} if data.get("logging") is not None else None,
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "id": self.id,
            "assetIndex": (
                self.asset_index_location.to_dict()
                if self.asset_index_location is not None
                else None
            ),
            "assets": self.assets,
            "inheritsFrom": self.inherits_from,
            "minimumLauncherVersion": self.minimum_launcher_version,
            "downloads": self.downloads.to_dict() if self.downloads is not None else None,
            "complianceLevel": self.compliance_level,
            "libraries": [lib.to_dict() for lib in self.libraries],
            "mainClass": self.main_class,
            "logging": dict(self.logging) if self.logging is not None else None,
            "type": self.version_type,
        }
        result.update(self.arguments.to_dict())
        return result

    def merge(self, parent: "VersionProfile") -> None:
        """Fill in what this profile lacks from the profile it inherits from."""
        own, inherited = self.arguments, parent.arguments
        if isinstance(own, LegacyArguments) and isinstance(inherited, LegacyArguments):
            if own.minecraft_arguments is None:
                own.minecraft_arguments = inherited.minecraft_arguments
        elif isinstance(own, ModernArguments) and isinstance(inherited, ModernArguments):
            own.game.extend(inherited.game)
            own.jvm.extend(inherited.jvm)
        else:
            raise InvalidVersionProfileError(
                "version profile inherits from incompatible profile"
            )

        if self.asset_index_location is None:
            self.asset_index_location = parent.asset_index_location
        if self.assets is None:
            self.assets = parent.assets
        self.minimum_launcher_version = _larger(
            self.minimum_launcher_version, parent.minimum_launcher_version
        )
        if self.downloads is None:
            self.downloads = parent.downloads
        self.compliance_level = _larger(self.compliance_level, parent.compliance_level)
        self.libraries.extend(parent.libraries)
        if self.main_class is None:
            self.main_class = parent.main_class
        if self.logging is None:
            self.logging = parent.logging

    @staticmethod
    def load(path: str | os.PathLike) -> "VersionProfile":
        """Read a profile from a JSON file."""
        return VersionProfile.from_dict(json.loads(Path(path).read_bytes()))

    def store(self, path: str | os.PathLike) -> None:
        """Write the profile to a JSON file."""
        Path(path).write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
        log.debug("Sub System was stored...")

    @staticmethod
    def download(path: str | os.PathLike, url: str) -> "VersionProfile":
        """Fetch a profile and cache it at ``path``; fall back to the cache on failure."""
        try:
            response = http_session().get(url)
            profile = VersionProfile.from_dict(response.json())
        except _FALLBACK_ERRORS as error:
            log.error("Error Downloading Sub System %r", error)
            return VersionProfile.load(path)
        profile.store(path)
        return profile