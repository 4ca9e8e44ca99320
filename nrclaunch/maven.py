"""Maven coordinate handling."""

from __future__ import annotations


class InvalidVersionProfileError(Exception):
    """Raised when a version profile or its contents are malformed."""


def get_maven_artifact_path(artifact_id: str) -> str:
    """Repository-relative path of the jar named by ``group:name:version``."""
    parts = artifact_id.split(":")
    if len(parts) != 3:
        raise InvalidVersionProfileError(f"Invalid artifact name: {artifact_id}")
    group, name, version = parts
    if group == "CUSTOM":
        return artifact_id.replace(":", "/")
    return f"{group.replace('.', '/')}/{name}/{version}/{name}-{version}.jar"