"""Launch progress reporting."""

from __future__ import annotations

import enum
import uuid
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

PER_STEP = 1024
STEP_COUNT = 12


class ProgressStep(enum.Enum):
    DOWNLOAD_NORISK_CLIENT_MODS = "download_norisk_client_mods"
    DOWNLOAD_JRE = "download_jre"
    DOWNLOAD_CLIENT_JAR = "download_client_jar"
    DOWNLOAD_LIBRARIES = "download_libraries"
    DOWNLOAD_ASSETS = "download_assets"
    DOWNLOAD_NORISK_ASSETS = "download_norisk_assets"
    VERIFY_NORISK_ASSETS = "verify_norisk_assets"
    DOWNLOAD_CUSTOM_SERVER_JAR = "download_custom_server_jar"
    DOWNLOAD_CUSTOM_SERVER_INSTALLER_JAR = "download_custom_server_installer_jar"

    @property
    def index(self) -> int:
        """Position of the step on the overall progress bar."""
        return _STEP_INDEX[self]


_STEP_INDEX = {
    ProgressStep.DOWNLOAD_NORISK_CLIENT_MODS: 0,
    ProgressStep.DOWNLOAD_JRE: 1,
    ProgressStep.DOWNLOAD_CLIENT_JAR: 2,
    ProgressStep.DOWNLOAD_LIBRARIES: 3,
    ProgressStep.DOWNLOAD_ASSETS: 4,
    ProgressStep.DOWNLOAD_NORISK_ASSETS: 5,
    ProgressStep.VERIFY_NORISK_ASSETS: 6,
    ProgressStep.DOWNLOAD_CUSTOM_SERVER_JAR: 1,
    ProgressStep.DOWNLOAD_CUSTOM_SERVER_INSTALLER_JAR: 2,
}


class ProgressKind(enum.Enum):
    MAX = "max"
    PROGRESS = "progress"
    LABEL = "label"


def get_progress(idx: int, curr: int, maximum: int) -> int:
    """Progress of item ``idx`` scaled to 100 units per item."""
    return idx * 100 + (curr * 100 // max(maximum, 1))


def get_max(length: int) -> int:
    """Maximum for ``length`` items at 100 units each."""
    return length * 100


@dataclass(frozen=True)
class ProgressUpdate:
    kind: ProgressKind
    value: Union[int, str]

    @staticmethod
    def set_for_step(step: ProgressStep, progress: int, maximum: int) -> "ProgressUpdate":
        return ProgressUpdate(
            ProgressKind.PROGRESS, step.index * PER_STEP + (progress * PER_STEP // maximum)
        )

    @staticmethod
    def set_to_max() -> "ProgressUpdate":
        return ProgressUpdate(ProgressKind.PROGRESS, STEP_COUNT * PER_STEP)

    @staticmethod
    def set_max() -> "ProgressUpdate":
        return ProgressUpdate(ProgressKind.MAX, STEP_COUNT * PER_STEP)

    @staticmethod
    def set_label(text: str) -> "ProgressUpdate":
        return ProgressUpdate(ProgressKind.LABEL, str(text))

    @staticmethod
    def set_progress(value: int) -> "ProgressUpdate":
        return ProgressUpdate(ProgressKind.PROGRESS, value)

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind.value, "value": self.value}

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "ProgressUpdate":
        try:
            kind = ProgressKind(data["type"])
            value = data["value"]
        except KeyError as missing:
            raise ValueError(f"progress update lacks field {missing}") from None
        if kind is ProgressKind.LABEL:
            if not isinstance(value, str):
                raise ValueError("label value must be a string")
        elif not isinstance(value, int) or isinstance(value, bool) or value < 0:
            raise ValueError(f"{kind.value} value must be a non-negative integer")
        return ProgressUpdate(kind, value)


@dataclass(frozen=True)
class ClientProgressUpdate:
    instance_id: uuid.UUID
    data: ProgressUpdate

    def to_dict(self) -> dict[str, Any]:
        return {"instanceId": str(self.instance_id), "data": self.data.to_dict()}


class ProgressReceiver:
    """Keeps the latest progress state and forwards updates to a callback."""

    def __init__(self, callback: Optional[Callable[[ProgressUpdate], Any]] = None):
        self.callback = callback
        self.maximum = 0
        self.progress = 0
        self.label = ""

    def progress_update(self, update: ProgressUpdate) -> None:
        if update.kind is ProgressKind.MAX:
            self.maximum = update.value
        elif update.kind is ProgressKind.PROGRESS:
            self.progress = update.value
        else:
            self.label = update.value
        if self.callback is not None:
            self.callback(update)