"""Parameters that control a game launch."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class LaunchingParameter:
    """Settings and credentials handed to the launcher."""

    memory: int
    data_path: Path
    dev_mode: bool = False
    force_server: Optional[str] = None
    custom_java_path: Optional[str] = None
    custom_java_args: str = ""
    auth_player_name: str = ""
    auth_uuid: str = ""
    auth_access_token: str = ""
    auth_xuid: str = ""
    clientid: str = ""
    user_type: str = ""
    keep_launcher_open: bool = False
    concurrent_downloads: int = 10

    def __post_init__(self) -> None:
        self.data_path = Path(self.data_path)

    def custom_args(self) -> list[str]:
        """The custom JVM arguments, split on single spaces, empty pieces dropped."""
        return [arg for arg in self.custom_java_args.split(" ") if arg]