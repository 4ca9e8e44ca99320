"""Argument declarations of version profiles and building of command lines."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Collection, Optional, Union

from .maven import InvalidVersionProfileError
from .parameters import LaunchingParameter
from .rules import Platform, Rule, check_condition

log = logging.getLogger(__name__)


@dataclass
class Argument:
    """A single or multi-valued argument, optionally guarded by rules."""

    value: Union[str, list[str]]
    rules: Optional[list[Rule]] = None

    def values(self) -> list[str]:
        return [self.value] if isinstance(self.value, str) else list(self.value)

    @staticmethod
    def from_json(data: Union[str, dict[str, Any]]) -> "Argument":
        if isinstance(data, str):
            return Argument(value=data)
        if not isinstance(data, dict):
            raise InvalidVersionProfileError("argument must be a string or map")
        try:
            value = data["value"]
        except KeyError:
            raise InvalidVersionProfileError("argument lacks field 'value'") from None
        if not isinstance(value, str):
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise InvalidVersionProfileError("argument value must be a string or list of strings")
            value = list(value)
        rules = data.get("rules")
        return Argument(
            value=value,
            rules=[Rule.from_dict(rule) for rule in rules] if rules is not None else None,
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "rules": [rule.to_dict() for rule in self.rules] if self.rules is not None else None,
            "value": self.value if isinstance(self.value, str) else list(self.value),
        }


@dataclass
class LegacyArguments:
    """Old-style declaration with one space separated game argument string."""

    minecraft_arguments: Optional[str] = None

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "LegacyArguments":
        return LegacyArguments(minecraft_arguments=data.get("minecraftArguments"))

    def to_dict(self) -> dict[str, Any]:
        return {"minecraftArguments": self.minecraft_arguments}


@dataclass
class ModernArguments:
    """New-style declaration with separate game and JVM argument lists."""

    game: list[Argument] = field(default_factory=list)
    jvm: list[Argument] = field(default_factory=list)

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "ModernArguments":
        arguments = data.get("arguments") or {}
        return ModernArguments(
            game=[Argument.from_json(arg) for arg in arguments.get("game") or []],
            jvm=[Argument.from_json(arg) for arg in arguments.get("jvm") or []],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "arguments": {
                "game": [arg.to_json() for arg in self.game],
                "jvm": [arg.to_json() for arg in self.jvm],
            }
        }


ArgumentDeclaration = Union[ModernArguments, LegacyArguments]


def declaration_from_dict(data: dict[str, Any]) -> ArgumentDeclaration:
    """Pick the declaration style present in a version profile mapping."""
    if isinstance(data.get("arguments"), dict):
        return ModernArguments.from_dict(data)
    return LegacyArguments.from_dict(data)


def _add_checked(
    command_arguments: list[str],
    arguments: list[Argument],
    features: Collection[str],
    platform: Optional[Platform],
) -> None:
    for argument in arguments:
        if argument.rules is not None and not check_condition(argument.rules, features, platform):
            continue
        command_arguments.extend(argument.values())


def add_jvm_args(
    declaration: ArgumentDeclaration,
    norisk_token: str,
    command_arguments: list[str],
    parameter: LaunchingParameter,
    features: Collection[str] = frozenset(),
    platform: Optional[Platform] = None,
) -> list[str]:
    """Append the JVM arguments to ``command_arguments`` and return it."""
    command_arguments.extend(
        [
            f"-Xmx{parameter.memory}M",
            "-XX:+UnlockExperimentalVMOptions",
            "-XX:+UseG1GC",
            "-XX:G1NewSizePercent=20",
            "-XX:G1ReservePercent=20",
            "-XX:MaxGCPauseMillis=50",
            "-XX:G1HeapRegionSize=32M",
            f"-Dnorisk.token={norisk_token}",
            f"-Dnorisk.experimental={'true' if parameter.dev_mode else 'false'}",
        ]
    )
    if parameter.force_server is not None:
        log.info("Added force server arg: %r", parameter.force_server)
        command_arguments.append(f"-Dnorisk.forceServer={parameter.force_server}")
    for arg in parameter.custom_args():
        log.info("Added custom java arg: %r", arg)
        command_arguments.append(arg)

    if isinstance(declaration, LegacyArguments):
        command_arguments.extend(
            ["-Djava.library.path=${natives_directory}", "-cp", "${classpath}"]
        )
    else:
        _add_checked(command_arguments, declaration.jvm, features, platform)
    return command_arguments


def add_game_args(
    declaration: ArgumentDeclaration,
    command_arguments: list[str],
    features: Collection[str] = frozenset(),
    platform: Optional[Platform] = None,
) -> list[str]:
    """Append the game arguments to ``command_arguments`` and return it."""
    if isinstance(declaration, LegacyArguments):
        if declaration.minecraft_arguments is None:
            raise InvalidVersionProfileError("no game arguments specified")
        command_arguments.extend(declaration.minecraft_arguments.split(" "))
    else:
        _add_checked(command_arguments, declaration.game, features, platform)
    return command_arguments