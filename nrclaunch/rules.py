"""Version profile rules and their evaluation against the running platform."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Any, Collection, Iterable, Optional

from .system import Architecture, current_os, get_architecture, os_version


class RuleAction(enum.Enum):
    ALLOW = "allow"
    DISALLOW = "disallow"


@dataclass
class OsRule:
    """Operating system requirement of a rule."""

    name: Optional[str] = None
    version: Optional[str] = None
    arch: Optional[Architecture] = None

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "OsRule":
        arch = data.get("arch")
        return OsRule(
            name=data.get("name"),
            version=data.get("version"),
            arch=Architecture(arch) if arch is not None else None,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "version": self.version,
            "arch": self.arch.value if self.arch is not None else None,
        }


@dataclass
class Rule:
    """An allow or disallow rule, optionally limited to an OS or feature set."""

    action: RuleAction
    os: Optional[OsRule] = None
    features: Optional[dict[str, bool]] = None

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "Rule":
        try:
            action = RuleAction(data["action"])
        except KeyError:
            raise ValueError("rule lacks field 'action'") from None
        os_data = data.get("os")
        features = data.get("features")
        return Rule(
            action=action,
            os=OsRule.from_dict(os_data) if os_data is not None else None,
            features=dict(features) if features is not None else None,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "action": self.action.value,
            "os": self.os.to_dict() if self.os is not None else None,
            "features": dict(self.features) if self.features is not None else None,
        }


@dataclass(frozen=True)
class Platform:
    """The platform facts rules are matched against."""

    os_name: str
    os_version: str
    architecture: Architecture

    @staticmethod
    def current() -> "Platform":
        return Platform(
            os_name=current_os().simple_name(),
            os_version=os_version(),
            architecture=get_architecture(),
        )


def _rule_applies(rule: Rule, features: Collection[str], platform: Platform) -> bool:
    applies = True
    requirement = rule.os
    if requirement is not None:
        if requirement.name is not None and requirement.name != platform.os_name:
            applies = False
        if requirement.arch is not None and requirement.arch != platform.architecture:
            applies = False
        if requirement.version is not None and not re.search(
            requirement.version, platform.os_version
        ):
            applies = False
    if rule.features is not None:
        for name, supported in rule.features.items():
            if (name in features) != supported:
                applies = False
    return applies


def check_condition(
    rules: Iterable[Rule],
    features: Collection[str] = frozenset(),
    platform: Optional[Platform] = None,
) -> bool:
    """Whether the rules allow something; the last applying rule decides."""
    rules = list(rules)
    if not rules:
        return True
    if platform is None:
        platform = Platform.current()
    allow = False
    for rule in rules:
        if _rule_applies(rule, features, platform):
            allow = rule.action is RuleAction.ALLOW
    return allow