"""Expansion of ``${name}`` placeholders in launch arguments."""

from __future__ import annotations

import re
from typing import Callable, Mapping

from .maven import InvalidVersionProfileError

_OPEN = "${"
_CLOSE = "}"
_INVALID_NAME_CHAR = re.compile(r"[^A-Za-z0-9_]")


class UnknownTemplateParameterError(Exception):
    """Raised when a placeholder names a parameter nobody provides."""

    def __init__(self, parameter: str):
        super().__init__(f"unknown template parameter: {parameter}")
        self.parameter = parameter


def process_templates(text: str, retriever: Callable[[str], str]) -> str:
    """Replace every ``${name}`` in ``text`` with ``retriever(name)``."""
    pieces: list[str] = []
    position = 0
    while True:
        start = text.find(_OPEN, position)
        if start < 0:
            pieces.append(text[position:])
            break
        pieces.append(text[position:start])
        name_start = start + len(_OPEN)
        end = text.find(_CLOSE, name_start)
        name = text[name_start:] if end < 0 else text[name_start:end]
        invalid = _INVALID_NAME_CHAR.search(name)
        if invalid is not None:
            raise InvalidVersionProfileError(
                f"invalid character in template: '{invalid.group()}'"
            )
        if end < 0:
            raise InvalidVersionProfileError("invalid template, missing '}'")
        pieces.append(retriever(name))
        position = end + len(_CLOSE)
    return "".join(pieces)


def substitute(text: str, values: Mapping[str, str]) -> str:
    """Replace placeholders with entries of ``values``; unknown names raise."""

    def lookup(name: str) -> str:
        try:
            return values[name]
        except KeyError:
            raise UnknownTemplateParameterError(name) from None

    return process_templates(text, lookup)