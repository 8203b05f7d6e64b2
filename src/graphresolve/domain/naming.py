"""Derive collection accessor names from model class names."""

from __future__ import annotations

import re
from typing import Final

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_SIBILANT_ENDINGS: Final[tuple[str, ...]] = ("s", "x", "z", "ch", "sh")
_VOWELS: Final[str] = "aeiou"


def snake_case(name: str) -> str:
    """``BlogEntry`` -> ``blog_entry``; ``HTTPRequest`` -> ``http_request``."""

    return _CAMEL_BOUNDARY.sub("_", name).lower()


def pluralize(word: str) -> str:
    """English pluralisation good enough for table-like model names."""

    if not word:
        return word
    if word.endswith("y") and len(word) > 1 and word[-2] not in _VOWELS:
        return word[:-1] + "ies"
    if word.endswith(_SIBILANT_ENDINGS):
        return word + "es"
    return word + "s"


def collection_accessor(model: type) -> str:
    return pluralize(snake_case(model.__name__))
