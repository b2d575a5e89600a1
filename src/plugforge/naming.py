"""String normalisation utilities used to derive project name variants."""

from __future__ import annotations

import re

__all__ = ["to_kebab_case", "to_snake_case"]


_CASE_BOUNDARY = re.compile(r"([a-z])([A-Z])")
_KEBAB_SEPARATORS = re.compile(r"[\s_]+")
_SNAKE_SEPARATORS = re.compile(r"[\s\-]+")


def _delimit(value: str, separator: str, separators: re.Pattern[str]) -> str:
    text = _CASE_BOUNDARY.sub(rf"\1{separator}\2", value)
    text = separators.sub(separator, text)
    return text.lower()


def to_kebab_case(value: str) -> str:
    """Return ``value`` as lowercase, hyphen separated words.

    A hyphen is inserted wherever a lowercase letter is directly followed by
    an uppercase one, and every run of whitespace or underscores collapses
    into a single hyphen. Existing hyphens are kept as they are.

    >>> to_kebab_case("MyPlugin")
    'my-plugin'
    """

    return _delimit(value, "-", _KEBAB_SEPARATORS)


def to_snake_case(value: str) -> str:
    """Return ``value`` as lowercase, underscore separated words.

    >>> to_snake_case("MyPlugin")
    'my_plugin'
    """

    return _delimit(value, "_", _SNAKE_SEPARATORS)
