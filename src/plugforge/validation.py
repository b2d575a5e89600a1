"""Predicates checking user supplied project names and ports.

Each ``validate_*`` function returns ``None`` when the value is acceptable and
a human readable reason otherwise. Only the first failing rule is reported.
The ``require_*``/``parse_*`` variants raise :class:`~plugforge.errors.ValidationError`
with the same reason instead.
"""

from __future__ import annotations

import re

from .errors import ValidationError

__all__ = [
    "MAX_NAME_LENGTH",
    "MAX_PORT",
    "MIN_PORT",
    "RESERVED_NAMES",
    "parse_port",
    "require_project_name",
    "validate_port",
    "validate_project_name",
]


MAX_NAME_LENGTH = 214
MIN_PORT = 1024
MAX_PORT = 65535
RESERVED_NAMES = frozenset({"node_modules", "favicon.ico"})

_ALLOWED_NAME = re.compile(r"[a-zA-Z0-9._-]+")
_UPPERCASE_START = re.compile(r"[A-Z]")
_DECIMAL = re.compile(r"[+-]?[0-9]+")


def validate_project_name(name: str) -> str | None:
    """Return why ``name`` cannot be used as a project name, or ``None``."""

    if not name or not name.strip():
        return "Project name cannot be empty"

    if len(name) > MAX_NAME_LENGTH:
        return f"Project name must be at most {MAX_NAME_LENGTH} characters"

    if name.startswith((".", "_")):
        return "Project name cannot start with . or _"

    # Either fully lowercase or starting with a capital letter; the rest of a
    # capitalised name is not inspected.
    if name != name.lower() and not _UPPERCASE_START.match(name):
        return "Project name should be lowercase or PascalCase"

    if not _ALLOWED_NAME.fullmatch(name):
        return "Project name can only contain letters, numbers, hyphens, underscores, and dots"

    if name.lower() in RESERVED_NAMES:
        return f'Project name "{name}" is not allowed'

    return None


def _coerce_port(value: int | str) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if not _DECIMAL.fullmatch(text):
        return None
    return int(text, 10)


def validate_port(value: int | str) -> str | None:
    """Return why ``value`` is not a usable dev-server port, or ``None``."""

    port = _coerce_port(value)
    if port is None:
        return "Port must be a number"

    if port < MIN_PORT or port > MAX_PORT:
        return f"Port must be between {MIN_PORT} and {MAX_PORT}"

    return None


def require_project_name(name: str) -> str:
    """Return ``name`` unchanged or raise :class:`ValidationError`."""

    reason = validate_project_name(name)
    if reason is not None:
        raise ValidationError(reason)
    return name


def parse_port(value: int | str) -> int:
    """Return ``value`` as an ``int`` or raise :class:`ValidationError`."""

    reason = validate_port(value)
    if reason is not None:
        raise ValidationError(reason)
    return int(value)
