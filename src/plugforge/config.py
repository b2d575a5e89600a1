"""Configuration helpers shared by the provisioning engine and CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Mapping

from .naming import to_kebab_case, to_snake_case
from .schema import ReplacementMap
from .validation import require_project_name

DEFAULT_PORT = 10120
DEFAULT_EXCLUDED_DIRS = frozenset({".git", "node_modules"})
DEFAULT_EXCLUDED_FILES = frozenset({".git", "package-lock.json"})
TEMPLATE_DIR_ENV = "PLUGFORGE_TEMPLATE_DIR"


def packaged_template_dir() -> Path:
    """Return the plugin skeleton shipped inside the ``plugforge`` package."""

    return Path(str(resources.files("plugforge") / "skeleton"))


@dataclass(frozen=True, slots=True)
class ProjectIdentity:
    """Name variants describing the project being provisioned.

    Attributes
    ----------
    raw:
        The project name exactly as supplied by the user.
    kebab:
        Lowercase, hyphen separated variant of :attr:`raw`.
    snake:
        Lowercase, underscore separated variant of :attr:`raw`.
    """

    raw: str
    kebab: str
    snake: str

    @classmethod
    def from_name(cls, name: str) -> "ProjectIdentity":
        """Validate ``name`` and derive its casing variants.

        Raises :class:`~plugforge.errors.ValidationError` when ``name`` is not
        an acceptable project name.
        """

        require_project_name(name)
        return cls(raw=name, kebab=to_kebab_case(name), snake=to_snake_case(name))

    def replacements(self, port: int) -> ReplacementMap:
        """Return the placeholder values for this project served on ``port``."""

        return ReplacementMap(
            project_name=self.raw,
            kebab=self.kebab,
            snake=self.snake,
            port=port,
        )


@dataclass(frozen=True, slots=True)
class ScaffoldSettings:
    """Where templates come from and what is left out when copying them."""

    template_dir: Path = field(default_factory=packaged_template_dir)
    excluded_dirs: frozenset[str] = DEFAULT_EXCLUDED_DIRS
    excluded_files: frozenset[str] = DEFAULT_EXCLUDED_FILES
    default_port: int = DEFAULT_PORT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ScaffoldSettings":
        """Build settings honouring ``PLUGFORGE_TEMPLATE_DIR`` when set."""

        env = os.environ if environ is None else environ
        override = env.get(TEMPLATE_DIR_ENV, "").strip()
        if override:
            return cls(template_dir=Path(override).expanduser())
        return cls()


__all__ = [
    "DEFAULT_EXCLUDED_DIRS",
    "DEFAULT_EXCLUDED_FILES",
    "DEFAULT_PORT",
    "ProjectIdentity",
    "ScaffoldSettings",
    "TEMPLATE_DIR_ENV",
    "packaged_template_dir",
]
