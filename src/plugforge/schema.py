"""Data models exchanged between the provisioning components."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Iterator, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .validation import MAX_PORT, MIN_PORT


class Placeholder(str, Enum):
    """Literal tokens recognised inside template files."""

    PROJECT_NAME = "{{PROJECT_NAME}}"
    PROJECT_NAME_KEBAB = "{{PROJECT_NAME_KEBAB}}"
    PROJECT_NAME_SNAKE = "{{PROJECT_NAME_SNAKE}}"
    PORT = "{{PORT}}"


class ReplacementMap(BaseModel):
    """Values substituted for each :class:`Placeholder` during a run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    project_name: str = Field(..., min_length=1, description="Project name exactly as supplied.")
    kebab: str = Field(..., min_length=1, description="Kebab-case variant of the project name.")
    snake: str = Field(..., min_length=1, description="Snake-case variant of the project name.")
    port: int = Field(..., ge=MIN_PORT, le=MAX_PORT, description="Dev-server port.")

    def value_for(self, placeholder: Placeholder) -> str:
        """Return the replacement text for ``placeholder``."""

        if placeholder is Placeholder.PROJECT_NAME:
            return self.project_name
        if placeholder is Placeholder.PROJECT_NAME_KEBAB:
            return self.kebab
        if placeholder is Placeholder.PROJECT_NAME_SNAKE:
            return self.snake
        return str(self.port)

    def items(self) -> Iterator[Tuple[str, str]]:
        """Yield ``(token, replacement)`` pairs for every placeholder."""

        for placeholder in Placeholder:
            yield placeholder.value, self.value_for(placeholder)


class MaterializeReport(BaseModel):
    """Summary of a single template tree copy."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    files: Tuple[str, ...] = Field(default=(), description="Relative paths of copied files.")
    directories: Tuple[str, ...] = Field(default=(), description="Relative paths of created directories.")
    unprocessed: Tuple[str, ...] = Field(
        default=(),
        description="Copied files left verbatim because they could not be decoded as text.",
    )


class ProvisionResult(BaseModel):
    """Outcome of a successful provisioning run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    destination: Path = Field(..., description="Absolute location of the new project.")
    report: MaterializeReport = Field(default_factory=MaterializeReport, description="Details of the copied tree.")


__all__ = [
    "MaterializeReport",
    "Placeholder",
    "ProvisionResult",
    "ReplacementMap",
]
