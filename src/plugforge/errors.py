"""Custom exception types raised while provisioning a project."""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(RuntimeError):
    """Base class for every failure reported to the caller of a provisioning run."""


class ValidationError(ScaffoldError, ValueError):
    """Raised when a project name or port is rejected before anything is created."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class TemplateNotFoundError(ScaffoldError):
    """Raised when the source template directory is missing."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Template directory not found at {path}")
        self.path = path


class DestinationExistsError(ScaffoldError):
    """Raised when the target directory is already present on disk."""

    def __init__(self, path: Path) -> None:
        super().__init__(
            f"Directory {path} already exists. Please choose a different name "
            "or remove the existing directory."
        )
        self.path = path


class MaterializationError(ScaffoldError):
    """Raised when copying or rewriting the template tree fails.

    The partially created destination has already been removed (or an attempt
    was made) by the time this error reaches the caller. ``cause`` is the
    original failure; ``cleanup_error`` is set when removing the destination
    failed as well.
    """

    def __init__(self, destination: Path, cause: BaseException) -> None:
        super().__init__(f"Could not create project at {destination}: {cause}")
        self.destination = destination
        self.cause = cause
        self.cleanup_error: BaseException | None = None

    def attach_cleanup_error(self, error: BaseException) -> None:
        self.cleanup_error = error
        self.add_note(f"cleanup of {self.destination} also failed: {error}")


__all__ = [
    "DestinationExistsError",
    "MaterializationError",
    "ScaffoldError",
    "TemplateNotFoundError",
    "ValidationError",
]
