"""Copy a template tree into a new project directory."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from .config import DEFAULT_EXCLUDED_DIRS, DEFAULT_EXCLUDED_FILES
from .schema import MaterializeReport, ReplacementMap
from .template import PlaceholderSubstitutor

__all__ = ["TreeMaterializer"]


LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class _Progress:
    files: list[str] = field(default_factory=list)
    directories: list[str] = field(default_factory=list)
    unprocessed: list[str] = field(default_factory=list)

    def report(self) -> MaterializeReport:
        return MaterializeReport(
            files=tuple(self.files),
            directories=tuple(self.directories),
            unprocessed=tuple(self.unprocessed),
        )


class TreeMaterializer:
    """Mirror a source tree into a fresh destination and fill in placeholders.

    Directories named in ``excluded_dirs`` are skipped at any depth without
    being descended into. Files whose basename is in ``excluded_files`` are
    not copied. Every other regular file is copied byte for byte and then
    rewritten through ``substitutor``.
    """

    def __init__(
        self,
        excluded_dirs: Iterable[str] = DEFAULT_EXCLUDED_DIRS,
        excluded_files: Iterable[str] = DEFAULT_EXCLUDED_FILES,
        substitutor: PlaceholderSubstitutor | None = None,
    ) -> None:
        self.excluded_dirs = frozenset(excluded_dirs)
        self.excluded_files = frozenset(excluded_files)
        self.substitutor = substitutor or PlaceholderSubstitutor()

    def materialize(
        self,
        source: str | Path,
        destination: str | Path,
        replacements: ReplacementMap,
    ) -> MaterializeReport:
        """Copy ``source`` to ``destination`` and substitute placeholders.

        ``destination`` must be an existing, empty directory created by the
        caller, which also owns its clean-up. Failures to create directories
        or to copy, read or write files propagate unchanged.
        """

        source = Path(source)
        destination = Path(destination)
        progress = _Progress()

        if not destination.is_dir():
            raise FileNotFoundError(destination)
        self._copy_directory(source, destination, source, replacements, progress)
        return progress.report()

    def _copy_directory(
        self,
        directory: Path,
        target: Path,
        root: Path,
        replacements: ReplacementMap,
        progress: _Progress,
    ) -> None:
        for entry in sorted(directory.iterdir(), key=lambda path: path.name):
            relative = entry.relative_to(root).as_posix()
            mirrored = target / entry.name

            if entry.is_dir():
                if entry.name in self.excluded_dirs:
                    LOGGER.debug("Skipping excluded directory %s", relative)
                    continue
                mirrored.mkdir()
                progress.directories.append(relative)
                self._copy_directory(entry, mirrored, root, replacements, progress)
                continue

            if entry.name in self.excluded_files:
                LOGGER.debug("Skipping excluded file %s", relative)
                continue

            shutil.copy2(entry, mirrored)
            progress.files.append(relative)
            LOGGER.debug("Copied %s", relative)

            if not self.substitutor.render_file(mirrored, replacements):
                LOGGER.warning("Could not process %s; copied without substitution", relative)
                progress.unprocessed.append(relative)
