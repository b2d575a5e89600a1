"""Project provisioning: validate inputs, copy the template, roll back on failure."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from .config import ProjectIdentity, ScaffoldSettings
from .errors import DestinationExistsError, MaterializationError, TemplateNotFoundError
from .materialize import TreeMaterializer
from .schema import ProvisionResult
from .validation import parse_port

__all__ = ["ProjectScaffolder", "provision"]


LOGGER = logging.getLogger(__name__)


class ProjectScaffolder:
    """Create a new project directory from a template tree.

    A run either leaves ``destination`` fully populated or removes it again;
    a partially copied tree is never reported as a success.
    """

    def __init__(
        self,
        settings: ScaffoldSettings | None = None,
        materializer: TreeMaterializer | None = None,
    ) -> None:
        self.settings = settings or ScaffoldSettings()
        self.materializer = materializer or TreeMaterializer(
            excluded_dirs=self.settings.excluded_dirs,
            excluded_files=self.settings.excluded_files,
        )

    def provision(
        self,
        project: ProjectIdentity | str,
        port: int | str,
        destination: str | Path,
        *,
        source: str | Path | None = None,
    ) -> ProvisionResult:
        """Provision ``project`` into ``destination``.

        Parameters
        ----------
        project:
            A :class:`ProjectIdentity` or a raw project name, which is
            validated first.
        port:
            Dev-server port substituted for the port placeholder.
        destination:
            Directory to create. It must not exist yet.
        source:
            Template root. Defaults to :attr:`ScaffoldSettings.template_dir`.

        Raises
        ------
        ValidationError
            The name or port is not acceptable. Nothing was created.
        TemplateNotFoundError
            ``source`` does not exist. Nothing was created.
        DestinationExistsError
            ``destination`` already exists. It was left untouched.
        MaterializationError
            Copying failed. ``destination`` and any parent directories this
            run created have been removed again.
        """

        identity = project if isinstance(project, ProjectIdentity) else ProjectIdentity.from_name(project)
        replacements = identity.replacements(parse_port(port))

        template_dir = Path(source) if source is not None else self.settings.template_dir
        if not template_dir.is_dir():
            raise TemplateNotFoundError(template_dir)

        target = Path(destination).expanduser().absolute()
        if target.exists() or target.is_symlink():
            raise DestinationExistsError(target)

        LOGGER.info("Creating %s at %s from %s", identity.raw, target, template_dir)
        created = self._create_destination(target)
        try:
            report = self.materializer.materialize(template_dir, target, replacements)
        except OSError as exc:
            error = MaterializationError(target, exc)
            cleanup_error = self._remove_created(created)
            if cleanup_error is not None:
                error.attach_cleanup_error(cleanup_error)
            raise error from exc
        except BaseException as exc:
            cleanup_error = self._remove_created(created)
            if cleanup_error is not None:
                exc.add_note(f"cleanup of {created} also failed: {cleanup_error}")
            raise

        LOGGER.info("Created %s (%d files)", target, len(report.files))
        return ProvisionResult(destination=target, report=report)

    @staticmethod
    def _create_destination(target: Path) -> Path:
        """Create ``target`` and any missing parents; return the topmost one created.

        Only directories made by this call are ever handed to the rollback.
        """

        missing: list[Path] = []
        current = target
        while not (current.exists() or current.is_symlink()):
            missing.append(current)
            current = current.parent
        if not missing:
            raise DestinationExistsError(target)

        made: list[Path] = []
        try:
            for path in reversed(missing):
                path.mkdir()
                made.append(path)
        except OSError as exc:
            for path in reversed(made):
                try:
                    path.rmdir()
                except OSError as cleanup_exc:
                    LOGGER.error("Could not remove %s: %s", path, cleanup_exc)
            if isinstance(exc, FileExistsError) and path == target:
                raise DestinationExistsError(target) from exc
            raise MaterializationError(target, exc) from exc
        return missing[-1]

    @staticmethod
    def _remove_created(root: Path) -> OSError | None:
        if not root.exists():
            return None
        LOGGER.info("Removing partially created %s", root)
        try:
            shutil.rmtree(root)
        except OSError as exc:
            LOGGER.error("Could not remove %s: %s", root, exc)
            return exc
        return None


def provision(
    project: ProjectIdentity | str,
    port: int | str,
    source: str | Path,
    destination: str | Path,
) -> ProvisionResult:
    """Provision ``project`` from the template at ``source`` into ``destination``."""

    return ProjectScaffolder().provision(project, port, destination, source=source)
