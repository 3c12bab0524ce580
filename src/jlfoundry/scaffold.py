"""Project materialization: render the template set and write it to disk."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .config import ProjectConfig
from .errors import FileConflictError, MaterializationError
from .naming import validate_package_name
from .template import TemplateRenderer
from .templates import PROJECT_DIRECTORIES, TEMPLATES, render_path, render_template

__all__ = ["ProjectScaffolder"]


LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class ProjectScaffolder:
    """Create the standard Julia package layout."""

    renderer: TemplateRenderer

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    def render(self, config: ProjectConfig) -> list[tuple[str, str]]:
        """Return ``(relative_path, content)`` for every file of the package."""

        return [
            (
                render_path(config, template.identifier, self.renderer),
                render_template(config, template.identifier, self.renderer),
            )
            for template in TEMPLATES
        ]

    def create(
        self,
        config: ProjectConfig,
        target_dir: str | Path,
        *,
        overwrite: bool = True,
    ) -> Path:
        """Materialize the package described by ``config`` inside ``target_dir``.

        The package name is checked and every file is rendered before anything
        touches the filesystem. Existing files are replaced unless
        ``overwrite`` is false, in which case :class:`FileConflictError` is
        raised before the first write. A failing write aborts the run and
        leaves the files written so far in place.
        """

        validate_package_name(config.name)
        files = self.render(config)

        target_path = Path(target_dir).expanduser().resolve()

        if not overwrite:
            conflicts = [target_path / relative for relative, _ in files if (target_path / relative).exists()]
            if conflicts:
                raise FileConflictError(conflicts)

        for directory in PROJECT_DIRECTORIES:
            self._make_directory(target_path / directory)

        for relative_path, content in files:
            destination = target_path / relative_path
            self._make_directory(destination.parent)
            try:
                destination.write_text(content, encoding="utf-8")
            except OSError as exc:
                raise MaterializationError(f"cannot write {destination}: {exc}", path=destination) from exc
            LOGGER.debug("wrote %s", destination)

        LOGGER.info("created package %s with %d files in %s", config.name, len(files), target_path)
        return target_path

    @staticmethod
    def _make_directory(path: Path) -> None:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise MaterializationError(f"cannot create directory {path}: {exc}", path=path) from exc
