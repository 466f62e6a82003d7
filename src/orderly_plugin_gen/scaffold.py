"""Plan and write plugin package scaffolds."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .archetypes import resolve
from .config import DEFAULT_SETTINGS, IdentifierBundle, ScaffoldSettings
from .entropy import EntropySource, SystemEntropy
from .errors import DirectoryExistsError, WriteFailureError
from .schema import Archetype, PluginRequest

__all__ = ["FilePlan", "PlannedFile", "PluginScaffolder", "WriteReport"]

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PlannedFile:
    """A rendered file waiting to be written."""

    relative_path: str
    content: str


@dataclass(frozen=True, slots=True)
class FilePlan:
    """Everything needed to materialise one plugin package."""

    bundle: IdentifierBundle
    archetype: Archetype
    target_dir: Path
    files: tuple[PlannedFile, ...]

    @property
    def relative_paths(self) -> list[str]:
        return [planned.relative_path for planned in self.files]


@dataclass(frozen=True, slots=True)
class WriteReport:
    """Outcome of :meth:`PluginScaffolder.execute`.

    ``paths`` lists the files written, or in a dry run the files that would
    have been written, relative to ``target_dir``.
    """

    bundle: IdentifierBundle
    archetype: Archetype
    target_dir: Path
    paths: tuple[str, ...]
    dry_run: bool


@dataclass(slots=True)
class PluginScaffolder:
    """Create Orderly SDK plugin packages from a :class:`PluginRequest`."""

    settings: ScaffoldSettings
    entropy: EntropySource

    def __init__(
        self,
        settings: ScaffoldSettings | None = None,
        entropy: EntropySource | None = None,
    ) -> None:
        self.settings = settings or DEFAULT_SETTINGS
        self.entropy = entropy or SystemEntropy()

    def plan(self, request: PluginRequest) -> FilePlan:
        """Derive identifiers once and render every file for ``request``."""

        bundle = IdentifierBundle.derive(
            request.name, entropy=self.entropy, settings=self.settings
        )
        layout = resolve(request.archetype)
        files = tuple(
            PlannedFile(relative_path, render(bundle, self.settings))
            for relative_path, render in layout.file_list(bundle)
        )
        target_dir = request.target_parent_path / bundle.directory_name
        LOGGER.debug(
            "planned %d files for %s (%s) in %s",
            len(files),
            bundle.package_name,
            request.archetype.value,
            target_dir,
        )
        return FilePlan(
            bundle=bundle,
            archetype=request.archetype,
            target_dir=target_dir,
            files=files,
        )

    @staticmethod
    def ensure_target_available(plan: FilePlan) -> None:
        """Raise :class:`DirectoryExistsError` if the plugin directory exists."""

        if plan.target_dir.exists() or plan.target_dir.is_symlink():
            raise DirectoryExistsError(plan.target_dir)

    def execute(self, plan: FilePlan, *, dry_run: bool = False) -> WriteReport:
        """Write ``plan`` to disk, or only report it when ``dry_run`` is set.

        Raises
        ------
        DirectoryExistsError
            If the target directory already exists. Nothing is written.
        WriteFailureError
            If a file cannot be written. Files written before the failure are
            not removed.
        """

        self.ensure_target_available(plan)
        target_dir = plan.target_dir

        if dry_run:
            LOGGER.info("dry run: %d files planned under %s", len(plan.files), target_dir)
            return self._report(plan, plan.relative_paths, dry_run=True)

        written: list[str] = []
        for planned in plan.files:
            destination = target_dir / planned.relative_path
            try:
                destination.parent.mkdir(parents=True, exist_ok=True)
                destination.write_text(planned.content, encoding="utf-8", newline="")
            except OSError as exc:
                LOGGER.error("failed writing %s after %d files", destination, len(written))
                raise WriteFailureError(destination, written, exc.strerror or str(exc)) from exc
            written.append(planned.relative_path)
            LOGGER.info("created %s", destination)

        return self._report(plan, written, dry_run=False)

    def create(self, request: PluginRequest) -> WriteReport:
        """Plan and execute ``request`` in one step."""

        return self.execute(self.plan(request), dry_run=request.dry_run)

    @staticmethod
    def _report(plan: FilePlan, paths: list[str], *, dry_run: bool) -> WriteReport:
        return WriteReport(
            bundle=plan.bundle,
            archetype=plan.archetype,
            target_dir=plan.target_dir,
            paths=tuple(paths),
            dry_run=dry_run,
        )
