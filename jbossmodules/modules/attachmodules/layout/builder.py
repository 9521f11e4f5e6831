"""Places resolved artifacts into the module repository layout."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..domain import (
    ConfigurationError,
    ModuleIOError,
    ModuleLayout,
    ResolvedArtifact,
    ResolvedModuleSpec,
)


def index_dependencies(dependencies: Iterable[ResolvedArtifact]) -> Dict[Tuple[str, str], ResolvedArtifact]:
    """Index dependencies by group and artifact id, later entries winning."""
    index: Dict[Tuple[str, str], ResolvedArtifact] = {}
    for artifact in dependencies:
        index[artifact.key] = artifact
    return index


def find_matching_artifact(
    spec: ResolvedModuleSpec,
    project_artifact: Optional[ResolvedArtifact],
    dependency_index: Dict[Tuple[str, str], ResolvedArtifact],
) -> Optional[ResolvedArtifact]:
    """Return the project's own artifact if it matches, else the last matching dependency."""
    if spec.matches(project_artifact):
        return project_artifact
    return dependency_index.get(spec.key)


def ensure_directory(path: Path) -> Path:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ModuleIOError(f'Can\'t create module directory "{path.absolute()}"') from exc
    return path


class LayoutBuilder:
    """Copy the artifact of every module into ``<staging>/<module path>/<slot>``."""

    def __init__(self, staging_dir: Path) -> None:
        self.staging_dir = staging_dir
        self.log = logging.getLogger(self.__class__.__name__)

    def build(
        self,
        specs: Sequence[ResolvedModuleSpec],
        project_artifact: Optional[ResolvedArtifact],
        dependencies: Iterable[ResolvedArtifact],
    ) -> ModuleLayout:
        dependency_index = index_dependencies(dependencies)
        layout = ModuleLayout(staging_dir=self.staging_dir)
        for spec in specs:
            target = self.create_module(spec, project_artifact, dependency_index)
            layout.add(f"{spec.name}:{spec.slot}", target)
        self.log.info("Placed %d module(s) under %s", len(layout.placed), self.staging_dir)
        return layout

    def create_module(
        self,
        spec: ResolvedModuleSpec,
        project_artifact: Optional[ResolvedArtifact],
        dependency_index: Dict[Tuple[str, str], ResolvedArtifact],
    ) -> Path:
        artifact = find_matching_artifact(spec, project_artifact, dependency_index)
        if artifact is None:
            raise ConfigurationError(
                f'Can\'t find dependency matching artifact id "{spec.artifact_id}" '
                f'and group id "{spec.group_id}"'
            )
        if artifact.file is None:
            raise ConfigurationError(
                f'Can\'t find file for artifact id "{spec.artifact_id}" and group id "{spec.group_id}"'
            )

        slot_dir = spec.slot_dir(self.staging_dir)
        self.log.info("Creating slot directory %s for module %s", slot_dir, spec.name)
        ensure_directory(slot_dir)

        source = Path(artifact.file)
        target = spec.resource_path(self.staging_dir, source)
        self.log.info("Copying artifact %s to %s", artifact.coordinates, target.absolute())
        try:
            shutil.copyfile(source, target)
        except OSError as exc:
            raise ModuleIOError(
                f'Can\'t copy artifact file "{source.absolute()}" to slot directory "{slot_dir.absolute()}"'
            ) from exc
        return target


def module_entries(layout: ModuleLayout) -> List[str]:
    """Archive entry names of the placed module files."""
    return sorted(path.relative_to(layout.staging_dir).as_posix() for path in layout.files)
