"""Attach-modules step: stage descriptors and artifacts, then archive them."""

from __future__ import annotations

import atexit
import logging
import shutil
from pathlib import Path
from typing import Callable, Iterable, Optional, Sequence, Set

from jbossmodules.settings import Settings
from jbossmodules.modules.attachmodules.archive import (
    ArchiveWriter,
    ZipTreeWriter,
    copy_directory_structure,
    make_archive_name,
    make_classifier,
)
from jbossmodules.modules.attachmodules.domain import (
    AttachedArtifact,
    ModuleSpec,
    ProjectMeta,
    ResolvedArtifact,
    resolve_effective_specs,
)
from jbossmodules.modules.attachmodules.domain.constants import ARCHIVE_TYPE
from jbossmodules.modules.attachmodules.layout import LayoutBuilder, ensure_directory, module_entries

AttachmentSink = Optional[Callable[[AttachedArtifact], None]]


class AttachModulesService:
    """Builds the ``<final name>-[<category>-]modules.zip`` archive of a project.

    The archive holds the hand written ``module.xml`` files found in the
    project's ``src/main/modules`` directory together with the artifact of
    every declared module, placed at ``<module path>/<slot>/<file name>``.
    """

    def __init__(
        self,
        settings: Settings,
        archive_writer: Optional[ArchiveWriter] = None,
        attachment_sink: AttachmentSink = None,
    ) -> None:
        self.settings = settings
        self.archive_writer = archive_writer or ZipTreeWriter()
        self.attachment_sink = attachment_sink
        self._cleanup_dirs: Set[Path] = set()
        self.log = logging.getLogger(self.__class__.__name__)

    def attach(
        self,
        project: ProjectMeta,
        dependencies: Iterable[ResolvedArtifact] = (),
        modules: Optional[Sequence[ModuleSpec]] = None,
        *,
        category: Optional[str] = None,
        generate_index: bool = False,
    ) -> Optional[AttachedArtifact]:
        """Run the step and return the attachment, or ``None`` when skipped."""
        if generate_index:
            self.log.warning("Parameter generate_index is no longer used, index generation has been removed")

        # Projects without a modules source directory are left alone
        source_dir = project.source_dir(self.settings.source_dir)
        if not source_dir.exists():
            self.log.info(
                'The modules source directory "%s" doesn\'t exist, no modules artifacts will be attached.',
                source_dir.absolute(),
            )
            return None

        specs = resolve_effective_specs(
            project,
            modules,
            default_slot=self.settings.default_slot,
            default_name=self.settings.module_name,
            default_module_slot=self.settings.module_slot,
        )

        staging_dir = project.build_directory / self.settings.staging_dir_name
        self.log.info('Creating modules directory "%s"', staging_dir)
        ensure_directory(staging_dir)
        if self.settings.cleanup_staging:
            self._register_cleanup(staging_dir)

        self.log.info('Copying module resources to "%s"', staging_dir)
        copy_directory_structure(source_dir, staging_dir)

        layout = LayoutBuilder(staging_dir).build(specs, project.artifact, list(dependencies))
        self.log.info("Staged module files: %s", ", ".join(module_entries(layout)))

        effective_category = self.settings.category if category is None else category
        archive = project.build_directory / make_archive_name(project.final_name, effective_category)
        self.log.info('Creating module archive "%s"', archive)
        self.archive_writer.write_tree(staging_dir, archive)

        attached = AttachedArtifact(
            file=archive,
            classifier=make_classifier(effective_category),
            type=ARCHIVE_TYPE,
        )
        self.log.info('Attaching modules artifact "%s" classifier=%s', archive, attached.classifier)
        if self.attachment_sink:
            self.attachment_sink(attached)
        return attached

    def _register_cleanup(self, staging_dir: Path) -> None:
        staging_dir = staging_dir.absolute()
        if staging_dir in self._cleanup_dirs:
            return
        self._cleanup_dirs.add(staging_dir)
        atexit.register(shutil.rmtree, staging_dir, True)
