"""Request and response bodies of the attach-modules endpoint."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field

from jbossmodules.modules.attachmodules.domain import (
    AttachedArtifact,
    ModuleSpec,
    ProjectMeta,
    ResolvedArtifact,
)


class ArtifactPayload(BaseModel):
    group_id: str = Field(min_length=1)
    artifact_id: str = Field(min_length=1)
    file: Optional[Path] = None
    version: Optional[str] = None
    type: str = "jar"
    classifier: Optional[str] = None

    def to_domain(self) -> ResolvedArtifact:
        return ResolvedArtifact(
            group_id=self.group_id,
            artifact_id=self.artifact_id,
            file=self.file,
            version=self.version,
            type=self.type,
            classifier=self.classifier,
        )


class ProjectPayload(BaseModel):
    group_id: str = Field(min_length=1)
    artifact_id: str = Field(min_length=1)
    base_dir: Path
    build_directory: Path
    final_name: str = Field(min_length=1)
    artifact: Optional[ArtifactPayload] = None

    def to_domain(self) -> ProjectMeta:
        return ProjectMeta(
            group_id=self.group_id,
            artifact_id=self.artifact_id,
            base_dir=self.base_dir,
            build_directory=self.build_directory,
            final_name=self.final_name,
            artifact=self.artifact.to_domain() if self.artifact else None,
        )


class ModulePayload(BaseModel):
    group_id: Optional[str] = None
    artifact_id: Optional[str] = None
    name: Optional[str] = None
    slot: Optional[str] = None

    def to_domain(self) -> ModuleSpec:
        return ModuleSpec(
            group_id=self.group_id,
            artifact_id=self.artifact_id,
            name=self.name,
            slot=self.slot,
        )


class AttachModulesRequest(BaseModel):
    project: ProjectPayload
    dependencies: List[ArtifactPayload] = Field(default_factory=list)
    modules: List[ModulePayload] = Field(default_factory=list)
    category: Optional[str] = None
    generate_index: bool = False


class AttachModulesResponse(BaseModel):
    attached: bool
    type: Optional[str] = None
    classifier: Optional[str] = None
    file: Optional[str] = None

    @classmethod
    def from_attachment(cls, attachment: Optional[AttachedArtifact]) -> "AttachModulesResponse":
        if attachment is None:
            return cls(attached=False)
        return cls(attached=True, **attachment.as_dict())
