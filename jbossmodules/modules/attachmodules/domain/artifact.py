"""Domain objects describing the build project and its resolved artifacts."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple


@dataclass(frozen=True)
class ResolvedArtifact:
    """A Maven artifact as produced by dependency resolution."""

    group_id: str
    artifact_id: str
    file: Optional[Path] = None
    version: Optional[str] = None
    type: str = "jar"
    classifier: Optional[str] = None

    @property
    def key(self) -> Tuple[str, str]:
        return self.group_id, self.artifact_id

    @property
    def coordinates(self) -> str:
        parts = [self.group_id, self.artifact_id]
        if self.version:
            parts.append(self.version)
        return ":".join(parts)


@dataclass(frozen=True)
class ProjectMeta:
    """Identity and layout of the project being packaged."""

    group_id: str
    artifact_id: str
    base_dir: Path
    build_directory: Path
    final_name: str
    artifact: Optional[ResolvedArtifact] = None

    def source_dir(self, relative: str) -> Path:
        return self.base_dir / Path(relative)
