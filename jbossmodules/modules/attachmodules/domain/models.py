"""Results handed back to the build orchestrator."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

from .constants import ARCHIVE_TYPE


@dataclass(frozen=True)
class AttachedArtifact:
    """Registration request for an additional build output."""

    file: Path
    classifier: str
    type: str = ARCHIVE_TYPE

    def as_dict(self) -> Dict[str, str]:
        return {"type": self.type, "classifier": self.classifier, "file": str(self.file)}


@dataclass
class ModuleLayout:
    """Files placed into the staging tree, keyed by module name and slot."""

    staging_dir: Path
    placed: Dict[str, Path] = field(default_factory=dict)

    def add(self, module_key: str, target: Path) -> None:
        self.placed[module_key] = target

    @property
    def files(self) -> List[Path]:
        return list(self.placed.values())
