"""Directory merge and directory-to-archive primitives."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import List, Protocol
from zipfile import ZIP_DEFLATED, ZipFile

from ..domain import ModuleIOError

log = logging.getLogger(__name__)


class ArchiveWriter(Protocol):
    def write_tree(self, root: Path, dest: Path) -> Path:
        """Write every file below ``root`` into ``dest`` and return ``dest``."""


def tree_entries(root: Path) -> List[Path]:
    return sorted(item for item in root.rglob("*") if item.is_file())


class ZipTreeWriter:
    """Writes a directory tree into a deflated zip archive."""

    def __init__(self, compression: int = ZIP_DEFLATED) -> None:
        self.compression = compression
        self.log = logging.getLogger(self.__class__.__name__)

    def write_tree(self, root: Path, dest: Path) -> Path:
        tmp_archive = dest.with_suffix(".tmp")
        try:
            dest.parent.mkdir(parents=True, exist_ok=True)
            with ZipFile(tmp_archive, "w", compression=self.compression) as zf:
                for item in tree_entries(root):
                    zf.write(item, item.relative_to(root).as_posix())
            tmp_archive.replace(dest)
        except OSError as exc:
            if tmp_archive.exists():
                tmp_archive.unlink()
            raise ModuleIOError(f'Can\'t generate modules archive "{dest.absolute()}"') from exc
        self.log.debug("Wrote %s from %s", dest, root)
        return dest


def copy_directory_structure(source: Path, target: Path) -> Path:
    """Merge ``source`` into ``target``, keeping relative paths and existing directories."""
    log.debug("Merging %s into %s", source, target)
    try:
        shutil.copytree(source, target, dirs_exist_ok=True)
    except OSError as exc:
        raise ModuleIOError(
            f'Can\'t copy source modules directory "{source.absolute()}" to target modules '
            f'directory "{target.absolute()}"'
        ) from exc
    return target
