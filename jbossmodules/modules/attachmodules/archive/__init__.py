from .naming import make_archive_name, make_classifier
from .writer import ArchiveWriter, ZipTreeWriter, copy_directory_structure

__all__ = [
    "ArchiveWriter",
    "ZipTreeWriter",
    "copy_directory_structure",
    "make_archive_name",
    "make_classifier",
]
