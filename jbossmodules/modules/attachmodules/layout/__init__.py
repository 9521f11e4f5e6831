from .builder import LayoutBuilder, ensure_directory, find_matching_artifact, index_dependencies, module_entries

__all__ = [
    "LayoutBuilder",
    "ensure_directory",
    "find_matching_artifact",
    "index_dependencies",
    "module_entries",
]
