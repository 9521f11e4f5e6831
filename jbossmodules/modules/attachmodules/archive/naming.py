"""Archive name and classifier derivation."""

from __future__ import annotations

from typing import Optional

from ..domain.constants import ARCHIVE_EXTENSION, MODULES_CLASSIFIER


def make_classifier(category: Optional[str] = None) -> str:
    """``modules``, prefixed with ``<category>-`` when a category is given."""
    if category:
        return f"{category}-{MODULES_CLASSIFIER}"
    return MODULES_CLASSIFIER


def make_archive_name(final_name: str, category: Optional[str] = None) -> str:
    """Final name of the build followed by the classifier, e.g. ``app-1.0-common-modules.zip``."""
    return f"{final_name}-{make_classifier(category)}{ARCHIVE_EXTENSION}"
