"""Constants shared across attachmodules domain models."""

DEFAULT_SLOT = "main"
DEFAULT_SOURCE_DIR = "src/main/modules"
DEFAULT_STAGING_DIR_NAME = "modules"

ARCHIVE_TYPE = "zip"
ARCHIVE_EXTENSION = ".zip"
MODULES_CLASSIFIER = "modules"
