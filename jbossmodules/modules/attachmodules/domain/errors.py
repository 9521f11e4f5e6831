"""Errors raised while assembling the modules archive."""

from __future__ import annotations


class ModulesError(RuntimeError):
    """Base class for failures of the attach-modules step."""


class ConfigurationError(ModulesError):
    """Raised when the declared modules can't be satisfied by the given inputs."""


class ModuleIOError(ModulesError, OSError):
    """Raised when a directory, file or archive operation fails."""
