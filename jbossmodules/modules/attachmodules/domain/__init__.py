from .artifact import ProjectMeta, ResolvedArtifact
from .errors import ConfigurationError, ModuleIOError, ModulesError
from .models import AttachedArtifact, ModuleLayout
from .module_spec import ModuleSpec, ResolvedModuleSpec, resolve_effective_specs

__all__ = [
    "AttachedArtifact",
    "ConfigurationError",
    "ModuleIOError",
    "ModuleLayout",
    "ModuleSpec",
    "ModulesError",
    "ProjectMeta",
    "ResolvedArtifact",
    "ResolvedModuleSpec",
    "resolve_effective_specs",
]
