"""Attach modules exports."""

from .service.assembler import AttachModulesService
from .controller import router as attachmodules_router

__all__ = ["AttachModulesService", "attachmodules_router"]
