from .assembler import AttachModulesService

__all__ = ["AttachModulesService"]
