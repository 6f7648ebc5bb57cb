"""Domain types for artinspect."""

from .file_kind import FileKind

__all__ = ["FileKind"]
