# src/temporary_folder/filesystem/__init__.py

from .base import Filesystem
from .local import LocalFilesystem
from .memory import MemoryFilesystem

__all__ = [
    "Filesystem",
    "LocalFilesystem",
    "MemoryFilesystem",
]
