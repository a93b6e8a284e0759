# src/temporary_folder/__init__.py
"""
Top-level package API.

* Core objects: TemporaryFolder, create_temporary_folder, FilesystemError
* Filesystem capabilities: Filesystem, LocalFilesystem, MemoryFilesystem
"""

from .folder import TemporaryFolder, create_temporary_folder
from .errors import FilesystemError
from .config import Settings

from .filesystem import (
    Filesystem,
    LocalFilesystem,
    MemoryFilesystem,
)

__all__ = [
    # core
    "TemporaryFolder",
    "create_temporary_folder",
    "FilesystemError",
    "Settings",
    # filesystem
    "Filesystem",
    "LocalFilesystem",
    "MemoryFilesystem",
]
