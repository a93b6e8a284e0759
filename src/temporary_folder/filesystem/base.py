# src/temporary_folder/filesystem/base.py
"""
Filesystem capability
=====================

The handful of operations a ``TemporaryFolder`` needs from the outside
world. Concrete implementations:

* ``LocalFilesystem``  – the real OS filesystem (default)
* ``MemoryFilesystem`` – in-memory, no I/O, for tests

Failures are reported as ``FilesystemError``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Filesystem(ABC):
    """Abstract base class for every filesystem capability."""

    @abstractmethod
    def directory_exists(self, path: str) -> bool: ...

    @abstractmethod
    def create_directory(self, path: str) -> None:
        """Create *path* and any missing parents. No-op if it already exists."""

    @abstractmethod
    def delete_directory_recursive(self, path: str) -> None:
        """Delete *path* and everything below it. Raises if *path* is absent."""

    @abstractmethod
    def join_path(self, first: str, second: str) -> str: ...

    @abstractmethod
    def system_temp_root(self) -> str: ...

    # async variants: run inline unless a subclass can do better

    async def directory_exists_async(self, path: str) -> bool:
        return self.directory_exists(path)

    async def delete_directory_recursive_async(self, path: str) -> None:
        self.delete_directory_recursive(path)
