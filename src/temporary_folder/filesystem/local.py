# src/temporary_folder/filesystem/local.py
from __future__ import annotations

import asyncio
import logging
import os
import shutil
import tempfile
from pathlib import Path

from temporary_folder.errors import FilesystemError
from temporary_folder.filesystem.base import Filesystem

log = logging.getLogger(__name__)


def _reraise(exc: OSError) -> FilesystemError:
    return FilesystemError(exc.errno, exc.strerror or str(exc), exc.filename)


class LocalFilesystem(Filesystem):
    """
    Real OS filesystem backed by ``os`` / ``shutil``.

    *temp_root* overrides the platform temp directory; when ``None`` the
    value of ``tempfile.gettempdir()`` is used.
    """

    def __init__(self, temp_root: str | Path | None = None):
        self.temp_root = str(temp_root) if temp_root is not None else None

    def directory_exists(self, path: str) -> bool:
        return os.path.isdir(path)

    def create_directory(self, path: str) -> None:
        try:
            os.makedirs(path, exist_ok=True)
        except OSError as exc:
            raise _reraise(exc) from exc

    def delete_directory_recursive(self, path: str) -> None:
        try:
            shutil.rmtree(path)
        except OSError as exc:
            raise _reraise(exc) from exc

    def join_path(self, first: str, second: str) -> str:
        return os.path.join(first, second)

    def system_temp_root(self) -> str:
        if self.temp_root is not None:
            return self.temp_root
        return tempfile.gettempdir()

    # rmtree on a big tree can take a while; keep it off the event loop

    async def directory_exists_async(self, path: str) -> bool:
        return await asyncio.to_thread(self.directory_exists, path)

    async def delete_directory_recursive_async(self, path: str) -> None:
        log.debug("Deleting %s in worker thread", path)
        await asyncio.to_thread(self.delete_directory_recursive, path)

    def __repr__(self) -> str:
        return f"LocalFilesystem(temp_root={self.system_temp_root()!r})"
