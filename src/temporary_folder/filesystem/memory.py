# src/temporary_folder/filesystem/memory.py
"""
In-memory filesystem
====================

Deterministic, I/O-free stand-in for ``LocalFilesystem``. Paths are POSIX
style and always absolute; relative paths are resolved against ``/``.

Besides the capability interface it offers a few file helpers
(``write_text``, ``read_text``, ``file_exists``, ``list_directory``) so that
callers can put content inside a folder and check it disappears again.
"""

from __future__ import annotations

import errno
import os
import posixpath
import threading
from typing import Dict, List, Set

from temporary_folder.errors import FilesystemError
from temporary_folder.filesystem.base import Filesystem


def _error(code: int, path: str) -> FilesystemError:
    return FilesystemError(code, os.strerror(code), path)


class MemoryFilesystem(Filesystem):
    """Directories and text files kept in two dicts behind one lock."""

    def __init__(self, temp_root: str = "/tmp"):
        self._lock = threading.Lock()
        self._dirs: Set[str] = {"/"}
        self._files: Dict[str, str] = {}
        self._temp_root = self._norm(temp_root)
        self.create_directory(self._temp_root)

    @staticmethod
    def _norm(path: str) -> str:
        return posixpath.normpath(posixpath.join("/", str(path)))

    @staticmethod
    def _ancestors(path: str) -> List[str]:
        # "/a/b/c" -> ["/", "/a", "/a/b"]
        out: List[str] = []
        parent = posixpath.dirname(path)
        while parent != path:
            out.append(parent)
            path, parent = parent, posixpath.dirname(parent)
        return list(reversed(out))

    # capability interface

    def directory_exists(self, path: str) -> bool:
        path = self._norm(path)
        with self._lock:
            return path in self._dirs

    def create_directory(self, path: str) -> None:
        path = self._norm(path)
        with self._lock:
            for segment in self._ancestors(path) + [path]:
                if segment in self._files:
                    raise _error(errno.ENOTDIR if segment != path else errno.EEXIST, segment)
            for segment in self._ancestors(path) + [path]:
                self._dirs.add(segment)

    def delete_directory_recursive(self, path: str) -> None:
        path = self._norm(path)
        with self._lock:
            if path not in self._dirs:
                code = errno.ENOTDIR if path in self._files else errno.ENOENT
                raise _error(code, path)
            prefix = path.rstrip("/") + "/"
            self._dirs = {d for d in self._dirs if d != path and not d.startswith(prefix)}
            self._files = {f: t for f, t in self._files.items() if not f.startswith(prefix)}
            self._dirs.add("/")

    def join_path(self, first: str, second: str) -> str:
        return posixpath.join(first, second)

    def system_temp_root(self) -> str:
        return self._temp_root

    # file helpers

    def write_text(self, path: str, text: str) -> None:
        path = self._norm(path)
        with self._lock:
            if path in self._dirs:
                raise _error(errno.EISDIR, path)
            if posixpath.dirname(path) not in self._dirs:
                raise _error(errno.ENOENT, path)
            self._files[path] = text

    def read_text(self, path: str) -> str:
        path = self._norm(path)
        with self._lock:
            try:
                return self._files[path]
            except KeyError:
                raise _error(errno.ENOENT, path) from None

    def file_exists(self, path: str) -> bool:
        path = self._norm(path)
        with self._lock:
            return path in self._files

    def list_directory(self, path: str) -> List[str]:
        path = self._norm(path)
        with self._lock:
            if path not in self._dirs:
                raise _error(errno.ENOENT, path)
            entries = [
                posixpath.basename(p)
                for p in list(self._dirs) + list(self._files)
                if p != path and posixpath.dirname(p) == path
            ]
        return sorted(entries)

    def __repr__(self) -> str:
        return f"MemoryFilesystem(dirs={len(self._dirs)}, files={len(self._files)})"
