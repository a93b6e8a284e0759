# src/temporary_folder/folder.py
from __future__ import annotations

import asyncio
import errno
import logging
import ntpath
import posixpath
import re
import threading
import uuid
import weakref
from types import TracebackType
from typing import Optional, Type

from temporary_folder.errors import FilesystemError
from temporary_folder.filesystem import Filesystem, LocalFilesystem

log = logging.getLogger(__name__)


def _finalize(path: str, filesystem: Filesystem) -> None:
    # Runs from the garbage collector or at interpreter exit: nobody to raise to.
    log.warning("TemporaryFolder %s was never disposed; cleaning up in finalizer", path)
    try:
        if filesystem.directory_exists(path):
            filesystem.delete_directory_recursive(path)
    except Exception:  # noqa: BLE001
        log.warning("Finalizer failed to delete %s", path, exc_info=True)


def _check_name(name: str) -> None:
    """Reject names that would put the folder outside the temp root, or on it."""
    segments = re.split(r"[\\/]", name)
    escapes = (
        name.startswith(("/", "\\"))
        or posixpath.isabs(name)
        or bool(ntpath.splitdrive(name)[0])
        or ".." in segments
        or all(s in ("", ".") for s in segments)
    )
    if escapes:
        raise FilesystemError(errno.EINVAL, "Folder name must stay inside the temp root", name)


class TemporaryFolder:
    """
    A directory under the temp root that is deleted, with everything inside
    it, when the handle goes out of scope.

    Prefer the context-manager forms::

        with TemporaryFolder.create() as tmp:
            Path(tmp.path, "foo.txt").write_text("hello")

        async with TemporaryFolder.create("job-42") as tmp:
            ...

    ``dispose_sync()`` / ``dispose_async()`` may also be called directly.
    Whichever entry point runs first does the cleanup; later calls are
    no-ops. A handle that is never disposed is cleaned up by a
    ``weakref.finalize`` hook when it is garbage collected or, failing
    that, at interpreter exit.

    Handles only come from ``create()``; calling the class directly raises
    ``TypeError`` so an existing directory is never adopted by accident.
    """

    def __init__(self, *args, **kwargs):
        raise TypeError("use TemporaryFolder.create() to make a TemporaryFolder")

    @classmethod
    def _from_path(cls, path: str, filesystem: Filesystem) -> "TemporaryFolder":
        self = cls.__new__(cls)
        self._path = path
        self._filesystem = filesystem
        self._lock = threading.Lock()
        self._disposed = False
        self._finalizer = weakref.finalize(self, _finalize, path, filesystem)
        return self

    @classmethod
    def create(
        cls,
        name: Optional[str] = None,
        filesystem: Optional[Filesystem] = None,
    ) -> "TemporaryFolder":
        """
        Create ``<temp root>/<name>`` and return a handle bound to it.

        Parameters
        ----------
        name : str, optional
            Folder name, relative to the temp root. Nested names such as
            ``"jobs/42"`` are allowed. ``None`` or ``""`` picks a lower-cased
            UUID4.
        filesystem : Filesystem, optional
            Capability used for every filesystem call. Defaults to
            ``LocalFilesystem()``; pass a ``MemoryFilesystem`` in tests.

        Raises
        ------
        FilesystemError
            Directory creation failed, or *name* is absolute, contains a
            ``..`` segment or names the temp root itself (``EINVAL``). No
            handle is returned.
        """
        if not name:
            name = str(uuid.uuid4()).lower()
        _check_name(name)
        if filesystem is None:
            filesystem = LocalFilesystem()

        path = filesystem.join_path(filesystem.system_temp_root(), name)
        filesystem.create_directory(path)
        log.debug("Created temporary folder %s", path)
        return cls._from_path(path, filesystem)

    # properties

    @property
    def path(self) -> str:
        return self._path

    @property
    def filesystem(self) -> Filesystem:
        return self._filesystem

    @property
    def disposed(self) -> bool:
        return self._disposed

    # cleanup

    def _claim(self) -> bool:
        """Flip live -> disposed. Only the first caller gets ``True``."""
        with self._lock:
            if self._disposed:
                return False
            self._disposed = True
        self._finalizer.detach()
        return True

    def _delete(self) -> None:
        if self._filesystem.directory_exists(self._path):
            self._filesystem.delete_directory_recursive(self._path)
            log.debug("Deleted temporary folder %s", self._path)
        else:
            log.debug("Temporary folder %s already gone", self._path)

    def dispose_sync(self) -> None:
        """Delete the folder tree. Safe to call more than once."""
        if self._claim():
            self._delete()

    async def dispose_async(self) -> None:
        """
        Async twin of ``dispose_sync``; awaits the capability's async calls.

        If the awaiting task is cancelled part way, the cleanup is finished
        synchronously before ``CancelledError`` is re-raised.
        """
        if not self._claim():
            return
        try:
            if await self._filesystem.directory_exists_async(self._path):
                await self._filesystem.delete_directory_recursive_async(self._path)
                log.debug("Deleted temporary folder %s", self._path)
            else:
                log.debug("Temporary folder %s already gone", self._path)
        except asyncio.CancelledError:
            log.debug("Async dispose of %s cancelled; finishing synchronously", self._path)
            try:
                self._delete()
            except FilesystemError:
                # the cancellation has to win; a worker thread may still be deleting
                log.warning("Cleanup of %s after cancel failed", self._path, exc_info=True)
            raise

    close = dispose_sync

    # context managers

    def __enter__(self) -> "TemporaryFolder":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        self.dispose_sync()

    async def __aenter__(self) -> "TemporaryFolder":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        await self.dispose_async()

    def __repr__(self) -> str:
        state = "disposed" if self._disposed else "live"
        return f"<TemporaryFolder {self._path!r} ({state})>"


def create_temporary_folder(
    name: Optional[str] = None,
    filesystem: Optional[Filesystem] = None,
) -> TemporaryFolder:
    """Shortcut for ``TemporaryFolder.create``."""
    return TemporaryFolder.create(name, filesystem)
