# tests/conftest.py
from __future__ import annotations

import errno

import pytest

from temporary_folder import FilesystemError, MemoryFilesystem


class CountingFilesystem(MemoryFilesystem):
    """MemoryFilesystem that records how often each capability call ran."""

    def __init__(self, *args, **kwargs):
        self.calls = {"create": 0, "exists": 0, "delete": 0}
        super().__init__(*args, **kwargs)

    def create_directory(self, path):
        self.calls["create"] += 1
        super().create_directory(path)

    def directory_exists(self, path):
        self.calls["exists"] += 1
        return super().directory_exists(path)

    def delete_directory_recursive(self, path):
        self.calls["delete"] += 1
        super().delete_directory_recursive(path)


class ReadOnlyFilesystem(MemoryFilesystem):
    """Deletes always fail with EACCES."""

    def delete_directory_recursive(self, path):
        raise FilesystemError(errno.EACCES, "Permission denied", path)


@pytest.fixture
def memory_fs() -> MemoryFilesystem:
    return MemoryFilesystem()


@pytest.fixture
def counting_fs() -> CountingFilesystem:
    # the constructor itself creates the temp root
    fs = CountingFilesystem()
    fs.calls["create"] = 0
    return fs


@pytest.fixture
def read_only_fs() -> ReadOnlyFilesystem:
    return ReadOnlyFilesystem()
