# tests/filesystem/test_memory_filesystem.py

import errno

import pytest

from temporary_folder import FilesystemError, MemoryFilesystem


def test_temp_root_exists_from_the_start():
    fs = MemoryFilesystem(temp_root="/var/scratch")
    assert fs.system_temp_root() == "/var/scratch"
    assert fs.directory_exists("/var")
    assert fs.directory_exists("/var/scratch")


def test_create_directory_makes_parents_and_is_repeatable(memory_fs):
    memory_fs.create_directory("/tmp/a/b/c")
    memory_fs.create_directory("/tmp/a/b/c")

    for p in ("/tmp/a", "/tmp/a/b", "/tmp/a/b/c"):
        assert memory_fs.directory_exists(p)


def test_create_directory_through_a_file_fails(memory_fs):
    memory_fs.write_text("/tmp/file", "x")

    with pytest.raises(FilesystemError) as excinfo:
        memory_fs.create_directory("/tmp/file/child")
    assert excinfo.value.errno == errno.ENOTDIR


def test_delete_missing_directory_fails(memory_fs):
    with pytest.raises(FilesystemError) as excinfo:
        memory_fs.delete_directory_recursive("/tmp/nope")
    assert excinfo.value.errno == errno.ENOENT


def test_delete_only_touches_the_subtree(memory_fs):
    memory_fs.create_directory("/tmp/one/inner")
    memory_fs.create_directory("/tmp/one-sibling")
    memory_fs.write_text("/tmp/one/inner/f", "x")
    memory_fs.write_text("/tmp/one-sibling/g", "y")

    memory_fs.delete_directory_recursive("/tmp/one")

    assert not memory_fs.directory_exists("/tmp/one/inner")
    assert not memory_fs.file_exists("/tmp/one/inner/f")
    assert memory_fs.read_text("/tmp/one-sibling/g") == "y"
    assert memory_fs.list_directory("/tmp") == ["one-sibling"]


def test_write_text_requires_parent(memory_fs):
    with pytest.raises(FilesystemError):
        memory_fs.write_text("/tmp/missing/f.txt", "x")


def test_paths_are_normalized(memory_fs):
    memory_fs.create_directory("tmp//x/./y/")
    assert memory_fs.directory_exists("/tmp/x/y")
    assert memory_fs.join_path("/tmp", "x") == "/tmp/x"
