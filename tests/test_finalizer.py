# tests/test_finalizer.py

import gc
import logging

from temporary_folder import TemporaryFolder


def _create_and_forget(fs, name: str) -> str:
    """Create a handle and drop every reference to it."""
    return TemporaryFolder.create(name, fs).path


def test_finalizer_cleans_up_forgotten_folder(memory_fs, caplog):
    caplog.set_level(logging.WARNING, logger="temporary_folder.folder")

    path = _create_and_forget(memory_fs, "forgotten")
    gc.collect()

    assert not memory_fs.directory_exists(path)
    assert "never disposed" in caplog.text


def test_finalizer_does_not_run_after_dispose(memory_fs):
    tmp = TemporaryFolder.create("disposed", memory_fs)
    path = tmp.path
    tmp.dispose_sync()

    # someone else reuses the path; the dead handle must leave it alone
    memory_fs.create_directory(path)
    del tmp
    gc.collect()

    assert memory_fs.directory_exists(path)


def test_finalizer_swallows_delete_failure(read_only_fs, caplog):
    caplog.set_level(logging.WARNING, logger="temporary_folder.folder")

    path = _create_and_forget(read_only_fs, "stuck")
    gc.collect()

    assert read_only_fs.directory_exists(path)
    assert "Finalizer failed to delete" in caplog.text


def test_finalizer_tolerates_missing_directory(counting_fs, caplog):
    caplog.set_level(logging.WARNING, logger="temporary_folder.folder")
    tmp = TemporaryFolder.create("vanished", counting_fs)
    path = tmp.path
    counting_fs.delete_directory_recursive(path)
    counting_fs.calls["delete"] = 0

    del tmp
    gc.collect()

    assert "never disposed" in caplog.text
    assert "Finalizer failed" not in caplog.text
    assert counting_fs.calls["exists"] == 1
    assert counting_fs.calls["delete"] == 0
    assert not counting_fs.directory_exists(path)
