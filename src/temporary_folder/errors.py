# src/temporary_folder/errors.py
from __future__ import annotations


class FilesystemError(OSError):
    """
    Any failure reported by a filesystem capability.

    Subclasses ``OSError`` so ``errno`` / ``strerror`` / ``filename`` keep
    their usual meaning and ``except OSError`` callers still catch it.
    """
