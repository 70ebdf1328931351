"""Filesystem listing primitives used by the size calculator.

All methods raise ``PermissionError`` when a directory cannot be listed and
``FileNotFoundError`` when it vanished. Symbolic links are neither descended
into nor counted as files.
"""

from __future__ import annotations

import os
from pathlib import Path

from dirsize.models.size_result import FileInfo


class LocalFilesystem:
    """Listing backed by ``os.scandir``."""

    def list_direct_files(self, path: Path) -> list[FileInfo]:
        """Regular files directly inside *path*."""
        files: list[FileInfo] = []
        with os.scandir(path) as it:
            for entry in it:
                if entry.is_file(follow_symlinks=False):
                    files.append(FileInfo(entry.stat(follow_symlinks=False).st_size, entry.name))
        return files

    def list_direct_subdirectories(self, path: Path) -> list[Path]:
        """Subdirectories directly inside *path*, in enumeration order."""
        with os.scandir(path) as it:
            return [Path(entry.path) for entry in it if entry.is_dir(follow_symlinks=False)]

    def list_all_files_recursively(self, path: Path) -> list[FileInfo]:
        """Every regular file beneath *path*.

        One atomic listing: an unreadable directory anywhere in the subtree
        aborts the whole call.
        """
        files: list[FileInfo] = []
        stack: list[Path | str] = [path]
        while stack:
            current = stack.pop()
            with os.scandir(current) as it:
                for entry in it:
                    if entry.is_file(follow_symlinks=False):
                        files.append(FileInfo(entry.stat(follow_symlinks=False).st_size, entry.name))
                    elif entry.is_dir(follow_symlinks=False):
                        stack.append(entry.path)
        return files

    def path_exists(self, path: Path) -> bool:
        """Whether *path* is an existing directory."""
        return Path(path).is_dir()
