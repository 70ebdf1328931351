"""Aggregate size and file count of a single directory."""

from __future__ import annotations

import logging
from pathlib import Path

from dirsize.core.filesystem import LocalFilesystem

log = logging.getLogger(__name__)


class DirectorySizeCalculator:
    """Sums file sizes under a directory, skipping unreadable subtrees.

    Accounting is all-or-nothing per direct subdirectory: a permission
    error anywhere beneath one drops that subdirectory's whole contribution.
    """

    def __init__(self, filesystem: LocalFilesystem | None = None) -> None:
        self.filesystem = filesystem or LocalFilesystem()

    def compute(self, directory: Path) -> tuple[int, int]:
        """Return ``(size_bytes, file_count)`` for *directory*.

        Never raises ``PermissionError``. Other errors (e.g. the directory
        disappearing mid-scan) propagate to the caller.
        """
        try:
            files = self.filesystem.list_direct_files(directory)
            size = sum(f.length for f in files)
            count = len(files)

            for subdir in self.filesystem.list_direct_subdirectories(directory):
                try:
                    nested = self.filesystem.list_all_files_recursively(subdir)
                except PermissionError:
                    log.debug("Cannot access: %s", subdir)
                    continue
                size += sum(f.length for f in nested)
                count += len(nested)
        except PermissionError:
            log.debug("Cannot read directory: %s", directory)
            return 0, 0

        return size, count
