"""Directory size result dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class FileInfo:
    """A single regular file as reported by the filesystem collaborator."""

    length: int
    name: str


@dataclass(frozen=True, slots=True)
class DirectorySizeResult:
    """Aggregate size of one top-level subdirectory of a scan root.

    ``size_bytes == 0 and file_count == 0`` covers both an empty subtree
    and a subtree whose root could not be listed.
    """

    name: str
    full_path: Path
    size_bytes: int = 0
    file_count: int = 0

    @classmethod
    def for_directory(cls, directory: Path, size_bytes: int, file_count: int) -> DirectorySizeResult:
        """Build a result named after *directory*."""
        return cls(
            name=directory.name,
            full_path=directory.absolute(),
            size_bytes=size_bytes,
            file_count=file_count,
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "full_path": str(self.full_path),
            "size_bytes": self.size_bytes,
            "file_count": self.file_count,
        }
