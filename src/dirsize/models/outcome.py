"""Terminal scan outcomes.

Exactly one of these is delivered per scan, as its final event.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Union

from dirsize.models.size_result import DirectorySizeResult


@dataclass(frozen=True, slots=True)
class Completed:
    """Scan finished; results are sorted by size, largest first."""

    kind: ClassVar[str] = "completed"

    results: tuple[DirectorySizeResult, ...] = field(default_factory=tuple)

    @property
    def total_bytes(self) -> int:
        return sum(r.size_bytes for r in self.results)


@dataclass(frozen=True, slots=True)
class Cancelled:
    """Scan stopped at a cancellation checkpoint. Partial results are discarded."""

    kind: ClassVar[str] = "cancelled"


@dataclass(frozen=True, slots=True)
class Failed:
    """Scan aborted by an unexpected error."""

    kind: ClassVar[str] = "failed"

    error: BaseException

    @property
    def message(self) -> str:
        return str(self.error) or type(self.error).__name__


ScanOutcome = Union[Completed, Cancelled, Failed]
