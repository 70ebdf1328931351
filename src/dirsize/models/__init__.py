"""dirsize data models."""

from dirsize.models.outcome import Cancelled, Completed, Failed, ScanOutcome
from dirsize.models.size_result import DirectorySizeResult, FileInfo

__all__ = [
    "Cancelled",
    "Completed",
    "DirectorySizeResult",
    "Failed",
    "FileInfo",
    "ScanOutcome",
]
