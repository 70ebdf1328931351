"""Scanning core: filesystem listing, size calculation, scan control."""

from dirsize.core.calculator import DirectorySizeCalculator
from dirsize.core.errors import DirsizeError, InvalidRootError
from dirsize.core.filesystem import LocalFilesystem
from dirsize.core.scanner import ScanController, ScanObserver, ScanRequest, ScanState

__all__ = [
    "DirectorySizeCalculator",
    "DirsizeError",
    "InvalidRootError",
    "LocalFilesystem",
    "ScanController",
    "ScanObserver",
    "ScanRequest",
    "ScanState",
]
