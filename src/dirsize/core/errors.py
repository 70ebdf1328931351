"""Errors raised by the scanner to its callers.

Permission problems are reported by the filesystem as the built-in
``PermissionError`` and never leave the calculator.
"""

from __future__ import annotations


class DirsizeError(Exception):
    """Base class for dirsize errors."""


class InvalidRootError(DirsizeError):
    """Scan root is empty or not an existing directory."""

    def __init__(self, root: str) -> None:
        self.root = root
        if root:
            super().__init__(f"Not an existing directory: {root}")
        else:
            super().__init__("No directory selected")
