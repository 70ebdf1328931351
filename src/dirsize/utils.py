"""Shared utility functions."""

from __future__ import annotations

import os
from pathlib import Path

SIZE_UNITS = ("bytes", "Kb", "Mb", "Gb", "Tb")


def xdg_config_home() -> Path:
    """Return XDG_CONFIG_HOME, defaulting to ~/.config."""
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))


def format_size(size_bytes: int) -> str:
    """Convert a byte count to a human-readable string.

    Uses base-1024 units up to Tb and at most two decimals, dropping
    trailing zeros: ``0 bytes``, ``1.5 Kb``, ``1 Tb``.
    """
    if size_bytes < 0:
        return f"-{format_size(-size_bytes)}"

    value = float(size_bytes)
    order = 0
    while value >= 1024 and order < len(SIZE_UNITS) - 1:
        value /= 1024
        order += 1

    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{text} {SIZE_UNITS[order]}"


def format_elapsed(seconds: float) -> str:
    """Format an elapsed time as a human-readable string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f} ms"
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes = int(seconds) // 60
    secs = seconds - minutes * 60
    return f"{minutes}m {secs:.0f}s"
