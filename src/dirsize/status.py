"""Status-bar wording shared by the CLI and the GTK frontend."""

from __future__ import annotations

from dirsize.models.outcome import Cancelled, Completed, Failed, ScanOutcome
from dirsize.models.size_result import DirectorySizeResult
from dirsize.utils import format_size

ANALYSING = "Analysing..."


def progress_status(percent: int, last_result: DirectorySizeResult | None = None) -> str:
    text = f"{ANALYSING} {percent}%"
    if last_result is not None and last_result.name:
        text += f" - {last_result.name}"
    return text


def progress_opacity(percent: int) -> float:
    """Progress strip opacity: faint at the start, solid when done."""
    return 0.2 + 0.8 * (percent / 100)


def outcome_status(outcome: ScanOutcome) -> str:
    """One-line summary of a finished scan."""
    match outcome:
        case Completed(results=results) if results:
            return (
                f"Analysis complete - {len(results)} folders analysed - "
                f"Total size: {format_size(outcome.total_bytes)}"
            )
        case Completed():
            return "No folders found or accessible."
        case Cancelled():
            return "Analysis cancelled by user."
        case Failed():
            return f"Error: {outcome.message}"
    raise TypeError(f"Unknown scan outcome: {outcome!r}")
