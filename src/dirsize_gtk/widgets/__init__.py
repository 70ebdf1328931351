"""Widgets used by the main window."""

from dirsize_gtk.widgets.progress_strip import ProgressStrip
from dirsize_gtk.widgets.results_list import ResultsList

__all__ = [
    "ProgressStrip",
    "ResultsList",
]
