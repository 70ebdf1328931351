"""Status-bar progress strip."""

from __future__ import annotations

import gi

gi.require_version("Gtk", "4.0")

from gi.repository import Gtk

from dirsize.status import progress_opacity


class ProgressStrip(Gtk.LevelBar):
    """Thin bar whose fill follows the scan percentage.

    The bar also fades in as the scan advances.
    """

    def __init__(self) -> None:
        super().__init__(
            mode=Gtk.LevelBarMode.CONTINUOUS,
            min_value=0,
            max_value=100,
            hexpand=True,
            valign=Gtk.Align.CENTER,
        )
        self.set_size_request(-1, 6)
        self.remove_offset_value("low")
        self.remove_offset_value("high")
        self.reset()

    def set_percent(self, percent: int) -> None:
        percent = max(0, min(100, percent))
        self.set_value(percent)
        self.set_opacity(progress_opacity(percent))

    def reset(self) -> None:
        self.set_value(0)
        self.set_opacity(progress_opacity(0))
