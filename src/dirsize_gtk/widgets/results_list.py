"""List of analysed folders, largest first."""

from __future__ import annotations

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")

from gi.repository import Adw, GLib, Gtk

from dirsize.models.size_result import DirectorySizeResult
from dirsize.utils import format_size


class ResultsList(Gtk.Stack):
    """Boxed list of folder rows with an empty-state placeholder."""

    def __init__(self) -> None:
        super().__init__(vexpand=True)

        self.empty_status = Adw.StatusPage(
            icon_name="folder-symbolic",
            title="No Results",
            description="Choose a folder and press Analyse.",
        )
        self.add_named(self.empty_status, "empty")

        scrolled = Gtk.ScrolledWindow(
            vexpand=True,
            hscrollbar_policy=Gtk.PolicyType.NEVER,
        )
        self.list_box = Gtk.ListBox(
            selection_mode=Gtk.SelectionMode.NONE,
            margin_top=12,
            margin_bottom=12,
            margin_start=12,
            margin_end=12,
            valign=Gtk.Align.START,
        )
        self.list_box.add_css_class("boxed-list")
        scrolled.set_child(Adw.Clamp(maximum_size=900, child=self.list_box))
        self.add_named(scrolled, "results")

        self.set_visible_child_name("empty")

    def clear(self) -> None:
        self.list_box.remove_all()
        self.set_visible_child_name("empty")

    def set_results(self, results: tuple[DirectorySizeResult, ...]) -> None:
        """Replace the list contents with *results*, kept in the given order."""
        self.list_box.remove_all()
        for result in results:
            self.list_box.append(self._build_row(result))
        self.set_visible_child_name("results" if results else "empty")

    @staticmethod
    def _build_row(result: DirectorySizeResult) -> Adw.ActionRow:
        row = Adw.ActionRow(
            title=GLib.markup_escape_text(result.name),
            subtitle=GLib.markup_escape_text(str(result.full_path)),
        )
        row.set_title_lines(1)
        row.set_subtitle_lines(1)
        row.add_prefix(Gtk.Image.new_from_icon_name("folder-symbolic"))

        count_label = Gtk.Label(
            label=f"{result.file_count:,} file{'s' if result.file_count != 1 else ''}",
        )
        count_label.add_css_class("dim-label")
        count_label.add_css_class("caption")
        row.add_suffix(count_label)

        size_label = Gtk.Label(label=format_size(result.size_bytes), width_chars=10, xalign=1)
        size_label.add_css_class("numeric")
        row.add_suffix(size_label)
        return row
