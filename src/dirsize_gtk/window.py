"""Main application window."""

from __future__ import annotations

import logging
from pathlib import Path

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")

from gi.repository import Adw, Gio, GLib, Gtk

from dirsize.core.errors import InvalidRootError
from dirsize.core.scanner import ScanController
from dirsize.models.outcome import Completed, Failed, ScanOutcome
from dirsize.models.size_result import DirectorySizeResult
from dirsize.settings import Settings
from dirsize.status import ANALYSING, outcome_status, progress_status
from dirsize_gtk.dialogs import show_error_dialog
from dirsize_gtk.widgets import ProgressStrip, ResultsList

log = logging.getLogger(__name__)

_DEFAULT_SIZE = (900, 650)


class _WindowObserver:
    """Forwards worker-thread scan events to the GTK main loop."""

    def __init__(self, window: DirsizeWindow, generation: int) -> None:
        self._window = window
        self._generation = generation

    def on_progress(self, percent: int, last_result: DirectorySizeResult) -> None:
        GLib.idle_add(self._window.on_scan_progress, percent, last_result, self._generation)

    def on_finished(self, outcome: ScanOutcome) -> None:
        GLib.idle_add(self._window.on_scan_finished, outcome, self._generation)


class DirsizeWindow(Adw.ApplicationWindow):
    """Folder picker, analyse/cancel button, results list and status bar."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.set_title("Folder Sizes")

        self.settings = Settings.instance()
        self.controller = ScanController()
        self._scan_generation: int = 0

        width, height = self.settings.window_size() or _DEFAULT_SIZE
        self.set_default_size(width, height)
        if self.settings.get("window.maximized", False):
            self.maximize()
        self.connect("close-request", self._on_close_request)

        toolbar_view = Adw.ToolbarView()
        self.set_content(toolbar_view)
        toolbar_view.add_top_bar(Adw.HeaderBar())

        main_box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL)
        toolbar_view.set_content(main_box)

        # ── Folder picker row ─────────────────────────────────
        picker_box = Gtk.Box(
            spacing=6,
            margin_top=12,
            margin_start=12,
            margin_end=12,
        )
        main_box.append(picker_box)

        self.path_entry = Gtk.Entry(
            hexpand=True,
            placeholder_text="Folder to analyse",
        )
        self.path_entry.connect("activate", self._on_analyse_clicked)
        picker_box.append(self.path_entry)

        browse_btn = Gtk.Button(
            child=Adw.ButtonContent(icon_name="folder-open-symbolic", label="Browse"),
        )
        browse_btn.connect("clicked", self._on_browse_clicked)
        picker_box.append(browse_btn)

        self.analyse_content = Adw.ButtonContent(icon_name="edit-find-symbolic", label="Analyse")
        self.analyse_btn = Gtk.Button(child=self.analyse_content)
        self.analyse_btn.add_css_class("suggested-action")
        self.analyse_btn.connect("clicked", self._on_analyse_clicked)
        picker_box.append(self.analyse_btn)

        # ── Results ───────────────────────────────────────────
        self.results_list = ResultsList()
        main_box.append(self.results_list)

        # ── Status bar ────────────────────────────────────────
        main_box.append(Gtk.Separator())
        status_box = Gtk.Box(
            orientation=Gtk.Orientation.VERTICAL,
            spacing=4,
            margin_top=6,
            margin_bottom=6,
            margin_start=12,
            margin_end=12,
        )
        main_box.append(status_box)

        self.progress_strip = ProgressStrip()
        status_box.append(self.progress_strip)

        self.status_label = Gtk.Label(label="Ready", xalign=0)
        self.status_label.add_css_class("dim-label")
        status_box.append(self.status_label)

        last_dir = self.settings.last_directory()
        if last_dir:
            self.path_entry.set_text(last_dir)

    # ── Folder selection ──────────────────────────────────────

    def _on_browse_clicked(self, _button: Gtk.Button) -> None:
        dialog = Gtk.FileDialog(title="Select the folder to analyse", modal=True)
        current = self.path_entry.get_text().strip()
        if current and Path(current).is_dir():
            dialog.set_initial_folder(Gio.File.new_for_path(current))
        dialog.select_folder(self, None, self._on_folder_selected)

    def _on_folder_selected(self, dialog: Gtk.FileDialog, result: Gio.AsyncResult) -> None:
        try:
            folder = dialog.select_folder_finish(result)
        except GLib.Error as e:
            log.debug("Folder selection dismissed: %s", e.message)
            return
        path = folder.get_path() if folder else None
        if path:
            self.path_entry.set_text(path)
            self.settings.save_last_directory(path)

    # ── Scan control ──────────────────────────────────────────

    def _on_analyse_clicked(self, _widget: Gtk.Widget) -> None:
        path = self.path_entry.get_text().strip()
        try:
            root = self.controller.validate_root(path)
        except InvalidRootError:
            show_error_dialog(self, "Error", "Please select a valid folder.")
            return

        self.settings.save_last_directory(root)

        generation = self._scan_generation + 1
        if not self.controller.start_scan(root, _WindowObserver(self, generation)):
            self.analyse_content.set_label("Cancelling...")
            self.analyse_btn.set_sensitive(False)
            return

        self._scan_generation = generation
        self.results_list.clear()
        self.progress_strip.reset()
        self.status_label.set_label(ANALYSING)
        self.analyse_content.set_label("Cancel")
        self.analyse_content.set_icon_name("process-stop-symbolic")
        self.analyse_btn.remove_css_class("suggested-action")

    def on_scan_progress(self, percent: int, last_result: DirectorySizeResult, generation: int) -> None:
        """Update the status bar. Called via GLib.idle_add."""
        if generation != self._scan_generation:
            return
        self.progress_strip.set_percent(percent)
        self.status_label.set_label(progress_status(percent, last_result))

    def on_scan_finished(self, outcome: ScanOutcome, generation: int) -> None:
        """Show the terminal outcome. Called via GLib.idle_add."""
        if generation != self._scan_generation:
            return

        self.progress_strip.reset()
        self.status_label.set_label(outcome_status(outcome))

        if isinstance(outcome, Completed):
            self.results_list.set_results(outcome.results)
        elif isinstance(outcome, Failed):
            show_error_dialog(self, "Error", f"An error occurred: {outcome.message}")

        self.analyse_content.set_label("Analyse")
        self.analyse_content.set_icon_name("edit-find-symbolic")
        self.analyse_btn.add_css_class("suggested-action")
        self.analyse_btn.set_sensitive(True)

    # ── Persistence ───────────────────────────────────────────

    def _on_close_request(self, _window: Gtk.Window) -> bool:
        self.controller.cancel_scan()
        width, height = self.get_default_size()
        self.settings.save_window_state(width, height, self.is_maximized())
        return False
