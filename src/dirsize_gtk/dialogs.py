"""Shared dialog helpers for the GTK frontend."""

from __future__ import annotations

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")

from gi.repository import Adw


def show_error_dialog(parent: Adw.ApplicationWindow, heading: str, body: str) -> None:
    """Show a modal error message with a single OK response."""
    dialog = Adw.AlertDialog()
    dialog.set_heading(heading)
    dialog.set_body(body)
    dialog.add_response("ok", "OK")
    dialog.set_default_response("ok")
    dialog.set_close_response("ok")
    dialog.present(parent)
