"""CLI interface for dirsize."""

from __future__ import annotations

import json
import logging
import sys
import time

import click

from dirsize import __version__
from dirsize.core.errors import InvalidRootError
from dirsize.core.scanner import ScanController
from dirsize.models.outcome import Cancelled, Completed, Failed, ScanOutcome
from dirsize.models.size_result import DirectorySizeResult
from dirsize.settings import Settings
from dirsize.status import outcome_status
from dirsize.utils import format_elapsed, format_size

# Seconds between Ctrl-C checks while waiting on the worker.
_POLL_INTERVAL = 0.1


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


class _ConsoleObserver:
    """Prints progress lines as each folder finishes."""

    def __init__(self, quiet: bool) -> None:
        self.quiet = quiet
        self.outcome: ScanOutcome | None = None

    def on_progress(self, percent: int, last_result: DirectorySizeResult) -> None:
        if self.quiet:
            return
        click.echo(
            f"  [{percent:3d}%] {last_result.name:40s} "
            f"{click.style(format_size(last_result.size_bytes), fg='cyan')}",
            err=True,
        )

    def on_finished(self, outcome: ScanOutcome) -> None:
        self.outcome = outcome


@click.group()
@click.version_option(__version__, prog_name="dirsize")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)")
def main(verbose: int) -> None:
    """dirsize: disk usage of every folder directly inside a directory."""
    _setup_logging(verbose)


# ── scan ─────────────────────────────────────────────────────────────────

@main.command()
@click.argument("path", required=False)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def scan(path: str | None, as_json: bool) -> None:
    """Analyse the size of each folder inside PATH.

    PATH defaults to the last analysed folder. Press Ctrl-C to cancel.
    """
    settings = Settings.instance()
    if path is None:
        path = settings.last_directory()
        if path is None:
            raise click.UsageError("No PATH given and no previously analysed folder.")

    controller = ScanController()
    observer = _ConsoleObserver(quiet=as_json)
    started = time.monotonic()

    try:
        root = controller.validate_root(path)
    except InvalidRootError as exc:
        raise click.BadParameter(str(exc), param_hint="PATH") from exc

    controller.start_scan(root, observer)
    settings.save_last_directory(root)
    if not as_json:
        click.echo(f"\n{click.style('Analysing', bold=True)} {root}...\n", err=True)

    while True:
        try:
            if controller.wait(_POLL_INTERVAL):
                break
        except KeyboardInterrupt:
            if not as_json:
                click.echo("\nCancelling...", err=True)
            controller.cancel_scan()

    _report(observer.outcome, as_json, time.monotonic() - started)


def _report(outcome: ScanOutcome | None, as_json: bool, elapsed: float) -> None:
    """Print the terminal outcome and exit with a matching status."""
    match outcome:
        case Completed(results=results):
            if as_json:
                click.echo(json.dumps([r.to_dict() for r in results], indent=2))
                return
            if results:
                click.echo()
                for r in results:
                    click.echo(
                        f"  {r.name:40s} {click.style(f'{format_size(r.size_bytes):>10s}', fg='green', bold=True)}"
                        f"  ({r.file_count:,} files)"
                    )
            click.echo(f"\n{outcome_status(outcome)} ({format_elapsed(elapsed)})\n")
        case Cancelled():
            if as_json:
                click.echo(json.dumps({"status": outcome.kind}))
            else:
                click.echo(outcome_status(outcome))
            sys.exit(130)
        case Failed():
            if as_json:
                click.echo(json.dumps({"status": outcome.kind, "error": outcome.message}))
            else:
                click.echo(click.style(outcome_status(outcome), fg="red"), err=True)
            sys.exit(1)
        case _:
            raise click.ClickException("Scan ended without an outcome")
