"""Background scan of a root directory's top-level subdirectories."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Protocol

from dirsize.core.calculator import DirectorySizeCalculator
from dirsize.core.errors import InvalidRootError
from dirsize.models.outcome import Cancelled, Completed, Failed, ScanOutcome
from dirsize.models.size_result import DirectorySizeResult

log = logging.getLogger(__name__)


class ScanObserver(Protocol):
    """Receives scan events on the worker thread.

    Observers that update a UI must marshal onto the UI thread themselves.
    """

    def on_progress(self, percent: int, last_result: DirectorySizeResult) -> None: ...

    def on_finished(self, outcome: ScanOutcome) -> None: ...


@dataclass(frozen=True)
class ScanRequest:
    """One invocation of start_scan: what to scan and who to tell."""

    root: Path
    observer: ScanObserver
    cancel_event: threading.Event = field(default_factory=threading.Event)


class ScanState(Enum):
    IDLE = "idle"
    RUNNING = "running"


def progress_percent(processed: int, total: int) -> int:
    """``round(processed * 100 / total)`` rounding half up, in integers."""
    return (processed * 200 + total) // (total * 2)


class ScanController:
    """Runs at most one directory scan at a time on a worker thread.

    Subdirectories are processed one by one; cancellation is checked before
    each of them and never interrupts a running size computation.
    """

    def __init__(self, calculator: DirectorySizeCalculator | None = None) -> None:
        self.calculator = calculator or DirectorySizeCalculator()
        self._lock = threading.Lock()
        self._state = ScanState.IDLE
        self._cancel_event: threading.Event | None = None
        self._thread: threading.Thread | None = None
        self._last_outcome: ScanOutcome | None = None

    @property
    def state(self) -> ScanState:
        with self._lock:
            return self._state

    @property
    def is_running(self) -> bool:
        return self.state is ScanState.RUNNING

    @property
    def last_outcome(self) -> ScanOutcome | None:
        """Outcome of the most recently finished scan."""
        with self._lock:
            return self._last_outcome

    def validate_root(self, root_path: str | Path) -> Path:
        """Return *root_path* as an absolute Path, or raise InvalidRootError."""
        raw = str(root_path).strip() if root_path is not None else ""
        if not raw or not self.calculator.filesystem.path_exists(Path(raw)):
            raise InvalidRootError(raw)
        return Path(raw).absolute()

    def start_scan(self, root_path: str | Path, observer: ScanObserver) -> bool:
        """Start scanning *root_path* in the background.

        If a scan is already running, request its cancellation instead and
        return False; the caller may start again once that scan has reported
        its outcome.

        Raises:
            InvalidRootError: *root_path* is empty or not a directory. The
                observer is never invoked in that case.
        """
        root = self.validate_root(root_path)

        with self._lock:
            if self._state is ScanState.RUNNING:
                log.info("Scan already running, requesting cancellation")
                self._cancel_event.set()
                return False

            request = ScanRequest(root, observer)
            thread = threading.Thread(
                target=self._run,
                args=(request,),
                name="dirsize-scan",
                daemon=True,
            )
            self._state = ScanState.RUNNING
            self._cancel_event = request.cancel_event
            self._thread = thread

        log.info("Starting scan of %s", root)
        thread.start()
        return True

    def cancel_scan(self) -> None:
        """Request cancellation of the running scan. No-op when idle."""
        with self._lock:
            if self._state is ScanState.RUNNING:
                self._cancel_event.set()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the current worker finishes. Returns False on timeout."""
        thread = self._thread
        if thread is None:
            return True
        thread.join(timeout)
        return not thread.is_alive()

    def _run(self, request: ScanRequest) -> None:
        outcome = self.scan(request.root, request.observer, request.cancel_event)
        with self._lock:
            self._last_outcome = outcome
            self._state = ScanState.IDLE
        log.info("Scan of %s %s", request.root, outcome.kind)
        request.observer.on_finished(outcome)

    def scan(
        self,
        root: Path,
        observer: ScanObserver,
        cancel_event: threading.Event,
    ) -> ScanOutcome:
        """Scan *root* synchronously and return the terminal outcome.

        Progress is pushed to *observer* after each subdirectory; the
        outcome itself is only returned.
        """
        try:
            try:
                subdirs = self.calculator.filesystem.list_direct_subdirectories(root)
            except PermissionError:
                log.debug("Cannot list subdirectories of %s", root)
                subdirs = []

            results: list[DirectorySizeResult] = []
            total = len(subdirs)
            processed = 0

            for subdir in subdirs:
                if cancel_event.is_set():
                    return Cancelled()

                try:
                    size, count = self.calculator.compute(subdir)
                except PermissionError:
                    log.debug("Cannot access: %s", subdir)
                    processed += 1
                    continue

                result = DirectorySizeResult.for_directory(subdir, size, count)
                results.append(result)
                processed += 1
                observer.on_progress(progress_percent(processed, total), result)

            results.sort(key=lambda r: r.size_bytes, reverse=True)
            return Completed(tuple(results))
        except Exception as exc:
            log.exception("Scan of %s failed", root)
            return Failed(exc)
