"""Tests for the scan controller."""

from __future__ import annotations

import threading

import pytest

from dirsize.core.calculator import DirectorySizeCalculator
from dirsize.core.errors import InvalidRootError
from dirsize.core.scanner import ScanController, ScanState, progress_percent
from dirsize.models.outcome import Cancelled, Completed, Failed

from tests.doubles import FakeFilesystem, RecordingObserver, ScriptedCalculator, make_root, write_file

TIMEOUT = 5


def _scan(controller, root, observer=None, cancel_event=None):
    return controller.scan(root, observer or RecordingObserver(), cancel_event or threading.Event())


class GatedCalculator(ScriptedCalculator):
    """Blocks inside compute() until ``gate`` is set."""

    def __init__(self, sizes):
        super().__init__(sizes)
        self.entered = threading.Event()
        self.gate = threading.Event()

    def compute(self, directory):
        self.entered.set()
        assert self.gate.wait(TIMEOUT)
        return super().compute(directory)


class TestProgressPercent:
    @pytest.mark.parametrize(
        ("processed", "total", "expected"),
        [(1, 3, 33), (2, 3, 67), (3, 3, 100), (1, 8, 13), (1, 1, 100), (1, 200, 1)],
    )
    def test_rounding(self, processed, total, expected):
        assert progress_percent(processed, total) == expected


class TestScan:
    def test_results_sorted_by_size_descending(self, tmp_path):
        root = make_root(tmp_path, ["a", "b", "c"])
        controller = ScanController(ScriptedCalculator({"a": 10, "b": 30, "c": 20}))

        outcome = _scan(controller, root)

        assert isinstance(outcome, Completed)
        assert [r.size_bytes for r in outcome.results] == [30, 20, 10]
        assert [r.name for r in outcome.results] == ["b", "c", "a"]

    @pytest.mark.parametrize("reverse", [False, True])
    def test_ties_keep_enumeration_order(self, tmp_path, reverse):
        root = make_root(tmp_path, ["a", "b", "c", "d"])
        fs = FakeFilesystem(reverse_order=reverse)
        controller = ScanController(ScriptedCalculator({"a": 5, "b": 5, "c": 9, "d": 5}, fs))

        outcome = _scan(controller, root)

        tied = ["a", "b", "d"] if not reverse else ["d", "b", "a"]
        assert [r.name for r in outcome.results] == ["c", *tied]

    def test_progress_events(self, tmp_path):
        root = make_root(tmp_path, ["a", "b", "c"])
        controller = ScanController(ScriptedCalculator({"a": 1, "b": 2, "c": 3}))
        observer = RecordingObserver()

        _scan(controller, root, observer)

        assert observer.percents == [33, 67, 100]
        assert [r.name for _, r in observer.progress] == ["a", "b", "c"]
        # scan() only returns the outcome; delivery is the worker's job
        assert observer.outcomes == []

    def test_empty_root(self, tmp_path):
        root = make_root(tmp_path, [])
        write_file(root / "loose.txt", 100)
        observer = RecordingObserver()

        outcome = _scan(ScanController(), root, observer)

        assert outcome == Completed(())
        assert observer.progress == []

    def test_denied_root_listing_is_empty_result(self, tmp_path):
        root = make_root(tmp_path, ["a"])
        controller = ScanController(DirectorySizeCalculator(FakeFilesystem(denied=[root])))

        assert _scan(controller, root) == Completed(())

    def test_cancel_after_k_directories(self, tmp_path):
        root = make_root(tmp_path, ["a", "b", "c", "d", "e"])
        calc = ScriptedCalculator({n: 1 for n in "abcde"})
        controller = ScanController(calc)
        cancel_event = threading.Event()

        class CancelAfterTwo(RecordingObserver):
            def on_progress(self, percent, last_result):
                super().on_progress(percent, last_result)
                if len(self.progress) == 2:
                    cancel_event.set()

        observer = CancelAfterTwo()
        outcome = _scan(controller, root, observer, cancel_event)

        assert isinstance(outcome, Cancelled)
        assert calc.calls == ["a", "b"]
        assert len(observer.progress) == 2

    def test_cancel_before_start_processes_nothing(self, tmp_path):
        root = make_root(tmp_path, ["a"])
        calc = ScriptedCalculator({"a": 1})
        cancel_event = threading.Event()
        cancel_event.set()

        assert isinstance(_scan(ScanController(calc), root, cancel_event=cancel_event), Cancelled)
        assert calc.calls == []

    def test_unexpected_error_fails_scan(self, tmp_path):
        root = make_root(tmp_path, ["a", "b", "c"])
        boom = OSError(5, "Input/output error")
        calc = ScriptedCalculator({"a": 10, "b": boom, "c": 30})
        observer = RecordingObserver()

        outcome = _scan(ScanController(calc), root, observer)

        assert isinstance(outcome, Failed)
        assert outcome.error is boom
        assert "Input/output error" in outcome.message
        assert calc.calls == ["a", "b"]

    def test_permission_error_from_calculator_skips_directory(self, tmp_path):
        root = make_root(tmp_path, ["a", "b", "c"])
        calc = ScriptedCalculator({"a": 10, "b": PermissionError("denied"), "c": 30})
        observer = RecordingObserver()

        outcome = _scan(ScanController(calc), root, observer)

        assert [r.name for r in outcome.results] == ["c", "a"]
        assert observer.percents == [33, 100]

    def test_data_scenario(self, tmp_path):
        root = make_root(tmp_path, ["A", "B", "C"])
        write_file(root / "A" / "one", 100)
        write_file(root / "A" / "two", 200)
        controller = ScanController(DirectorySizeCalculator(FakeFilesystem(denied=[root / "B"])))

        outcome = _scan(controller, root)

        summary = [(r.name, r.size_bytes, r.file_count) for r in outcome.results]
        assert summary == [("A", 300, 2), ("B", 0, 0), ("C", 0, 0)]
        assert outcome.results[0].full_path == root / "A"
        assert outcome.total_bytes == 300


class TestScanController:
    def test_background_scan_completes(self, tmp_path):
        root = make_root(tmp_path, ["a", "b"])
        write_file(root / "a" / "f", 42)
        controller = ScanController()
        observer = RecordingObserver()

        assert controller.start_scan(str(root), observer) is True
        assert observer.finished.wait(TIMEOUT)
        assert controller.wait(TIMEOUT)

        assert len(observer.outcomes) == 1
        outcome = observer.outcomes[0]
        assert isinstance(outcome, Completed)
        assert [r.name for r in outcome.results] == ["a", "b"]
        assert observer.percents[-1] == 100
        assert controller.state is ScanState.IDLE
        assert controller.last_outcome == outcome

    @pytest.mark.parametrize("bad", ["", "   ", "does-not-exist", "file.txt"])
    def test_invalid_root_rejected_synchronously(self, tmp_path, monkeypatch, bad):
        monkeypatch.chdir(tmp_path)
        write_file(tmp_path / "file.txt", 1)
        controller = ScanController()
        observer = RecordingObserver()

        with pytest.raises(InvalidRootError):
            controller.start_scan(bad, observer)

        assert controller.state is ScanState.IDLE
        assert observer.progress == [] and observer.outcomes == []

    def test_validate_root_returns_absolute_path(self, tmp_path, monkeypatch):
        root = make_root(tmp_path, [])
        monkeypatch.chdir(tmp_path)
        assert ScanController().validate_root("root") == root
        monkeypatch.chdir(root)
        assert ScanController().validate_root(".").is_absolute()

    def test_cancel_when_idle_is_noop(self):
        controller = ScanController()
        controller.cancel_scan()
        assert controller.state is ScanState.IDLE
        assert controller.wait(0)

    def test_cancel_running_scan(self, tmp_path):
        root = make_root(tmp_path, ["a", "b", "c"])
        calc = GatedCalculator({"a": 1, "b": 2, "c": 3})
        controller = ScanController(calc)
        observer = RecordingObserver()

        controller.start_scan(root, observer)
        assert calc.entered.wait(TIMEOUT)
        assert controller.is_running
        controller.cancel_scan()
        calc.gate.set()

        assert observer.finished.wait(TIMEOUT)
        assert observer.outcomes == [Cancelled()]
        # the in-flight computation finished; nothing after it ran
        assert calc.calls == ["a"]
        assert observer.percents == [33]

    def test_restart_while_running_cancels_first(self, tmp_path):
        root = make_root(tmp_path, ["a", "b"])
        calc = GatedCalculator({"a": 1, "b": 2})
        controller = ScanController(calc)
        first = RecordingObserver()
        second = RecordingObserver()

        assert controller.start_scan(root, first) is True
        assert calc.entered.wait(TIMEOUT)

        assert controller.start_scan(root, second) is False
        assert controller.is_running

        calc.gate.set()
        assert first.finished.wait(TIMEOUT)
        assert controller.wait(TIMEOUT)
        assert first.outcomes == [Cancelled()]
        assert second.outcomes == []

        assert controller.start_scan(root, second) is True
        assert second.finished.wait(TIMEOUT)
        assert isinstance(second.outcomes[0], Completed)
        assert len(first.outcomes) == 1

    def test_idle_before_finished_callback(self, tmp_path):
        root = make_root(tmp_path, ["a"])
        controller = ScanController()
        states = []

        class StateObserver(RecordingObserver):
            def on_finished(self, outcome):
                states.append(controller.state)
                super().on_finished(outcome)

        observer = StateObserver()
        controller.start_scan(root, observer)
        assert observer.finished.wait(TIMEOUT)
        assert states == [ScanState.IDLE]

    def test_failure_returns_to_idle(self, tmp_path):
        root = make_root(tmp_path, ["a"])
        controller = ScanController(ScriptedCalculator({"a": RuntimeError("boom")}))
        observer = RecordingObserver()

        controller.start_scan(root, observer)
        assert observer.finished.wait(TIMEOUT)
        assert controller.wait(TIMEOUT)

        assert isinstance(observer.outcomes[0], Failed)
        assert observer.progress == []
        assert controller.state is ScanState.IDLE
