import logging

import pytest

from hypcanvas import FrameStatus


class _Clock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def _frame(status: FrameStatus, clock: _Clock, start: float, duration: float) -> None:
    clock.now = start
    status.start_frame()
    clock.now = start + duration
    status.end_frame()


def test_frames_accumulate_until_period_elapses(caplog) -> None:
    clock = _Clock()
    status = FrameStatus(period=5.0, clock=clock)

    with caplog.at_level(logging.INFO, logger="hypcanvas.frame_status"):
        _frame(status, clock, 0.0, 0.010)
        assert status.pending == 1
        assert caplog.text == ""

        _frame(status, clock, 5.0, 0.030)

    assert status.pending == 0
    assert "frameStatus: 2 frame(s), avg 20.00ms" in caplog.text


def test_report_returns_average_and_resets() -> None:
    clock = _Clock()
    status = FrameStatus(period=100.0, clock=clock)
    _frame(status, clock, 1.0, 0.5)
    _frame(status, clock, 2.0, 1.5)

    assert status.report() == pytest.approx(1.0)
    assert status.report() is None


def test_changing_period_flushes_statistics(caplog) -> None:
    clock = _Clock()
    status = FrameStatus(period=100.0, clock=clock)
    _frame(status, clock, 1.0, 0.002)

    with caplog.at_level(logging.INFO, logger="hypcanvas.frame_status"):
        status.period = 1.0

    assert status.period == 1.0
    assert status.pending == 0
    assert "updated period" in caplog.text


def test_mismatched_frame_calls_raise() -> None:
    status = FrameStatus()

    with pytest.raises(RuntimeError):
        status.end_frame()

    status.start_frame()
    with pytest.raises(RuntimeError):
        status.start_frame()
