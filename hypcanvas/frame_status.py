from __future__ import annotations

import logging
import time
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)


class FrameStatus:
    """Collects frame draw durations and logs their average once per period.

    Call :meth:`start_frame` before drawing and :meth:`end_frame` after.  The
    summary is emitted from :meth:`end_frame` once ``period`` seconds have
    passed since the previous summary.
    """

    def __init__(self, period: float = 5.0, clock: Optional[Callable[[], float]] = None) -> None:
        self._clock = clock or time.perf_counter
        self._period = period
        self._durations: List[float] = []
        self._frame_start: Optional[float] = None
        self._last_report = self._clock()

    @property
    def period(self) -> float:
        return self._period

    @period.setter
    def period(self, value: float) -> None:
        self.report()
        self._period = value
        logger.info("frameStatus: updated period to %.3fs", value)

    @property
    def pending(self) -> int:
        """Number of frames recorded since the last summary."""

        return len(self._durations)

    def start_frame(self) -> None:
        if self._frame_start is not None:
            raise RuntimeError("start_frame called while a frame is already in progress")
        self._frame_start = self._clock()

    def end_frame(self) -> None:
        if self._frame_start is None:
            raise RuntimeError("end_frame called without a matching start_frame")
        now = self._clock()
        self._durations.append(now - self._frame_start)
        self._frame_start = None
        if now - self._last_report >= self._period:
            self.report()

    def report(self) -> Optional[float]:
        """Log and reset the frame statistics; return the average duration in seconds."""

        self._last_report = self._clock()
        if not self._durations:
            return None
        count = len(self._durations)
        average = sum(self._durations) / count
        logger.info("frameStatus: %d frame(s), avg %.2fms", count, average * 1000.0)
        self._durations.clear()
        return average


__all__ = ["FrameStatus"]
