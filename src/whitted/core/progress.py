"""Thread-safe pixel progress counter.

Render workers report each finished pixel through ``PixelProgress.step()``.
The counter is the only mutable state shared between workers; it is
guarded by a lock and invokes an optional callback whenever the completed
percentage crosses the next reporting interval.

Example:
    >>> def report(done: int, total: int) -> None:
    ...     print(f"{done}/{total}")
    >>> progress = PixelProgress(total=100, callback=report, interval=0.5)
    >>> for _ in range(100):
    ...     progress.step()
    50/100
    100/100
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

logger = logging.getLogger(__name__)

# Type alias for progress callback
# Callback receives (completed_pixels, total_pixels)
ProgressCallback = Callable[[int, int], None]


class PixelProgress:
    """Atomic counter of rendered pixels with periodic reporting.

    Args:
        total: Total number of pixels in the render.
        callback: Called with (done, total) at every reporting milestone.
        interval: Reporting interval as a fraction of ``total`` (0.01 = 1%).

    Raises:
        ValueError: If total is negative or interval is not in (0, 1].
    """

    def __init__(
        self,
        total: int,
        callback: ProgressCallback | None = None,
        interval: float = 0.01,
    ) -> None:
        if total < 0:
            raise ValueError(f"total must be non-negative, got {total}")
        if not 0.0 < interval <= 1.0:
            raise ValueError(f"interval must be in (0, 1], got {interval}")
        self._total = total
        self._callback = callback
        self._step = max(1, int(total * interval))
        self._done = 0
        self._next_report = self._step
        self._lock = threading.Lock()

    @property
    def total(self) -> int:
        return self._total

    @property
    def done(self) -> int:
        with self._lock:
            return self._done

    def step(self) -> None:
        """Record one finished pixel and report if a milestone was reached."""
        with self._lock:
            self._done += 1
            done = self._done
            report = done >= self._next_report or done == self._total
            if report:
                while self._next_report <= done:
                    self._next_report += self._step
        if report:
            logger.debug("Rendered %d/%d pixels", done, self._total)
            if self._callback is not None:
                self._callback(done, self._total)
