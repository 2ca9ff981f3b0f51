"""Wall-clock timer wrapped around each client call."""

from __future__ import annotations

import time
from typing import Optional


class StandardTimer:
    """Measure the duration of one operation.

    A timer is good for a single ``start()``/``stop()`` pair.  Before
    ``start()`` :attr:`elapsed` is ``None``; while running it reports the
    time so far; after ``stop()`` it is frozen.

    Example::

        with StandardTimer() as timer:
            do_work()
        print(timer.elapsed)
    """

    def __init__(self) -> None:
        self._started_at: Optional[float] = None
        self._stopped_at: Optional[float] = None

    def start(self) -> None:
        """Start measuring.

        Raises:
            RuntimeError: If the timer was already started.
        """
        if self._started_at is not None:
            raise RuntimeError("Timer has already been started")
        self._started_at = time.perf_counter()

    def stop(self) -> None:
        """Stop measuring.  Calling it again after the first stop does nothing.

        Raises:
            RuntimeError: If the timer was never started.
        """
        if self._started_at is None:
            raise RuntimeError("Timer has not been started")
        if self._stopped_at is None:
            self._stopped_at = time.perf_counter()

    @property
    def is_running(self) -> bool:
        return self._started_at is not None and self._stopped_at is None

    @property
    def elapsed(self) -> Optional[float]:
        """Seconds between start and stop (or now, while running)."""
        if self._started_at is None:
            return None
        end = self._stopped_at if self._stopped_at is not None else time.perf_counter()
        return end - self._started_at

    def __enter__(self) -> StandardTimer:
        self.start()
        return self

    def __exit__(self, *args: object) -> None:
        self.stop()
