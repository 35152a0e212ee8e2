from datetime import timedelta
import time
from typing import Callable

from go_mod_vendor.ports.clock import Measurement


class Clock:
    def __init__(self, now: Callable[[], float] = time.perf_counter) -> None:
        self._now = now

    def measure(self, operation: Callable[[], None]) -> Measurement:
        start = self._now()
        error: Exception | None = None
        try:
            operation()
        except Exception as e:  # handed back to the caller via Measurement.error
            error = e
        elapsed = max(0.0, self._now() - start)
        return Measurement(duration=timedelta(seconds=elapsed), error=error)
