from dataclasses import dataclass
from datetime import timedelta
from typing import Callable, Protocol


@dataclass
class Measurement:
    duration: timedelta
    error: Exception | None = None


class ClockPort(Protocol):
    def measure(self, operation: Callable[[], None]) -> Measurement: ...
