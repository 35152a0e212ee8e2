from typing import Any, Protocol


class LogEmitterPort(Protocol):
    def process(self, message: str, *args: Any) -> None: ...
    def subprocess(self, message: str, *args: Any) -> None: ...
    def action(self, message: str, *args: Any) -> None: ...
    def detail(self, message: str, *args: Any) -> None: ...
    def break_(self) -> None: ...
