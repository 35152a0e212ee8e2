from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol, TextIO


def _new_args() -> list[str]:
    return []


@dataclass
class Execution:
    args: list[str] = field(default_factory=_new_args)
    env: dict[str, str] | None = None
    dir: Path | str | None = None
    stdout: TextIO | None = None
    stderr: TextIO | None = None


class ExecutablePort(Protocol):
    def execute(self, execution: Execution) -> None: ...
