"""Indented console emitter for build-step progress.

Each level nests two spaces deeper than the one above it, so a step's
announcement, the command it runs, the outcome and any raw command output
read as a tree::

      Executing build process
        Running 'go mod vendor'
          Completed in 1.2s
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

import typer

PROCESS = 1
SUBPROCESS = 2
ACTION = 3
DETAIL = 3


class Emitter:
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved per write so redirected stdout (tests, CLI runners) is honoured.
        return self._stream if self._stream is not None else sys.stdout

    def _emit(self, level: int, message: str, args: tuple[Any, ...]) -> None:
        text = message % args if args else message
        text = text.rstrip("\n")
        if not text:
            return
        indent = "  " * level
        out = self.stream
        for line in text.split("\n"):
            typer.echo(f"{indent}{line}" if line else "", file=out)

    def process(self, message: str, *args: Any) -> None:
        self._emit(PROCESS, message, args)

    def subprocess(self, message: str, *args: Any) -> None:
        self._emit(SUBPROCESS, message, args)

    def action(self, message: str, *args: Any) -> None:
        self._emit(ACTION, message, args)

    def detail(self, message: str, *args: Any) -> None:
        self._emit(DETAIL, message, args)

    def break_(self) -> None:
        typer.echo("", file=self.stream)
