from __future__ import annotations

import io
import os
from pathlib import Path

from go_mod_vendor.domain.duration import format_duration
from go_mod_vendor.ports.clock import ClockPort
from go_mod_vendor.ports.executable import Execution, ExecutablePort
from go_mod_vendor.ports.log_emitter import LogEmitterPort

VENDOR_DIR = "vendor"
MOD_CACHE_ENV = "GOMODCACHE"


class ModVendor:
    """Vendors a module's dependencies with ``go mod vendor``."""

    def __init__(
        self,
        executable: ExecutablePort,
        logs: LogEmitterPort,
        clock: ClockPort,
    ) -> None:
        self._executable = executable
        self._logs = logs
        self._clock = clock

    def should_run(self, working_dir: str | Path) -> tuple[bool, str]:
        """Return whether vendoring should run, and why not when it shouldn't.

        Errors other than a missing vendor directory are raised unchanged.
        """
        try:
            (Path(working_dir) / VENDOR_DIR).stat()
        except FileNotFoundError:
            return True, ""
        return False, "modules are already vendored"

    def execute(self, mod_cache_path: str | Path, working_dir: str | Path) -> None:
        self._logs.process("Executing build process")
        self._logs.subprocess("Running 'go mod vendor'")

        buffer = io.StringIO()
        execution = Execution(
            args=["mod", "vendor"],
            env={**os.environ, MOD_CACHE_ENV: str(mod_cache_path)},
            dir=working_dir,
            stdout=buffer,
            stderr=buffer,
        )

        measurement = self._clock.measure(lambda: self._executable.execute(execution))
        if measurement.error is not None:
            self._logs.action("Failed after %s", format_duration(measurement.duration))
            self._logs.detail(buffer.getvalue())
            raise measurement.error

        self._logs.action("Completed in %s", format_duration(measurement.duration))
        self._logs.break_()
