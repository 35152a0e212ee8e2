from pathlib import Path
import os
import shutil
import subprocess

from go_mod_vendor.adapters.errors import CommandFailed, CommandNotFound
from go_mod_vendor.ports.executable import Execution


class SubprocessExecutable:
    """Runs a named executable found on PATH.

    When one sink is given for both streams, stderr is merged into stdout by
    the OS so the transcript keeps the order the process wrote it in.
    """

    def __init__(self, name: str = "go") -> None:
        self.name = name

    def _resolve(self, env: dict[str, str] | None) -> str:
        path = shutil.which(self.name, path=(env if env is not None else os.environ).get("PATH"))
        if path is None:
            raise CommandNotFound(
                f"{self.name}: executable file not found in $PATH",
                details={"name": self.name},
                hint="Install the Go toolchain or pass --go with its path",
            )
        return path

    def execute(self, execution: Execution) -> None:
        binary = self._resolve(execution.env)
        merged = execution.stdout is not None and execution.stdout is execution.stderr
        completed = subprocess.run(
            [binary, *execution.args],
            cwd=Path(execution.dir) if execution.dir is not None else None,
            env=execution.env,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT if merged else subprocess.PIPE,
            text=True,
            errors="replace",
            check=False,
        )
        if execution.stdout is not None and completed.stdout:
            execution.stdout.write(completed.stdout)
        if not merged and execution.stderr is not None and completed.stderr:
            execution.stderr.write(completed.stderr)
        if completed.returncode != 0:
            command = " ".join([self.name, *execution.args])
            raise CommandFailed(
                f"failed to execute {command}: exit status {completed.returncode}",
                details={"exit_code": completed.returncode, "args": list(execution.args)},
            )
