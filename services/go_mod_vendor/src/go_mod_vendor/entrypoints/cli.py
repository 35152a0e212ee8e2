from pathlib import Path
import json as _json
import sys
from typing import Any

import typer

from go_mod_vendor.adapters.clock.system_clock import Clock
from go_mod_vendor.adapters.executable.subprocess_executable import SubprocessExecutable
from go_mod_vendor.adapters.console.emitter import Emitter
from go_mod_vendor.application.mod_vendor import ModVendor
from go_mod_vendor.application.result_serialization import serialize_result
from go_mod_vendor.application.settings import (
    SETTINGS_FILE,
    VendorSettings,
    read_settings,
    resolve_mod_cache,
)
from go_mod_vendor.application.vendor_modules import check_vendoring, vendor_modules
from go_mod_vendor.domain.diagnostics import Severity
from go_mod_vendor.domain.result import Result

app = typer.Typer(add_completion=False)


def _report(result: Result[Any], command: str, args: list[str], json_output: bool) -> None:
    if json_output:
        typer.echo(_json.dumps(serialize_result(result, command=command, args=args)))
        return
    for d in result.diagnostics:
        if d.severity == Severity.INFO:
            typer.echo(d.message)
        else:
            typer.echo(f"{d.severity.value}: {d.code}: {d.message}", err=True)
            if d.hint:
                typer.echo(f"  hint: {d.hint}", err=True)


def _load_settings(working_dir: Path, command: str, json_output: bool) -> VendorSettings:
    settings_result = read_settings(working_dir / SETTINGS_FILE)
    if settings_result.value is None:
        _report(settings_result, command, [str(working_dir)], json_output)
        raise typer.Exit(settings_result.exit_code)
    return settings_result.value


def _build_step(go: str, json_output: bool) -> ModVendor:
    # Keep stdout clean for the JSON payload.
    logs = Emitter(sys.stderr if json_output else None)
    return ModVendor(SubprocessExecutable(go), logs, Clock())


@app.command()
def vendor(
    working_dir: Path = typer.Argument(Path(".")),
    mod_cache: Path | None = typer.Option(None, "--mod-cache"),
    go: str | None = typer.Option(None, "--go"),
    json_output: bool = typer.Option(False, "--json"),
):
    """Run `go mod vendor` unless the module is already vendored."""
    settings = _load_settings(working_dir, "vendor", json_output)
    result = vendor_modules(
        working_dir,
        resolve_mod_cache(mod_cache, settings),
        step=_build_step(go or settings.go, json_output),
    )
    _report(result, "vendor", [str(working_dir)], json_output)
    raise typer.Exit(result.exit_code)


@app.command()
def check(
    working_dir: Path = typer.Argument(Path(".")),
    json_output: bool = typer.Option(False, "--json"),
):
    """Report whether `vendor` would run for WORKING_DIR."""
    settings = _load_settings(working_dir, "check", json_output)
    result = check_vendoring(working_dir, step=_build_step(settings.go, json_output))
    if json_output:
        _report(result, "check", [str(working_dir)], json_output)
    elif result.value:
        typer.echo("run")
    elif result.value is False:
        reason = next((d.message for d in result.diagnostics), "")
        typer.echo(f"skip: {reason}")
    else:
        _report(result, "check", [str(working_dir)], json_output)
    raise typer.Exit(result.exit_code)
