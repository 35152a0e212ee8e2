from __future__ import annotations

from pathlib import Path

from go_mod_vendor.adapters.errors import AdapterError
from go_mod_vendor.application.mod_vendor import ModVendor
from go_mod_vendor.domain.diagnostics import Diagnostic, FileLocation, Severity
from go_mod_vendor.domain.result import Result


def _gate(working_dir: Path, step: ModVendor) -> tuple[bool | None, list[Diagnostic]]:
    try:
        ok, reason = step.should_run(working_dir)
    except OSError as e:
        return None, [
            Diagnostic(
                code="VENDOR_CHECK_FAILED",
                rule="vendor.check",
                severity=Severity.ERROR,
                message=str(e),
                location=FileLocation(str(working_dir / "vendor")),
                is_execution=True,
            )
        ]
    if not ok:
        return False, [
            Diagnostic(
                code="VENDOR_SKIPPED",
                rule="vendor.check",
                severity=Severity.INFO,
                message=reason,
            )
        ]
    return True, []


def check_vendoring(working_dir: Path, *, step: ModVendor) -> Result[bool]:
    decision, diagnostics = _gate(working_dir, step)
    return Result(value=decision, diagnostics=diagnostics)


def vendor_modules(working_dir: Path, mod_cache: Path, *, step: ModVendor) -> Result[bool]:
    if not (working_dir / "go.mod").is_file():
        return Result(
            diagnostics=[
                Diagnostic(
                    code="GO_MOD_MISSING",
                    rule="module.exists",
                    severity=Severity.ERROR,
                    message="go.mod not found",
                    location=FileLocation(str(working_dir / "go.mod")),
                    hint="Run from the module root or pass it as WORKING_DIR",
                )
            ]
        )

    decision, diagnostics = _gate(working_dir, step)
    if not decision:
        return Result(value=decision, diagnostics=diagnostics)

    try:
        step.execute(mod_cache, working_dir)
    except (AdapterError, OSError) as e:
        diagnostics.append(
            Diagnostic(
                code="VENDOR_FAILED",
                rule="vendor.execute",
                severity=Severity.ERROR,
                message=str(e),
                hint=getattr(e, "hint", None),
                details=getattr(e, "details", None),
                is_execution=True,
            )
        )
        return Result(value=False, diagnostics=diagnostics)
    return Result(value=True, diagnostics=diagnostics)
