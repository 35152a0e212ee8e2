from __future__ import annotations

from dataclasses import asdict
from datetime import datetime, timezone
from typing import Any, TypeVar

from go_mod_vendor.domain.diagnostics import Diagnostic
from go_mod_vendor.domain.result import Result

T = TypeVar("T")


def serialize_diagnostic(diag: Diagnostic) -> dict[str, Any]:
    return {
        "id": diag.id,
        "code": diag.code,
        "rule": diag.rule,
        "severity": diag.severity.value,
        "message": diag.message,
        "hint": diag.hint,
        "details": diag.details,
        "is_execution": diag.is_execution,
        "location": asdict(diag.location) if diag.location is not None else None,
    }


def serialize_result(result: Result[T], command: str, args: list[str]) -> dict[str, Any]:
    return {
        "result_schema_version": 1,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "command": command,
        "args": args,
        "exit_code": result.exit_code,
        "value": result.value,
        "diagnostics": [serialize_diagnostic(d) for d in result.diagnostics],
    }
