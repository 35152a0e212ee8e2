from go_mod_vendor.application.result_serialization import serialize_result
from go_mod_vendor.domain.diagnostics import Diagnostic, FileLocation, Severity
from go_mod_vendor.domain.result import Result


def test_serialize_result_includes_diagnostics_and_exit_code():
    result = Result(
        value=False,
        diagnostics=[
            Diagnostic(
                code="VENDOR_FAILED",
                rule="vendor.execute",
                severity=Severity.ERROR,
                message="boom",
                location=FileLocation("go.mod"),
                is_execution=True,
            )
        ],
    )
    data = serialize_result(result, command="vendor", args=["."])
    assert data["exit_code"] == 3
    assert data["value"] is False
    assert data["diagnostics"][0]["severity"] == "error"
    assert data["diagnostics"][0]["location"] == {"kind": "file", "path": "go.mod", "line": None}
