from go_mod_vendor.domain.diagnostics import Diagnostic, Severity
from go_mod_vendor.domain.result import Result


def test_exit_code_precedence_exec_over_validation():
    r = Result(diagnostics=[
        Diagnostic(code="VAL", rule="r", severity=Severity.ERROR, message="v"),
        Diagnostic(code="EXEC", rule="r", severity=Severity.ERROR, message="e", is_execution=True),
    ])
    assert r.exit_code == 3


def test_info_diagnostics_do_not_fail():
    r = Result(value=False, diagnostics=[
        Diagnostic(code="SKIP", rule="r", severity=Severity.INFO, message="skipped"),
    ])
    assert r.exit_code == 0


def test_diagnostic_id_is_stable():
    a = Diagnostic(code="X", rule="r", severity=Severity.ERROR, message="m")
    b = Diagnostic(code="X", rule="r", severity=Severity.ERROR, message="m")
    assert a.id == b.id
