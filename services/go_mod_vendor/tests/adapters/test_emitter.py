import io

from go_mod_vendor.adapters.console.emitter import Emitter


def test_levels_are_indented():
    out = io.StringIO()
    logs = Emitter(out)
    logs.process("Executing build process")
    logs.subprocess("Running 'go mod vendor'")
    logs.action("Completed in %s", "1s")
    logs.break_()
    assert out.getvalue() == (
        "  Executing build process\n"
        "    Running 'go mod vendor'\n"
        "      Completed in 1s\n"
        "\n"
    )


def test_detail_indents_every_line_verbatim():
    out = io.StringIO()
    Emitter(out).detail("go: 100% done\n\nsecond line\n")
    assert out.getvalue() == "      go: 100% done\n\n      second line\n"


def test_empty_detail_writes_nothing():
    out = io.StringIO()
    Emitter(out).detail("")
    assert out.getvalue() == ""


def test_defaults_to_current_stdout(capsys):
    Emitter().process("hello")
    assert capsys.readouterr().out == "  hello\n"


def test_color_codes_are_stripped_for_non_terminal_streams():
    out = io.StringIO()
    Emitter(out).detail("\x1b[31mgo: missing go.sum entry\x1b[0m")
    assert out.getvalue() == "      go: missing go.sum entry\n"
