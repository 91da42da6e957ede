import io

import pytest

from kons.__main__ import main, needs_more_input, repl
from kons.interpreter import Interpreter


@pytest.mark.parametrize(
    "text,expected",
    [
        ("(a (b)", True),
        ("(a)", False),
        ('(print "abc', True),
        ('"(("', False),
        ("; (\n", False),
        ("", False),
        ("a)", False),
        ("(--1", False),
    ]
)
def test_needs_more_input(text, expected):
    assert needs_more_input(text) is expected


def _reader(lines):
    remaining = iter(lines)

    def read(prompt):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError
    return read


def test_repl_keeps_session_after_errors(capsys):
    session = Interpreter()
    repl(session, _reader(["(setq x 2)", "(+ x", "1)", "", "(car 1)", "x"]))
    captured = capsys.readouterr()
    assert captured.out == "2\n3\n2\n\n"
    assert "Error" in captured.err


def test_repl_reports_deep_nesting(capsys):
    session = Interpreter()
    repl(session, _reader(["(" * 5000 + ")" * 5000, "(+ 1 1)"]))
    captured = capsys.readouterr()
    assert captured.out == "2\n\n"
    assert "Error: Form nested too deeply to read" in captured.err


def test_batch_evaluation(tmp_path, capsys):
    script = tmp_path / "script.lisp"
    script.write_text("(defun double (x) (+ x x))\n(print (double 21))\n")
    assert main(["-e", str(script)]) == 0
    assert capsys.readouterr().out == "42\n"


def test_batch_aborts_on_first_error(tmp_path, capsys):
    script = tmp_path / "broken.lisp"
    script.write_text('(print "before")\n(car 1)\n(print "after")\n')
    assert main(["-e", str(script)]) == 1
    captured = capsys.readouterr()
    assert captured.out == '"before"\n'
    assert "Error" in captured.err


def test_missing_file(tmp_path, capsys):
    assert main(["-e", str(tmp_path / "nope.lisp")]) == 1
    assert "nope.lisp" in capsys.readouterr().err


def test_load_then_repl(tmp_path, monkeypatch, capsys):
    lib = tmp_path / "lib.lisp"
    lib.write_text("(defun sq (x) (* x x))")
    monkeypatch.setattr("sys.stdin", io.StringIO("(sq 3)\n"))
    assert main(["-l", str(lib)]) == 0
    assert "9" in capsys.readouterr().out
