import io
import logging

import pytest

from kons.errors import (
    MalformedNumber,
    ParameterTypeMismatched,
    RecursionDepthExceeded,
    UnexpectedToken,
    UnmatchedParens,
)
from kons.interpreter import Interpreter, interpret
from kons.types.nil import Nil


def test_returns_last_value():
    assert interpret("(+ 1 2) (+ 3 4)") == 7


def test_nothing_evaluated_gives_nil():
    assert interpret("") is Nil
    assert interpret("  ; just a comment\n") is Nil


def test_environment_is_kept_between_calls(env):
    interpret("(setq a 1)", env)
    assert interpret("(+ a 1)", env) == 2


def test_parse_error_stops_quietly(env, caplog):
    caplog.set_level(logging.DEBUG, logger="kons.interpreter")
    assert interpret("(+ 1 2) )", env) == 3
    assert interpret("(setq z 1) (car", env) == 1
    assert "Stopped reading" in caplog.text


@pytest.mark.parametrize("source,error", [("(+ 1 2) )", UnexpectedToken), ("(car", UnmatchedParens)])
def test_strict_mode_raises_parse_errors(env, source, error):
    with pytest.raises(error):
        interpret(source, env, strict=True)


def test_lexical_errors_propagate():
    with pytest.raises(MalformedNumber):
        interpret("(+ --1 2)")


def test_deep_nesting_is_reported_in_either_mode():
    source = "(" * 5000 + ")" * 5000
    with pytest.raises(RecursionDepthExceeded):
        interpret(source)
    with pytest.raises(RecursionDepthExceeded):
        interpret(source, strict=True)


def test_evaluation_errors_propagate():
    with pytest.raises(ParameterTypeMismatched):
        interpret("(car 1)")


def test_byte_and_stream_sources():
    assert interpret(b"(* 6 7)") == 42
    assert interpret(io.BytesIO(b"(- 10 4)")) == 6


def test_interpreter_session(tmp_path, capsys):
    session = Interpreter(prelude="(defun sq (x) (* x x))")
    assert session.eval("(sq 4)") == 16

    path = tmp_path / "lib.lisp"
    path.write_text('(defun greet (name) (princ "hello ") (princ name))\n(greet "kons")\n')
    assert session.load(str(path)) == "kons"
    assert capsys.readouterr().out == "hello kons"
    assert session.eval("(greet \"again\")") == "again"


def test_sessions_are_isolated():
    first = Interpreter()
    second = Interpreter()
    first.eval("(setq only-here 1)")
    assert "only-here" in first.env
    assert "only-here" not in second.env
