import pytest

from kons.errors import ParameterTypeMismatched
from kons.types.lambda_fn import (
    Binding,
    Builtin,
    NamedLambda,
    Parameter,
    Parameters,
    UserLambda,
)
from kons.types.nil import Nil


def test_plain_names_are_normal(form):
    params = Parameters.from_form(form("(a b)"))
    assert list(params) == [Parameter.normal("A"), Parameter.normal("B")]
    assert params.required_count == 2
    assert not params.has_rest


def test_full_syntax(form):
    params = Parameters.from_form(form("(a &plain b &optional (c 1) d &rest r)"))
    assert [p.binding for p in params] == [
        Binding.NORMAL, Binding.PLAIN, Binding.OPTIONAL, Binding.OPTIONAL, Binding.REST,
    ]
    assert [p.name for p in params] == ["A", "B", "C", "D", "R"]
    assert params.items[2].default == 1
    assert params.items[3].default is Nil
    assert params.required_count == 2
    assert params.has_rest
    assert str(params) == "(A &PLAIN B &OPTIONAL (C 1) (D NIL) &REST R)"


def test_empty_parameter_list(form):
    assert len(Parameters.from_form(form("()"))) == 0
    assert str(Parameters()) == "()"


@pytest.mark.parametrize(
    "source",
    [
        "(a a)",
        "(&rest r a)",
        "(&optional b &plain c)",
        "(&optional b c d &rest r e)",
        "(a &rest)",
        "(&plain &rest r)",
        "(1 2)",
        "(&optional (b 1 2))",
        "(&optional \"b\")",
        "x",
        "5",
    ]
)
def test_invalid_parameter_lists(form, source):
    with pytest.raises(ParameterTypeMismatched):
        Parameters.from_form(form(source))


def test_is_valid_checks_ordering():
    assert Parameters([Parameter.normal("a"), Parameter.optional("b"), Parameter.rest("c")]).is_valid()
    assert not Parameters([Parameter.optional("a"), Parameter.normal("b")]).is_valid()
    assert not Parameters([Parameter.rest("a"), Parameter.normal("b")]).is_valid()
    assert not Parameters([Parameter.normal("a"), Parameter.plain("A")]).is_valid()


def test_callable_display(form):
    params = Parameters.from_form(form("(x &rest more)"))
    body = form("((car more))")
    assert str(UserLambda(params, body)) == "#<FUNCTION (LAMBDA (X &REST MORE))>"
    assert str(NamedLambda("twice", params, body)) == "#<FUNCTION (NAMED-LAMBDA TWICE (X &REST MORE))>"
    native = Builtin("car", Parameters([Parameter.normal("x")]), lambda env: Nil)
    assert str(native) == "#<FUNCTION (BUILTIN CAR (X))>"


def test_callable_equality(form):
    params = Parameters.from_form(form("(x)"))
    body = form("(x 1)")
    assert UserLambda(params, body) == UserLambda(params, form("(x 1)"))
    assert NamedLambda("f", params, body) != UserLambda(params, body)
    assert NamedLambda("f", params, body) != NamedLambda("g", params, body)
    native = Builtin("car", params, lambda env: Nil)
    assert native != native
    assert len({native}) == 1
