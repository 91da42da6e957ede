"""Shared pieces of the builtin catalogue.

A builtin is a plain function taking the call frame. Its arguments have already
been bound in that frame by the application engine, so it reads them back by
name with `arg`. Raw forms received through Plain or Rest parameters must be
evaluated in `caller(env)`, never in the frame itself, so a user variable named
X or Y is not captured by the builtin's own parameter names.
"""

from __future__ import annotations

from kons import Value
from kons.errors import ParameterTypeMismatched
from kons.printer import display
from kons.types.environment import Environment
from kons.types.lambda_fn import Parameter, Parameters
from kons.types.nil import Nil

NO_PARAMETERS = Parameters()
UNARY = Parameters([Parameter.normal("X")])
BINARY = Parameters([Parameter.normal("X"), Parameter.normal("Y")])
REST = Parameters([Parameter.rest("X")])


def arg(env: Environment, name: str) -> Value:
    return env.lookup(name)


def caller(env: Environment) -> Environment:
    """The environment the builtin was called from."""
    return env.outer if env.outer is not None else env


def expect(value: Value, *kinds: type, what: str = "") -> Value:
    if not isinstance(value, kinds):
        expected = what or " or ".join(k.__name__ for k in kinds)
        raise ParameterTypeMismatched(f"Expected {expected}, got {display(value)}")
    return value


def expect_number(value: Value) -> int | float:
    return expect(value, int, float, what="a number")


def is_true(value: Value) -> bool:
    return value is not Nil
