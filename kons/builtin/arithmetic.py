"""Arithmetic and numeric comparison builtins.

All take two Normal parameters X and Y. Mixing an integer with a float
promotes to float; two integers stay integers (`/` truncates toward zero).
"""

from __future__ import annotations

import math

from kons.builtin.base import BINARY, arg, expect_number
from kons.errors import DivisionByZero
from kons.types.environment import Environment
from kons.types.lambda_fn import Builtin
from kons.types.nil import truth
from kons.types.symbol import Symbol


def _operands(env: Environment) -> tuple[int | float, int | float]:
    return expect_number(arg(env, "X")), expect_number(arg(env, "Y"))


def _divisor(env: Environment) -> tuple[int | float, int | float]:
    x, y = _operands(env)
    if y == 0:
        raise DivisionByZero(f"Division of {x} by zero")
    return x, y


def _truncating_div(x: int, y: int) -> int:
    quotient = abs(x) // abs(y)
    return quotient if (x >= 0) == (y >= 0) else -quotient


def add(env: Environment):
    x, y = _operands(env)
    return x + y


def sub(env: Environment):
    x, y = _operands(env)
    return x - y


def mul(env: Environment):
    x, y = _operands(env)
    return x * y


def div(env: Environment):
    """Integer division truncates toward zero; anything involving a float is float division."""
    x, y = _divisor(env)
    if isinstance(x, int) and isinstance(y, int):
        return _truncating_div(x, y)
    return x / y


def mod(env: Environment):
    """Remainder with the sign of the dividend."""
    x, y = _divisor(env)
    if isinstance(x, int) and isinstance(y, int):
        return x - y * _truncating_div(x, y)
    return math.fmod(x, y)


def lt(env: Environment):
    x, y = _operands(env)
    return truth(x < y)


def gt(env: Environment):
    x, y = _operands(env)
    return truth(x > y)


def num_eq(env: Environment):
    x, y = _operands(env)
    return truth(x == y)


def lte(env: Environment):
    x, y = _operands(env)
    return truth(x <= y)


def gte(env: Environment):
    x, y = _operands(env)
    return truth(x >= y)


def register(env: Environment):
    env.update({
        Symbol('+'): Builtin('+', BINARY, add),
        Symbol('-'): Builtin('-', BINARY, sub),
        Symbol('*'): Builtin('*', BINARY, mul),
        Symbol('/'): Builtin('/', BINARY, div),
        Symbol('mod'): Builtin('mod', BINARY, mod),
        Symbol('<'): Builtin('<', BINARY, lt),
        Symbol('>'): Builtin('>', BINARY, gt),
        Symbol('='): Builtin('=', BINARY, num_eq),
        Symbol('<='): Builtin('<=', BINARY, lte),
        Symbol('>='): Builtin('>=', BINARY, gte),
    })
