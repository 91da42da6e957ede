"""Type predicates, equality and the logical connectives."""

from __future__ import annotations

from kons.builtin.base import BINARY, REST, UNARY, arg, caller, is_true
from kons.types.cons import ConsList
from kons.types.environment import Environment
from kons.types.equality import equal
from kons.types.lambda_fn import Builtin
from kons.types.nil import Nil, T, truth
from kons.types.symbol import Symbol


def is_symbol(env: Environment):
    return truth(isinstance(arg(env, "X"), Symbol))


def is_number(env: Environment):
    x = arg(env, "X")
    return truth(isinstance(x, (int, float)))


def is_string(env: Environment):
    return truth(isinstance(arg(env, "X"), str))


def is_list(env: Environment):
    """NIL is the empty list, so it is a list too."""
    x = arg(env, "X")
    return truth(x is Nil or isinstance(x, ConsList))


def is_atom(env: Environment):
    return truth(not isinstance(arg(env, "X"), ConsList))


def is_null(env: Environment):
    return truth(arg(env, "X") is Nil)


def eq(env: Environment):
    return truth(equal(arg(env, "X"), arg(env, "Y")))


def logical_not(env: Environment):
    return truth(arg(env, "X") is Nil)


def logical_and(env: Environment):
    """Evaluate forms left to right; NIL at the first NIL, else the last value."""
    from kons.evaluation.evaluator import evaluate

    value = T
    for form in arg(env, "X"):
        value = evaluate(form, caller(env))
        if not is_true(value):
            return Nil
    return value


def logical_or(env: Environment):
    """Evaluate forms left to right; the first non-NIL value, else NIL."""
    from kons.evaluation.evaluator import evaluate

    for form in arg(env, "X"):
        value = evaluate(form, caller(env))
        if is_true(value):
            return value
    return Nil


def register(env: Environment):
    env.update({
        Symbol('symbolp'): Builtin('symbolp', UNARY, is_symbol),
        Symbol('numberp'): Builtin('numberp', UNARY, is_number),
        Symbol('stringp'): Builtin('stringp', UNARY, is_string),
        Symbol('listp'): Builtin('listp', UNARY, is_list),
        Symbol('atom'): Builtin('atom', UNARY, is_atom),
        Symbol('null'): Builtin('null', UNARY, is_null),
        Symbol('eq'): Builtin('eq', BINARY, eq),
        Symbol('not'): Builtin('not', UNARY, logical_not),
        Symbol('and'): Builtin('and', REST, logical_and),
        Symbol('or'): Builtin('or', REST, logical_or),
    })
