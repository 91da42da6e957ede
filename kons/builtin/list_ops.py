from __future__ import annotations

from kons.builtin.base import BINARY, REST, UNARY, arg, caller, expect
from kons.types.cons import ConsList, cons, make_list
from kons.types.environment import Environment
from kons.types.lambda_fn import Builtin
from kons.types.nil import Nil
from kons.types.symbol import Symbol


def cons_builtin(env: Environment):
    """(cons a b) prepends a to the list b, or builds the dotted pair (a . b)."""
    return cons(arg(env, "X"), arg(env, "Y"))


def car(env: Environment):
    x = arg(env, "X")
    if x is Nil:
        return Nil
    return expect(x, ConsList, what="a list").car()


def cdr(env: Environment):
    x = arg(env, "X")
    if x is Nil:
        return Nil
    return expect(x, ConsList, what="a list").cdr()


def list_builtin(env: Environment):
    from kons.evaluation.evaluator import evaluate

    return make_list(evaluate(form, caller(env)) for form in arg(env, "X"))


def register(env: Environment):
    env.update({
        Symbol('cons'): Builtin('cons', BINARY, cons_builtin),
        Symbol('car'): Builtin('car', UNARY, car),
        Symbol('cdr'): Builtin('cdr', UNARY, cdr),
        Symbol('list'): Builtin('list', REST, list_builtin),
    })
