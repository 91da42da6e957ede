"""Builtins that receive raw forms: quote, cond, setq, defun, lambda, funcall.

They are ordinary builtins; Plain and Rest parameters hand them their
arguments unevaluated, and they decide what to evaluate and where.
"""

from __future__ import annotations

from kons.builtin.base import arg, caller, expect, is_true
from kons.types.cons import ConsList
from kons.types.environment import Environment
from kons.types.lambda_fn import Builtin, Lambda, NamedLambda, Parameter, Parameters, UserLambda
from kons.types.nil import Nil
from kons.types.symbol import Symbol

QUOTE_PARAMETERS = Parameters([Parameter.plain("X")])
COND_PARAMETERS = Parameters([Parameter.rest("X")])
SETQ_PARAMETERS = Parameters([Parameter.plain("X"), Parameter.normal("Y")])
DEFUN_PARAMETERS = Parameters([Parameter.plain("X"), Parameter.plain("Y"), Parameter.rest("Z")])
LAMBDA_PARAMETERS = Parameters([Parameter.plain("X"), Parameter.rest("Y")])
FUNCALL_PARAMETERS = Parameters([Parameter.normal("X"), Parameter.rest("Y")])


def quote(env: Environment):
    return arg(env, "X")


def cond(env: Environment):
    """(cond (test body...)...)

    Runs the body of the first clause whose test is not NIL and returns its
    value; a clause without a body returns the test value. NIL if no clause
    matches.
    """
    from kons.evaluation.evaluator import evaluate

    outer = caller(env)
    for clause in arg(env, "X"):
        test, body = expect(clause, ConsList, what="a cond clause").unpack()
        value = evaluate(test, outer)
        if is_true(value):
            return value if body is Nil else evaluate(body, outer)
    return Nil


def setq(env: Environment):
    """(setq name value) binds name globally and returns the value."""
    name = expect(arg(env, "X"), Symbol, what="a symbol")
    value = arg(env, "Y")
    caller(env).define_global(name, value)
    return value


def defun(env: Environment):
    """(defun name (params...) body...) defines a named function globally and returns its name."""
    name = expect(arg(env, "X"), Symbol, what="a function name")
    parameters = Parameters.from_form(arg(env, "Y"))
    fn = NamedLambda(name.id, parameters, arg(env, "Z"))
    caller(env).define_global(name, fn)
    return name


def lambda_builtin(env: Environment):
    parameters = Parameters.from_form(arg(env, "X"))
    return UserLambda(parameters, arg(env, "Y"))


def funcall(env: Environment):
    """(funcall fn args...) calls fn with the argument forms, evaluated per its parameters."""
    from kons.evaluation.apply import apply
    from kons.evaluation.evaluator import evaluate

    outer = caller(env)
    fn = arg(env, "X")
    if isinstance(fn, Symbol):
        fn = evaluate(fn, outer)
    fn = expect(fn, Lambda, what="a function")
    return apply(fn, arg(env, "Y"), outer)


def register(env: Environment):
    env.update({
        Symbol('quote'): Builtin('quote', QUOTE_PARAMETERS, quote),
        Symbol('cond'): Builtin('cond', COND_PARAMETERS, cond),
        Symbol('setq'): Builtin('setq', SETQ_PARAMETERS, setq),
        Symbol('defun'): Builtin('defun', DEFUN_PARAMETERS, defun),
        Symbol('lambda'): Builtin('lambda', LAMBDA_PARAMETERS, lambda_builtin),
        Symbol('funcall'): Builtin('funcall', FUNCALL_PARAMETERS, funcall),
    })
