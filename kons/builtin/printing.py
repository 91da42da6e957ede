from __future__ import annotations

from kons.builtin.base import NO_PARAMETERS, UNARY, arg
from kons.printer import display, princ_string
from kons.types.environment import Environment
from kons.types.lambda_fn import Builtin
from kons.types.nil import Nil
from kons.types.symbol import Symbol


def print_builtin(env: Environment):
    """Write the re-readable form of X and a newline; returns X."""
    x = arg(env, "X")
    print(display(x))
    return x


def princ(env: Environment):
    """Write X for humans (strings without quotes), no newline; returns X."""
    x = arg(env, "X")
    print(princ_string(x), end="", flush=True)
    return x


def terpri(env: Environment):
    print()
    return Nil


def register(env: Environment):
    env.update({
        Symbol('print'): Builtin('print', UNARY, print_builtin),
        Symbol('princ'): Builtin('princ', UNARY, princ),
        Symbol('terpri'): Builtin('terpri', NO_PARAMETERS, terpri),
    })
