"""Core evaluator for kons.

Dispatch is by value kind: symbols are looked up, quotes are unwrapped, lists go
through `eval_list` and every other value evaluates to itself.
"""

from __future__ import annotations

from kons import Form, Value
from kons.errors import RecursionDepthExceeded, SymbolNotFound, UnboundVariable
from kons.evaluation.apply import apply
from kons.types.cons import ConsList
from kons.types.environment import Environment
from kons.types.lambda_fn import Lambda
from kons.types.nil import Nil
from kons.types.quote import Quote
from kons.types.symbol import Symbol


def evaluate(form: Form, env: Environment) -> Value:
    try:
        match form:
            case Symbol():
                try:
                    return env.lookup(form)
                except SymbolNotFound as exc:
                    raise UnboundVariable(exc.name) from exc
            case Quote(value):
                return value
            case ConsList():
                return eval_list(form, env)
            case _:
                return form
    except RecursionError as exc:
        raise RecursionDepthExceeded("Maximum recursion depth exceeded") from exc


def eval_list(form: ConsList, env: Environment) -> Value:
    """Evaluate a list as a call or, when its head is not callable, as a sequence.

    - `()` is NIL.
    - `(x)` is the value of x, never a call.
    - `(f args...)` with a callable f applies f to the unevaluated argument forms.
    - `(x y z...)` otherwise evaluates y, z... in order and returns the last
      value (x is evaluated and discarded). This is also how a function body
      holding several forms runs.
    - `(x . y)` otherwise evaluates y.
    """
    if form.is_empty():
        return Nil
    head, tail = form.unpack()
    result = evaluate(head, env)
    if tail is Nil:
        return result
    if isinstance(result, Lambda):
        return apply(result, tail, env)
    if isinstance(tail, ConsList):
        value = Nil
        for item in tail:
            value = evaluate(item, env)
        return value
    return evaluate(tail, env)
