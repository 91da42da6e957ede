"""Application engine for kons.

Binds the argument forms of a call according to the callee's parameter
specification and runs the callee:

- Too few forms for the Normal/Plain parameters, or more forms than a
  parameter list without &rest can take, raise UnmatchedNumberOfParameters.
- A callee without parameters runs directly in the caller's environment.
- Otherwise a new frame whose parent is the *calling* environment receives the
  bindings. Free variables in the body therefore resolve along the call chain.
- Builtins run their native routine against that frame; user lambdas evaluate
  their body list in it.
"""

from __future__ import annotations

import logging

from kons import Form, Value
from kons.errors import IllegalFunctionCall, UnmatchedNumberOfParameters
from kons.printer import display
from kons.types.cons import ConsList, make_list
from kons.types.environment import Environment
from kons.types.lambda_fn import Binding, Builtin, Lambda
from kons.types.nil import Nil

logger = logging.getLogger(__name__)


def _argument_forms(fn: Lambda, args: Form) -> list[Form]:
    if args is Nil:
        return []
    if isinstance(args, ConsList):
        return list(args)
    raise IllegalFunctionCall(f"Illegal function call: {fn} applied to {display(args)}")


def bind_arguments(fn: Lambda, forms: list[Form], env: Environment) -> Environment:
    """Return the call frame for `fn`, child of `env`, holding the bound arguments."""
    from kons.evaluation.evaluator import evaluate

    frame = Environment(outer=env)
    supplied = len(forms)
    for index, param in enumerate(fn.parameters):
        match param.binding:
            case Binding.REST:
                frame.define(param.name, make_list(forms[index:]))
                break
            case Binding.NORMAL:
                frame.define(param.name, evaluate(forms[index], env))
            case Binding.PLAIN:
                frame.define(param.name, forms[index])
            case Binding.OPTIONAL:
                frame.define(param.name, forms[index] if index < supplied else param.default)
    return frame


def apply(fn: Lambda, args: Form, env: Environment) -> Value:
    """Call `fn` with the argument forms in `args` (a list, or NIL for none)."""
    from kons.evaluation.evaluator import evaluate

    forms = _argument_forms(fn, args)
    params = fn.parameters
    supplied = len(forms)
    if supplied < params.required_count:
        raise UnmatchedNumberOfParameters(params.required_count, supplied)
    if params and not params.has_rest and supplied > len(params):
        raise UnmatchedNumberOfParameters(len(params), supplied)

    logger.debug("Applying %s to %d argument form(s)", fn, supplied)
    frame = bind_arguments(fn, forms, env) if params else env
    if isinstance(fn, Builtin):
        return fn.run(frame)
    return evaluate(fn.body, frame)
