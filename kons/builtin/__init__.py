"""Default builtin catalogue.

Each module exposes `register(env)`, which binds its builtins in the given
frame; `default_environment()` builds a fresh root frame holding all of them.
"""

from kons.builtin import arithmetic, forms, list_ops, predicates, printing
from kons.types.environment import Environment

MODULES = (arithmetic, predicates, list_ops, forms, printing)


def register(env: Environment) -> Environment:
    for module in MODULES:
        module.register(env)
    return env


def default_environment() -> Environment:
    return register(Environment())
