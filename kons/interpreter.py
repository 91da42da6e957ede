"""Embedding entry points.

`interpret` runs every form of a source through the parser and evaluator and
returns the last value. `Interpreter` keeps one environment alive across many
`interpret` calls, the way a REPL or a host application uses it.
"""

from __future__ import annotations

import logging
from typing import Optional

from kons import Value
from kons.builtin import default_environment
from kons.errors import EmptyInput, KonsParseError
from kons.evaluation.evaluator import evaluate
from kons.reader.lexer import Lexer, Source
from kons.reader.parser import TokenStream
from kons.types.environment import Environment
from kons.types.nil import Nil

logger = logging.getLogger(__name__)


def interpret(source: Source, env: Optional[Environment] = None, *, strict: bool = False) -> Value:
    """Parse and evaluate forms until the source is exhausted.

    Returns the value of the last evaluated form, or NIL if none was evaluated.
    A parse error ends the loop quietly, unless `strict` is set, in which case
    it is raised (running out of input never is). Lexical and evaluation errors
    always propagate. Without `env`, a fresh default environment is used.
    """
    if env is None:
        env = default_environment()
    stream = TokenStream(Lexer(source))
    result = Nil
    while True:
        try:
            form = stream.parse_expr()
        except EmptyInput:
            break
        except KonsParseError as exc:
            if strict:
                raise
            logger.debug("Stopped reading: %s", exc)
            break
        result = evaluate(form, env)
    return result


class Interpreter:
    """
    A session with its own root environment.
    Source fed to `eval` is evaluated against the same bindings every time.
    """
    def __init__(self, prelude: Source | None = None, env: Optional[Environment] = None):
        self.env = env if env is not None else default_environment()
        if prelude:
            self.eval(prelude, strict=True)

    def eval(self, code: Source, *, strict: bool = False) -> Value:
        """Evaluate every form in `code`; returns the last value."""
        return interpret(code, self.env, strict=strict)

    def load(self, path: str) -> Value:
        """Evaluate a source file, streaming it through the lexer."""
        logger.info("Loading %s", path)
        with open(path, "rb") as source:
            return interpret(source, self.env, strict=True)
