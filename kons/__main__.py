"""Command-line shell: `python -m kons [-l FILE]... [-e FILE]... [-v]`.

Files given with -l are loaded into the session before the REPL starts. Files
given with -e are evaluated in order and the program exits without a REPL;
the first error aborts with exit status 1.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Optional, Sequence

from kons.config import get_log_level, get_recursion_limit
from kons.errors import KonsError, UnterminatedString
from kons.interpreter import Interpreter
from kons.printer import display
from kons.reader.lexer import Lexer, TokenKind

logger = logging.getLogger(__name__)

PROMPT = "* "
CONTINUATION_PROMPT = "  "


def configure_logging(verbosity: int = 0) -> None:
    logging.basicConfig(
        level=get_log_level(verbosity),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def needs_more_input(text: str) -> bool:
    """True while `text` has unclosed parentheses or an unterminated string."""
    depth = 0
    try:
        for token in Lexer(text):
            if token.kind is TokenKind.PAREN_LEFT:
                depth += 1
            elif token.kind is TokenKind.PAREN_RIGHT:
                depth -= 1
    except UnterminatedString:
        return True
    except KonsError:
        # let evaluation report it
        return False
    return depth > 0


def repl(session: Interpreter, read: Callable[[str], str] = input) -> None:
    """Read-eval-print loop; errors are reported and the session carries on."""
    while True:
        try:
            text = read(PROMPT)
            while needs_more_input(text):
                text += "\n" + read(CONTINUATION_PROMPT)
        except EOFError:
            print()
            return
        except KeyboardInterrupt:
            print()
            continue
        if not text.strip():
            continue
        try:
            print(display(session.eval(text, strict=True)))
        except KonsError as exc:
            logger.debug("Evaluation failed", exc_info=True)
            print(f"Error: {exc}", file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="kons", description="A small cons-cell Lisp interpreter")
    parser.add_argument("-l", "--load", action="append", default=[], metavar="FILE",
                        help="load FILE into the REPL environment")
    parser.add_argument("-e", "--eval", dest="batch", action="append", default=[], metavar="FILE",
                        help="evaluate FILE and exit")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="more log output (repeat for debug)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    logger.debug("args: %s", args)

    limit = get_recursion_limit()
    if limit:
        sys.setrecursionlimit(limit)

    session = Interpreter()
    for path in [*args.load, *args.batch]:
        try:
            session.load(path)
        except (KonsError, OSError) as exc:
            print(f"Error in {path}: {exc}", file=sys.stderr)
            return 1

    if args.batch:
        return 0
    repl(session)
    return 0


if __name__ == "__main__":
    sys.exit(main())
