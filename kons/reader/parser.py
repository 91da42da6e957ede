"""
  Recursive-descent parser

Consumes Tokens and produces one value tree per top-level form:

    - ( ... )        -> Cons / EndsWith list, `()` -> NIL
    - (a b . c)      -> dotted list terminating in c
    - 'x, '(...)     -> Quote
    - symbols        -> Symbol, case-folded; `T` and `NIL` become the singletons
    - numbers        -> int / float
    - strings        -> str

A list holding exactly one list collapses to that inner list: `((A B))` reads
as `(A B)`.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from kons import Form
from kons.errors import (
    EmptyInput,
    RecursionDepthExceeded,
    UnexpectedEOF,
    UnexpectedToken,
    UnmatchedParens,
)
from kons.printer import display
from kons.reader.lexer import Lexer, Source, Token, TokenKind
from kons.types.cons import ConsList, make_list
from kons.types.nil import Nil, T
from kons.types.quote import Quote
from kons.types.symbol import Symbol, fold

logger = logging.getLogger(__name__)


def _atom(token: Token) -> Form:
    match token.kind:
        case TokenKind.INTEGER | TokenKind.FLOAT | TokenKind.STRING:
            return token.value
        case TokenKind.SYMBOL:
            name = fold(token.value)
            if name == "T":
                return T
            if name == "NIL":
                return Nil
            return Symbol(name)
    raise UnexpectedToken(token)


def _fold(items: list[Form]) -> Form:
    if not items:
        return Nil
    if len(items) == 1 and isinstance(items[0], ConsList):
        return items[0]
    return make_list(items)


class TokenStream:
    def __init__(self, tokens: Iterable[Token]):
        self.tokens = iter(tokens)
        self.buffer: list[Token] = []

    @classmethod
    def from_source(cls, source: Source) -> TokenStream:
        return cls(Lexer(source))

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def parse_expr(self) -> Form:
        """Parse exactly one top-level form; raises EmptyInput when no tokens remain."""
        token = self.advance()
        if token is None:
            raise EmptyInput()
        try:
            match token.kind:
                case TokenKind.DOT | TokenKind.PAREN_RIGHT:
                    raise UnexpectedToken(token)
                case TokenKind.PAREN_LEFT:
                    form = self._parse_list()
                case TokenKind.QUOTE:
                    form = self._parse_quote()
                case _:
                    form = _atom(token)
        except RecursionError as exc:
            raise RecursionDepthExceeded("Form nested too deeply to read") from exc
        logger.debug("Parsed form: %s", display(form))
        return form

    def parse_all(self) -> Iterator[Form]:
        while self.peek() is not None:
            yield self.parse_expr()

    def _parse_list(self) -> Form:
        # the opening paren has been consumed
        items: list[Form] = []
        while True:
            token = self.advance()
            if token is None:
                raise UnmatchedParens()
            match token.kind:
                case TokenKind.PAREN_RIGHT:
                    return _fold(items)
                case TokenKind.DOT:
                    if not items:
                        raise UnexpectedToken(token)
                    terminator = self._parse_terminator()
                    closing = self.advance()
                    if closing is None:
                        raise UnmatchedParens()
                    if closing.kind is not TokenKind.PAREN_RIGHT:
                        raise UnexpectedToken(closing)
                    return make_list(items, terminator)
                case TokenKind.PAREN_LEFT:
                    items.append(self._parse_list())
                case TokenKind.QUOTE:
                    items.append(self._parse_quote())
                case _:
                    items.append(_atom(token))

    def _parse_terminator(self) -> Form:
        token = self.advance()
        if token is None:
            raise UnexpectedEOF()
        match token.kind:
            case TokenKind.PAREN_RIGHT | TokenKind.DOT:
                raise UnexpectedToken(token)
            case TokenKind.PAREN_LEFT:
                return self._parse_list()
            case TokenKind.QUOTE:
                return self._parse_quote()
            case _:
                return _atom(token)

    def _parse_quote(self) -> Quote:
        token = self.advance()
        if token is None:
            raise UnexpectedEOF()
        match token.kind:
            case TokenKind.PAREN_RIGHT | TokenKind.DOT:
                raise UnexpectedToken(token)
            case TokenKind.PAREN_LEFT:
                return Quote(self._parse_list())
            case TokenKind.QUOTE:
                return Quote(self._parse_quote())
            case _:
                return Quote(_atom(token))


def parse(tokens: Iterable[Token]) -> Form:
    """Parse one form from a token iterator, consuming only the tokens it needs."""
    if isinstance(tokens, TokenStream):
        return tokens.parse_expr()
    return TokenStream(tokens).parse_expr()


def read(source: Source) -> list[Form]:
    """Parse every form of a source."""
    return list(TokenStream.from_source(source).parse_all())
