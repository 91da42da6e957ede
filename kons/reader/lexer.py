"""
  Streaming lexer

- Reads raw bytes through a read-ahead buffer refilled on demand, so a file,
  a pipe or stdin can be tokenized without loading it first.
- Lazy: tokens are produced one at a time by iterating the Lexer.
- Symbol text keeps its original case; folding happens in the parser.

Byte rules, checked in this order:

    inside a ;-comment   skipped up to the newline (which also ends a pending token)
    \\                   the next byte is taken literally (a token containing one is a Symbol)
    inside a string      captured as-is; the closing " ends the token
    ;                    starts a comment
    "                    starts a string
    ( ) '                single-byte tokens when nothing is pending
    ( )                  end a pending token without being consumed
    whitespace           ends a pending token, otherwise skipped
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import BinaryIO, Iterator, Optional, Union

from kons.config import get_read_buffer_size
from kons.errors import MalformedNumber, ReadFailure, UnterminatedString

logger = logging.getLogger(__name__)

PAREN_LEFT = ord("(")
PAREN_RIGHT = ord(")")
QUOTE = ord("'")
STRING = ord('"')
ESCAPE = ord("\\")
COMMENT = ord(";")
NEWLINE = ord("\n")
WHITESPACE = frozenset(b" \t\n\r")
DIGITS = frozenset(b"0123456789")
NUM_CHARS = DIGITS | frozenset(b"-.")
INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1


class TokenKind(Enum):
    INTEGER = auto()
    FLOAT = auto()
    SYMBOL = auto()
    STRING = auto()
    QUOTE = auto()
    DOT = auto()
    PAREN_LEFT = auto()
    PAREN_RIGHT = auto()


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: Union[int, float, str, None] = None

    def __str__(self) -> str:
        if self.value is None:
            return self.kind.name
        return f"{self.kind.name}({self.value!r})"


QUOTE_TOKEN = Token(TokenKind.QUOTE)
DOT_TOKEN = Token(TokenKind.DOT)
PAREN_LEFT_TOKEN = Token(TokenKind.PAREN_LEFT)
PAREN_RIGHT_TOKEN = Token(TokenKind.PAREN_RIGHT)

_PUNCTUATION = {
    PAREN_LEFT: PAREN_LEFT_TOKEN,
    PAREN_RIGHT: PAREN_RIGHT_TOKEN,
    QUOTE: QUOTE_TOKEN,
}

Source = Union[bytes, bytearray, memoryview, str, BinaryIO, io.TextIOBase]


def _as_stream(source: Source):
    if isinstance(source, str):
        return io.BytesIO(source.encode("utf-8"))
    if isinstance(source, (bytes, bytearray, memoryview)):
        return io.BytesIO(bytes(source))
    if hasattr(source, "read"):
        return source
    raise TypeError(f"Cannot read tokens from {type(source).__name__}")


def classify(text: bytes) -> Token:
    """Turn the bytes of a finished, unescaped, non-string token into a Token."""
    if text == b".":
        return DOT_TOKEN
    if all(c in NUM_CHARS for c in text) and any(c in DIGITS for c in text):
        literal = text.decode("ascii")
        try:
            if "." in literal:
                return Token(TokenKind.FLOAT, float(literal))
            number = int(literal)
        except ValueError as exc:
            raise MalformedNumber(literal) from exc
        if not INT_MIN <= number <= INT_MAX:
            raise MalformedNumber(literal)
        return Token(TokenKind.INTEGER, number)
    return Token(TokenKind.SYMBOL, text.decode("utf-8", errors="replace"))


class Lexer:
    """Iterator of Tokens over a byte source.

    `source` may be bytes, a str (encoded as UTF-8) or any object with a
    `read(n)` method returning bytes or str. The lexer is single pass.
    """

    def __init__(self, source: Source, buffer_size: Optional[int] = None):
        self._source = _as_stream(source)
        self._buffer_size = buffer_size or get_read_buffer_size()
        self._buffer = b""
        self._pos = 0
        self._exhausted = False

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self._read_token()
        logger.debug("Next token: %s", token)
        if token is None:
            raise StopIteration
        return token

    def _fill(self) -> bool:
        """Refill the read-ahead buffer; False once the source is exhausted."""
        if self._exhausted:
            return False
        while True:
            try:
                chunk = self._source.read(self._buffer_size)
            except InterruptedError:
                continue
            except OSError as exc:
                raise ReadFailure(f"Failed to read source: {exc}") from exc
            break
        if isinstance(chunk, str):
            chunk = chunk.encode("utf-8")
        if not chunk:
            self._exhausted = True
            return False
        self._buffer = chunk
        self._pos = 0
        return True

    def _read_token(self) -> Optional[Token]:
        pending = bytearray()
        in_comment = False
        in_string = False
        string_token = False
        escape = False
        escaped = False

        while self._pos < len(self._buffer) or self._fill():
            c = self._buffer[self._pos]

            if in_comment:
                self._pos += 1
                if c == NEWLINE:
                    in_comment = False
                    if pending:
                        break
                continue

            if escape:
                pending.append(c)
                escape = False
                self._pos += 1
                continue

            if c == ESCAPE:
                escape = escaped = True
                self._pos += 1
                continue

            if in_string:
                pending.append(c)
                self._pos += 1
                if c == STRING:
                    break
                continue

            if c == COMMENT:
                in_comment = True
                self._pos += 1
                continue

            if c == STRING:
                string_token = not pending
                in_string = True
                pending.append(c)
                self._pos += 1
                continue

            if c in _PUNCTUATION and not pending:
                self._pos += 1
                return _PUNCTUATION[c]

            if c == PAREN_LEFT or c == PAREN_RIGHT:
                # left in the buffer for the next token
                break

            self._pos += 1
            if c in WHITESPACE:
                if pending:
                    break
                continue
            pending.append(c)
        else:
            if in_string:
                raise UnterminatedString(f"Unterminated string {pending.decode('utf-8', errors='replace')}")

        if not pending:
            return None
        if string_token and len(pending) >= 2:
            return Token(TokenKind.STRING, pending[1:-1].decode("utf-8", errors="replace"))
        if escaped:
            return Token(TokenKind.SYMBOL, pending.decode("utf-8", errors="replace"))
        return classify(bytes(pending))


def tokenize(source: Source) -> list[Token]:
    """Eagerly lex a whole source."""
    return list(Lexer(source))
