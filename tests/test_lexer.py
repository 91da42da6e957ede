import io

import pytest
from hypothesis import given, strategies as st

from kons.errors import KonsLexicalError, MalformedNumber, ReadFailure, UnterminatedString
from kons.reader.lexer import (
    DOT_TOKEN,
    PAREN_LEFT_TOKEN as PL,
    PAREN_RIGHT_TOKEN as PR,
    QUOTE_TOKEN,
    Lexer,
    Token,
    TokenKind,
    tokenize,
)


def sym(text):
    return Token(TokenKind.SYMBOL, text)


def string(text):
    return Token(TokenKind.STRING, text)


def test_nested_lists_keep_symbol_case():
    assert tokenize("(test1 (test2 test3))") == [
        PL, sym("test1"), PL, sym("test2"), sym("test3"), PR, PR,
    ]


def test_irregular_whitespace():
    source = "    (   'test1 (  test2 \n\t '(test3 . test4) )   ) "
    assert tokenize(source) == [
        PL, QUOTE_TOKEN, sym("test1"), PL, sym("test2"),
        QUOTE_TOKEN, PL, sym("test3"), DOT_TOKEN, sym("test4"), PR, PR, PR,
    ]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("1", Token(TokenKind.INTEGER, 1)),
        ("-1", Token(TokenKind.INTEGER, -1)),
        ("1.0", Token(TokenKind.FLOAT, 1.0)),
        ("-1.0", Token(TokenKind.FLOAT, -1.0)),
        ("-", sym("-")),
        ("1+", sym("1+")),
        (".", DOT_TOKEN),
        ("9223372036854775807", Token(TokenKind.INTEGER, 2 ** 63 - 1)),
        ("-9223372036854775808", Token(TokenKind.INTEGER, -(2 ** 63))),
    ]
)
def test_atoms(source, expected):
    assert tokenize(source) == [expected]


@pytest.mark.parametrize(
    "source",
    ["----1", "--1-1", "--1.1.0", "1.2.3", "1-", "9223372036854775808", "-9223372036854775809"],
)
def test_malformed_numbers_are_reported(source):
    with pytest.raises(MalformedNumber) as excinfo:
        tokenize(source)
    assert excinfo.value.text == source


@pytest.mark.parametrize(
    "source",
    [
        "; test \n test",
        "; test\n;another test\ntest ;test",
        "test;trailing",
    ]
)
def test_comments_are_discarded(source):
    assert tokenize(source) == [sym("test")]


def test_comment_newline_ends_pending_token():
    assert tokenize("foo;c\nbar") == [sym("foo"), sym("bar")]


def test_empty_and_blank_input():
    assert tokenize("") == []
    assert tokenize(" \t\r\n ") == []
    assert tokenize("()") == [PL, PR]


@pytest.mark.parametrize(
    "source,expected",
    [
        ('"hello world"', [string("hello world")]),
        ('""', [string("")]),
        ('"a (b) ;c \'d"', [string("a (b) ;c 'd")]),
        ('"say \\"hi\\""', [string('say "hi"')]),
        ('"a"b', [string("a"), sym("b")]),
        ('("x")', [PL, string("x"), PR]),
    ]
)
def test_strings(source, expected):
    assert tokenize(source) == expected


def test_unterminated_string():
    with pytest.raises(UnterminatedString):
        tokenize('(print "abc')


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a\\ b", [sym("a b")]),
        ("\\1", [sym("1")]),
        ("\\(", [sym("(")]),
        ("\\.", [sym(".")]),
    ]
)
def test_escapes_outside_strings_make_symbols(source, expected):
    assert tokenize(source) == expected


def test_quote_and_parens_inside_tokens():
    assert tokenize("a'b") == [sym("a'b")]
    assert tokenize("a(b)c") == [sym("a"), PL, sym("b"), PR, sym("c")]


@pytest.mark.parametrize("size", [1, 2, 3, 7])
def test_tokens_survive_buffer_refills(size):
    source = '(defun f (x) ; a comment\n  (print "a \\"quoted\\" (string)") 12.5 -3)'
    assert list(Lexer(source, buffer_size=size)) == tokenize(source)


def test_stream_sources():
    assert list(Lexer(io.BytesIO(b"(a 1)"))) == [PL, sym("a"), Token(TokenKind.INTEGER, 1), PR]
    assert list(Lexer(io.StringIO("'b"))) == [QUOTE_TOKEN, sym("b")]
    assert list(Lexer(bytearray(b"c"))) == [sym("c")]


class _FlakyStream:
    def __init__(self, data, error):
        self.data = io.BytesIO(data)
        self.error = error

    def read(self, n):
        if self.error is not None:
            error, self.error = self.error, None
            raise error
        return self.data.read(n)


def test_interrupted_reads_are_retried():
    stream = _FlakyStream(b"(a b)", InterruptedError())
    assert list(Lexer(stream)) == [PL, sym("a"), sym("b"), PR]


def test_read_failures_are_reported():
    stream = _FlakyStream(b"(a b)", OSError("disk on fire"))
    with pytest.raises(ReadFailure):
        list(Lexer(stream))


def test_rejects_unreadable_source():
    with pytest.raises(TypeError):
        Lexer(42)


@given(st.text(max_size=60))
def test_lexer_never_crashes(source):
    try:
        tokens = tokenize(source)
    except KonsLexicalError:
        return
    assert all(isinstance(token, Token) for token in tokens)
