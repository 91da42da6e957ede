from kons.reader.lexer import Lexer, Token, TokenKind, tokenize
from kons.reader.parser import TokenStream, parse, read

__all__ = ["Lexer", "Token", "TokenKind", "tokenize", "TokenStream", "parse", "read"]
