class KonsError(Exception):
    """ Base class for all kons errors"""
    pass


# -------------------------------
# Lexical errors
# -------------------------------
class KonsLexicalError(KonsError):
    """ Raised when the byte source cannot be turned into tokens"""


class MalformedNumber(KonsLexicalError):
    """ Raised when a numeric-looking token cannot be parsed as its number kind"""

    def __init__(self, text: str):
        super().__init__(f"Malformed number {text!r}")
        self.text = text


class UnterminatedString(KonsLexicalError):
    """ Raised when the input ends inside a string literal"""


class ReadFailure(KonsLexicalError):
    """ Raised when the underlying source fails with anything but an interruption"""


# -------------------------------
# Parse errors
# -------------------------------
class KonsParseError(KonsError):
    """ Raised when the token sequence does not form a valid expression"""


class EmptyInput(KonsParseError):
    """ Raised when there are no tokens left to parse"""

    def __init__(self, message: str = "Input is empty"):
        super().__init__(message)


class UnexpectedToken(KonsParseError):
    """ Raised when a token appears where the grammar forbids it"""

    def __init__(self, token):
        super().__init__(f"Unexpected token {token}")
        self.token = token


class UnexpectedEOF(KonsParseError):
    """ Raised when the input ends after a quote or a dot"""

    def __init__(self, message: str = "Unexpected EOF"):
        super().__init__(message)


class UnmatchedParens(KonsParseError):
    """ Raised when the input ends inside an open list"""

    def __init__(self, message: str = "No matching parenthesis found"):
        super().__init__(message)


# -------------------------------
# Environment errors
# -------------------------------
class KonsEnvironmentError(KonsError):
    """ Raised by the scope chain"""


class SymbolNotFound(KonsEnvironmentError):
    """ Raised when a name is bound nowhere in the chain"""

    def __init__(self, name: str):
        super().__init__(f'Symbol "{name}" not found')
        self.name = name


class NotASymbol(KonsEnvironmentError):
    """ Raised when a lookup or mutation target is not a symbol"""

    def __init__(self, name: str):
        super().__init__(f"{name} is not a symbol")
        self.name = name


# -------------------------------
# Evaluation errors
# -------------------------------
class KonsEvaluationError(KonsError):
    """ Raised while evaluating a form"""


class UnboundVariable(KonsEvaluationError):
    """ Raised when a symbol is evaluated before it is bound"""

    def __init__(self, name: str):
        super().__init__(f"Unbound variable {name}")
        self.name = name


class UnmatchedNumberOfParameters(KonsEvaluationError):
    """ Raised when a call supplies the wrong number of argument forms"""

    def __init__(self, expected: int, actual: int):
        super().__init__(
            f"Unmatched number of parameters, expecting {expected} but got {actual}"
        )
        self.expected = expected
        self.actual = actual


class IllegalFunctionCall(KonsEvaluationError):
    """ Raised when a callable is applied to a non-list argument tail"""


class ParameterTypeMismatched(KonsEvaluationError):
    """ Raised when a value of the wrong kind is supplied"""


class DivisionByZero(KonsEvaluationError):
    """ Raised when dividing by zero"""


class RecursionDepthExceeded(KonsEvaluationError):
    """ Raised when a form nests deeper than the host call stack allows"""
