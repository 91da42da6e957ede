from kons.types.symbol import Symbol, fold
from kons.types.nil import Nil, NilType, T, TrueType, truth
from kons.types.equality import equal
from kons.types.cons import ConsList, Cons, EndsWith, cons, make_list
from kons.types.quote import Quote
from kons.types.lambda_fn import (
    Binding,
    Parameter,
    Parameters,
    Lambda,
    UserLambda,
    NamedLambda,
    Builtin,
)
from kons.types.environment import Environment

__all__ = [
    "Symbol", "fold",
    "Nil", "NilType", "T", "TrueType", "truth",
    "equal",
    "ConsList", "Cons", "EndsWith", "cons", "make_list",
    "Quote",
    "Binding", "Parameter", "Parameters", "Lambda", "UserLambda", "NamedLambda", "Builtin",
    "Environment",
]
