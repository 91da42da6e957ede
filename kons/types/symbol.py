from __future__ import annotations
import sys


def fold(name: str) -> str:
    """Case-fold an identifier the way every stored or looked-up symbol is."""
    return name.upper()


class Symbol:
    __slots__ = ("id",)
    __match_args__ = ("id",)

    def __init__(self, name: str):
        # Fold and intern to ensure fast equality/hash and reduce memory
        self.id = sys.intern(fold(name))

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
