from __future__ import annotations


class NilType:
    """The empty list, which doubles as false."""

    _instance: NilType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "NIL"
    def __bool__(self): return False
    def __len__(self): return 0
    def __iter__(self): return iter(())

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash("NIL")


class TrueType:
    """The distinguished truth atom T."""

    _instance: TrueType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "T"

    def __eq__(self, other):
        return isinstance(other, TrueType)

    def __hash__(self):
        return hash("T")


Nil = NilType()
T = TrueType()


def truth(flag: bool) -> NilType | TrueType:
    """Map a Python boolean onto T / NIL."""
    return T if flag else Nil
