from __future__ import annotations

from kons import Value
from kons.printer import display
from kons.types.equality import equal


class Quote:
    """One value held back from evaluation; evaluating it yields the value unchanged."""

    __slots__ = ("value",)
    __match_args__ = ("value",)

    def __init__(self, value: Value):
        self.value = value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Quote) and equal(self.value, other.value)

    __hash__ = None

    def __str__(self) -> str:
        return f"'{display(self.value)}"

    def __repr__(self) -> str:
        return str(self)
