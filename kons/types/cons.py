"""Cons-list representation.

A list is either `EndsWith(v)`, a list whose final element is `v`, or
`Cons(head, tail)` where `tail` is again a list. `EndsWith(Nil)` is the empty
list, so a proper list is a chain of `Cons` ending in `EndsWith(Nil)` and a
dotted pair `(A . B)` is `Cons(A, EndsWith(B))`.

Length counts links: `EndsWith(Nil)` has length 0, any other `EndsWith`
has length 1 and each `Cons` adds one. Iteration yields the same elements,
including a non-Nil terminator in final position.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from kons import Value
from kons.errors import RecursionDepthExceeded
from kons.printer import display
from kons.types.equality import equal
from kons.types.nil import Nil


class ConsList:
    __slots__ = ()

    def __iter__(self) -> Iterator[Value]:
        node = self
        while isinstance(node, Cons):
            yield node.head
            node = node.tail
        if node.value is not Nil:
            yield node.value

    def __len__(self) -> int:
        count = 0
        node = self
        while isinstance(node, Cons):
            count += 1
            node = node.tail
        return count if node.value is Nil else count + 1

    def is_empty(self) -> bool:
        return isinstance(self, EndsWith) and self.value is Nil

    def unpack(self) -> tuple[Value, Value]:
        """Split into (car, cdr).

        The cdr of a link whose tail is `EndsWith(v)` is `v` itself (Nil for a
        proper list, the terminator for a dotted pair); otherwise it is the tail list.
        """
        match self:
            case Cons(head, EndsWith(value)):
                return head, value
            case Cons(head, tail):
                return head, tail
            case EndsWith(value):
                return value, Nil

    def car(self) -> Value:
        return self.unpack()[0]

    def cdr(self) -> Value:
        return self.unpack()[1]

    def prepend(self, head: Value) -> Cons:
        return Cons(head, self)

    def __eq__(self, other: object) -> bool:
        left, right = self, other
        try:
            while isinstance(left, Cons) and isinstance(right, Cons):
                if not equal(left.head, right.head):
                    return False
                left, right = left.tail, right.tail
            if isinstance(left, EndsWith) and isinstance(right, EndsWith):
                return equal(left.value, right.value)
        except RecursionError as exc:
            raise RecursionDepthExceeded("Lists nested too deeply to compare") from exc
        return False

    __hash__ = None

    def __str__(self) -> str:
        parts = []
        node = self
        while isinstance(node, Cons):
            parts.append(display(node.head))
            node = node.tail
        text = " ".join(parts)
        if node.value is not Nil:
            text += f" . {display(node.value)}"
        return f"({text})"

    def __repr__(self) -> str:
        return str(self)


class Cons(ConsList):
    __slots__ = ("head", "tail")
    __match_args__ = ("head", "tail")

    def __init__(self, head: Value, tail: ConsList):
        self.head = head
        self.tail = tail


class EndsWith(ConsList):
    __slots__ = ("value",)
    __match_args__ = ("value",)

    def __init__(self, value: Value):
        self.value = value


def cons(head: Value, tail: Value) -> ConsList:
    """Prepend `head` to `tail`.

    A list tail is merged (no extra nesting); any other tail, Nil included,
    becomes the terminator of a fresh two-element structure.
    """
    if isinstance(tail, ConsList):
        return tail.prepend(head)
    return Cons(head, EndsWith(tail))


def make_list(items: Iterable[Value], terminator: Value = Nil) -> Value:
    """Fold `items` right-to-left onto `terminator`; no items and Nil gives Nil."""
    items = list(items)
    if not items and terminator is Nil:
        return Nil
    result = terminator
    for item in reversed(items):
        result = cons(item, result)
    return result
