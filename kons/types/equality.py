from __future__ import annotations

from kons import Value


def equal(a: Value, b: Value) -> bool:
    """Kind-and-content equality.

    Values of different kinds are never equal (so 1 and 1.0 differ). Compound
    values compare structurally through their own __eq__, which is why a builtin
    is not equal even to itself: its __eq__ always answers False.
    """
    if type(a) is not type(b):
        return False
    return a == b
