# Core type aliases for the kons data model.
# Runtime values are a closed set: Nil, T, int, float, str, Symbol, the cons-list
# shapes (Cons / EndsWith), Quote and the Lambda family. Python primitives are used
# directly for the numeric and string atoms.
#
# Naming guidance:
# - Form:  use in reader/parser code to denote syntactic forms (code-as-data).
# - Value: use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any`; forms and values share one representation.

from typing import Any, Callable

# Runtime value alias
Value = Any
# Forms are values that have not been evaluated yet
Form = Value

# Native routine behind a builtin: receives the freshly bound call frame
NativeFn = Callable[..., Value]
