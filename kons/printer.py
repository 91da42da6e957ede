"""Textual renderings of runtime values.

Two flavours, matching the classic Lisp printers:

- display(): the re-readable form used by `print` and the REPL. Strings are
  re-quoted with `\\` and `"` escaped, quoted values carry a leading `'`, and
  floats are always written positionally with a decimal point.
- princ_string(): the human form used by `princ`. Strings are written raw and
  a quoted value is shown without its quote mark.

Compound values (lists, quotes, callables) render themselves through __str__;
this module only special-cases the Python primitives used as atoms.
"""

from decimal import Decimal

from kons import Value
from kons.errors import RecursionDepthExceeded


def _quote_string(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _format_float(value: float) -> str:
    text = repr(value)
    if "e" in text:
        # the reader has no exponent syntax
        text = format(Decimal(text), "f")
    if "." not in text and text.lstrip("-").isdigit():
        text += ".0"
    return text


def display(value: Value) -> str:
    if isinstance(value, str):
        return _quote_string(value)
    if isinstance(value, float):
        return _format_float(value)
    try:
        return str(value)
    except RecursionError as exc:
        raise RecursionDepthExceeded("Value nested too deeply to print") from exc


def princ_string(value: Value) -> str:
    from kons.types.quote import Quote

    if isinstance(value, str):
        return value
    if isinstance(value, Quote):
        return display(value.value)
    return display(value)
