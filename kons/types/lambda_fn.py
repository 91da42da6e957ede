"""Callable values and parameter specifications.

Every callable exposes a `Parameters` list. Each `Parameter` carries a
`Binding` mode that decides how the matching argument form reaches the callee:

- NORMAL:   evaluated in the caller's environment, then bound.
- PLAIN:    bound as the raw, unevaluated form.
- REST:     the current and all remaining raw forms, bound as one list.
- OPTIONAL: the raw form if supplied, else a literal default (never evaluated).

Plain and Rest parameters are what let `quote`, `cond`, `defun`, `lambda` and
`setq` be ordinary builtins instead of special syntax.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Iterator

from kons import Value, NativeFn
from kons.errors import ParameterTypeMismatched
from kons.printer import display
from kons.types.cons import ConsList
from kons.types.equality import equal
from kons.types.nil import Nil
from kons.types.symbol import Symbol, fold


class Binding(Enum):
    NORMAL = "normal"
    PLAIN = "&PLAIN"
    REST = "&REST"
    OPTIONAL = "&OPTIONAL"


PLAIN_MARKER = Symbol("&plain")
REST_MARKER = Symbol("&rest")
OPTIONAL_MARKER = Symbol("&optional")


class Parameter:
    __slots__ = ("binding", "name", "default")

    def __init__(self, binding: Binding, name: str, default: Value = Nil):
        self.binding = binding
        self.name = fold(name)
        self.default = default

    @classmethod
    def normal(cls, name: str) -> Parameter:
        return cls(Binding.NORMAL, name)

    @classmethod
    def plain(cls, name: str) -> Parameter:
        return cls(Binding.PLAIN, name)

    @classmethod
    def rest(cls, name: str) -> Parameter:
        return cls(Binding.REST, name)

    @classmethod
    def optional(cls, name: str, default: Value = Nil) -> Parameter:
        return cls(Binding.OPTIONAL, name, default)

    @property
    def is_rest(self) -> bool:
        return self.binding is Binding.REST

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Parameter)
            and self.binding is other.binding
            and self.name == other.name
            and equal(self.default, other.default)
        )

    __hash__ = None

    def __str__(self) -> str:
        match self.binding:
            case Binding.NORMAL:
                return self.name
            case Binding.OPTIONAL:
                return f"({self.name} {display(self.default)})"
            case _:
                return f"{self.binding.value} {self.name}"

    def __repr__(self) -> str:
        return f"Parameter({self.binding.name}, {self.name!r})"


class Parameters:
    """Ordered parameter list of a callable."""

    __slots__ = ("items",)

    def __init__(self, items: Iterable[Parameter] = ()):
        self.items: tuple[Parameter, ...] = tuple(items)

    def __iter__(self) -> Iterator[Parameter]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Parameters)
            and len(self.items) == len(other.items)
            and all(a == b for a, b in zip(self.items, other.items))
        )

    __hash__ = None

    @property
    def required_count(self) -> int:
        """Number of parameters that must be matched by an argument form.

        Optional parameters fall back to their default and a Rest parameter may
        collect nothing, so neither counts.
        """
        return sum(1 for p in self.items if p.binding in (Binding.NORMAL, Binding.PLAIN))

    @property
    def has_rest(self) -> bool:
        return any(p.is_rest for p in self.items)

    def is_valid(self) -> bool:
        """Unique names, Normal/Plain before any Optional, Rest only in last position."""
        seen: set[str] = set()
        met_optional = False
        for index, param in enumerate(self.items):
            if param.name in seen:
                return False
            seen.add(param.name)
            match param.binding:
                case Binding.NORMAL | Binding.PLAIN:
                    if met_optional:
                        return False
                case Binding.OPTIONAL:
                    met_optional = True
                case Binding.REST:
                    if index != len(self.items) - 1:
                        return False
        return True

    @classmethod
    def from_form(cls, form: Value) -> Parameters:
        """Build a parameter list from user syntax such as `(a &plain b &optional (c 1) &rest d)`.

        Raises ParameterTypeMismatched for anything that is not a well-formed,
        valid parameter list.
        """
        if form is Nil:
            return cls()
        if not isinstance(form, ConsList):
            raise ParameterTypeMismatched(f"Parameter list must be a list, got {display(form)}")

        params: list[Parameter] = []
        pending: Binding | None = None
        optional_section = False
        for entry in form:
            if entry == PLAIN_MARKER or entry == REST_MARKER:
                if pending is not None:
                    raise ParameterTypeMismatched(f"Dangling {pending.value} in {form}")
                pending = Binding.PLAIN if entry == PLAIN_MARKER else Binding.REST
                continue
            if entry == OPTIONAL_MARKER:
                if pending is not None:
                    raise ParameterTypeMismatched(f"Dangling {pending.value} in {form}")
                optional_section = True
                continue

            if pending is not None:
                params.append(Parameter(pending, _parameter_name(entry)))
                pending = None
            elif optional_section:
                params.append(_optional_spec(entry))
            else:
                params.append(Parameter.normal(_parameter_name(entry)))

        if pending is not None:
            raise ParameterTypeMismatched(f"Dangling {pending.value} in {form}")
        result = cls(params)
        if not result.is_valid():
            raise ParameterTypeMismatched(f"Invalid parameter list {form}")
        return result

    def __str__(self) -> str:
        parts = []
        in_optional = False
        for param in self.items:
            if param.binding is Binding.OPTIONAL and not in_optional:
                parts.append(Binding.OPTIONAL.value)
                in_optional = True
            parts.append(str(param))
        return f"({' '.join(parts)})"

    def __repr__(self) -> str:
        return f"Parameters{self}"


def _parameter_name(entry: Value) -> str:
    if not isinstance(entry, Symbol):
        raise ParameterTypeMismatched(f"Parameter name must be a symbol, got {display(entry)}")
    return entry.id


def _optional_spec(entry: Value) -> Parameter:
    # `name` or `(name default)`; the default is kept as a literal form
    if isinstance(entry, Symbol):
        return Parameter.optional(entry.id)
    if isinstance(entry, ConsList) and 1 <= len(entry) <= 2:
        name, *default = list(entry)
        return Parameter.optional(_parameter_name(name), default[0] if default else Nil)
    raise ParameterTypeMismatched(f"Malformed optional parameter {display(entry)}")


# -------------------------------
# Callables
# -------------------------------
class Lambda:
    """Base of the three callable kinds; prints as a #<FUNCTION ...> tag."""

    __slots__ = ()
    parameters: Parameters

    def describe(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return f"#<FUNCTION {self.describe()}>"

    def __repr__(self) -> str:
        return str(self)


class UserLambda(Lambda):
    """An unnamed user function: parameters plus a body list."""

    __slots__ = ("parameters", "body")

    def __init__(self, parameters: Parameters, body: ConsList):
        self.parameters = parameters
        self.body = body

    def __eq__(self, other: object) -> bool:
        return (
            type(other) is type(self)
            and self.parameters == other.parameters
            and equal(self.body, other.body)
        )

    __hash__ = None

    def describe(self) -> str:
        return f"(LAMBDA {self.parameters})"


class NamedLambda(UserLambda):
    """A user function created by defun; the name is only used for display."""

    __slots__ = ("name",)

    def __init__(self, name: str, parameters: Parameters, body: ConsList):
        super().__init__(parameters, body)
        self.name = fold(name)

    def __eq__(self, other: object) -> bool:
        return super().__eq__(other) and self.name == other.name

    __hash__ = None

    def describe(self) -> str:
        return f"(NAMED-LAMBDA {self.name} {self.parameters})"


class Builtin(Lambda):
    """A native function.

    `fn` receives the call frame in which the arguments have already been bound
    and reads them back by parameter name. Two builtins are never equal, not even
    a builtin and itself.
    """

    __slots__ = ("name", "parameters", "fn")

    def __init__(self, name: str, parameters: Parameters, fn: NativeFn):
        self.name = fold(name)
        self.parameters = parameters
        self.fn = fn

    def run(self, env) -> Value:
        return self.fn(env)

    def __eq__(self, other: object) -> bool:
        return False

    __hash__ = object.__hash__

    def describe(self) -> str:
        return f"(BUILTIN {self.name} {self.parameters})"
