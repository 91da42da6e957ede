"""Runtime environment for kons.

An Environment is one scope frame: a mapping of case-folded names to values plus
an `outer` link to the parent frame. The root frame has no parent and holds the
global bindings (builtins, defun'd functions, top-level setq).
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from kons import Value
from kons.errors import NotASymbol, SymbolNotFound
from kons.printer import display
from kons.types.symbol import Symbol, fold


def _key(name: Symbol | str) -> str:
    if isinstance(name, Symbol):
        return name.id
    if isinstance(name, str):
        return fold(name)
    raise NotASymbol(display(name))


class Environment:
    """Hierarchical mapping from names to kons values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, Value] = {}
        self.outer: Environment | None = outer

    def chain(self) -> Iterator[Environment]:
        env: Optional[Environment] = self
        while env is not None:
            yield env
            env = env.outer

    @property
    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def define(self, name: Symbol | str, value: Value) -> None:
        """Bind `name` in this frame only, shadowing any outer binding."""
        self.vars[_key(name)] = value

    def define_global(self, name: Symbol | str, value: Value) -> None:
        """Bind `name` at the root frame.

        A binding of `name` in this frame is removed first so the new global
        value is visible from here. Shadows in frames between this one and the
        root are left alone.
        """
        key = _key(name)
        self.vars.pop(key, None)
        self.root.vars[key] = value

    def find(self, name: Symbol | str) -> Optional[Environment]:
        """Find the nearest frame in the chain that binds `name`."""
        key = _key(name)
        for env in self.chain():
            if key in env.vars:
                return env
        return None

    def lookup(self, name: Symbol | str) -> Value:
        """Value bound to `name` in the nearest frame; raises SymbolNotFound."""
        key = _key(name)
        for env in self.chain():
            if key in env.vars:
                return env.vars[key]
        raise SymbolNotFound(key)

    def __contains__(self, name: Symbol | str) -> bool:
        return self.find(name) is not None

    def update(self, mapping: dict[Symbol | str, Value]) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {display(v)}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            frames = []
            for env in self.chain():
                with StringIO() as frame:
                    env._write_vars(frame)
                    frames.append(frame.getvalue())
            buffer.write(" -> ".join(frames))
            buffer.write(">")
            return buffer.getvalue()
