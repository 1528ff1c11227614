"""Runtime environment for Risp.

The Environment is a flat mapping from identifier names to evaluated Objects.
There is no `outer` chain: function application builds a fresh call
environment by copying bindings (see risp.evaluation.apply), so a single frame
is all the evaluator ever needs.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Mapping

from risp.errors import RispUnboundIdentifier
from risp.types.objects import Object


class Environment:
    """Mapping from names to Objects, mutated only by `define`."""

    __slots__ = ("vars",)

    def __init__(self, bindings: Mapping[str, Object] | None = None):
        self.vars: dict[str, Object] = dict(bindings) if bindings else {}

    def define(self, name: str, value: Object) -> None:
        """Bind `name` to `value`, silently overwriting any previous binding."""
        self.vars[name] = value

    def lookup(self, name: str) -> Object:
        """Look up the value bound to `name`.

        Raises RispUnboundIdentifier if not found.
        """
        try:
            return self.vars[name]
        except KeyError:
            raise RispUnboundIdentifier(name) from None

    def copy(self) -> Environment:
        """Return an independent snapshot; defines on the copy never reach self."""
        return Environment(self.vars)

    def update(self, mapping: Mapping[str, Object]) -> None:
        """Bulk-define a mapping of name -> value."""
        for k, v in mapping.items():
            self.vars[k] = v

    def items(self):
        return self.vars.items()

    def __getitem__(self, name: str) -> Object:
        return self.lookup(name)

    def __contains__(self, name: object) -> bool:
        return name in self.vars

    def __iter__(self) -> Iterator[str]:
        return iter(self.vars)

    def __len__(self) -> int:
        return len(self.vars)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Environment) and self.vars == other.vars

    def _write_vars(self, buffer: StringIO) -> None:
        """Write the bindings into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment ")
            self._write_vars(buffer)
            buffer.write(">")
            return buffer.getvalue()
