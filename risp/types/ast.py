"""Expression tree for Risp.

Every node is a frozen dataclass, so trees are immutable, compare by value and
can be copied or hashed freely. Compound nodes own their children; nothing is
shared between trees.

`str(node)` renders the node in the reader's surface syntax, which means
`parse(str(node)) == node` holds for any tree the reader can produce.
"""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import Union

from risp.errors import RispTypeMismatch


@dataclass(frozen=True)
class Num:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Bool:
    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class Add:
    left: AST
    right: AST

    def __str__(self) -> str:
        return f"(+ {self.left} {self.right})"


@dataclass(frozen=True)
class Minus:
    left: AST
    right: AST

    def __str__(self) -> str:
        return f"(- {self.left} {self.right})"


@dataclass(frozen=True)
class Equal:
    left: AST
    right: AST

    def __str__(self) -> str:
        return f"(== {self.left} {self.right})"


@dataclass(frozen=True)
class If:
    cond: AST
    then: AST
    els: AST

    def __str__(self) -> str:
        return f"(If {self.cond} {self.then} {self.els})"


@dataclass(frozen=True)
class Ident:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Define:
    name: str
    value: AST

    def __str__(self) -> str:
        return f"(Define {self.name} {self.value})"


@dataclass(frozen=True)
class Function:
    """Function literal. Parameter names are not checked for uniqueness here."""

    params: tuple[str, ...]
    body: AST

    def __str__(self) -> str:
        return f"(Func ({' '.join(self.params)}) {self.body})"


@dataclass(frozen=True)
class Apply:
    callee: AST
    args: tuple[AST, ...] = ()

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(Apply ")
            buffer.write(str(self.callee))
            for arg in self.args:
                buffer.write(" ")
                buffer.write(str(arg))
            buffer.write(")")
            return buffer.getvalue()


AST = Union[Num, Bool, Add, Minus, Equal, If, Ident, Define, Function, Apply]


def literal(value: int | bool) -> AST:
    """Convert a raw Python literal into its AST node.

    bool is checked first since it is a subclass of int.
    """
    if isinstance(value, bool):
        return Bool(value)
    if isinstance(value, int):
        return Num(value)
    raise RispTypeMismatch(f"Cannot convert {value!r} to an AST literal")
