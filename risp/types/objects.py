"""Runtime values produced by the evaluator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from risp.types.ast import AST


@dataclass(frozen=True)
class NumObject:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class BoolObject:
    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class FunctionObject:
    """A first-class function: formal parameters and body, with no captured environment."""

    params: tuple[str, ...]
    body: AST

    def __str__(self) -> str:
        return f"(Func ({' '.join(self.params)}) {self.body})"


Object = Union[NumObject, BoolObject, FunctionObject]
