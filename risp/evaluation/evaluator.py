"""Core evaluator for the Risp interpreter.

A plain recursive tree walk. Literals and identifiers are handled inline and
every compound node is dispatched through the SPECIAL_FORMS registry. The
first error raised anywhere aborts the whole evaluation.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Iterator

from risp.errors import RispStackExhausted, RispTypeMismatch
from risp.evaluation.special_forms import SPECIAL_FORMS
from risp.runtime_context import RuntimeContext
from risp.types.ast import AST, Bool, Ident, Num
from risp.types.environment import Environment
from risp.types.objects import BoolObject, NumObject, Object

logger = logging.getLogger(__name__)

# Upper bound on Python frames used per level of application depth.
FRAMES_PER_CALL = 16


@contextmanager
def _recursion_headroom(max_depth: int) -> Iterator[None]:
    """Raise the interpreter recursion limit so ctx.max_depth is reached first."""
    previous = sys.getrecursionlimit()
    needed = max_depth * FRAMES_PER_CALL + 200
    if needed > previous:
        sys.setrecursionlimit(needed)
    try:
        yield
    finally:
        if needed > previous:
            sys.setrecursionlimit(previous)


def evaluate(
    expr: AST, env: Environment, ctx: RuntimeContext | None = None
) -> Object:
    """
    Evaluate `expr` against `env`, mutating `env` only through Define.

    Raises a RispError subclass on failure. Runaway recursion surfaces as
    RispStackExhausted rather than a Python RecursionError.
    """
    if ctx is None:
        ctx = RuntimeContext()

    with _recursion_headroom(ctx.max_depth):
        try:
            return evaluate0(expr, env, ctx)
        except RecursionError as err:
            logger.debug("Python recursion limit hit at application depth %d", ctx.depth)
            raise RispStackExhausted(
                "Python recursion limit reached during evaluation"
            ) from err


def evaluate0(expr: AST, env: Environment, ctx: RuntimeContext) -> Object:
    """
    Core evaluator: one step of the recursive walk.
    """
    match expr:
        case Num(value=v):
            return NumObject(v)
        case Bool(value=b):
            return BoolObject(b)
        case Ident(name=name):
            return env.lookup(name)

    handler = SPECIAL_FORMS.get(type(expr))
    if handler is None:
        raise RispTypeMismatch(f"Cannot evaluate {expr!r}: not an AST node")
    return handler(expr, env, ctx, evaluate0)
