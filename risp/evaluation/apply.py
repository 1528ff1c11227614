"""Application engine for Risp.

Functions carry no closure environment. Each application builds a fresh call
environment:

1. every parameter is bound positionally to its argument value;
2. every caller binding whose name is not a parameter is copied in.

Parameters therefore shadow same-named caller bindings, and the body sees the
caller's variables (dynamic-scope-like visibility). This is what lets a
function reach its own name recursively once it has been bound with Define.
Defines made while evaluating the body land in the call environment only and
never reach the caller.
"""

from __future__ import annotations

import logging

from risp import EvaluatorFn
from risp.errors import RispArityMismatch
from risp.runtime_context import RuntimeContext
from risp.types.environment import Environment
from risp.types.objects import FunctionObject, Object

logger = logging.getLogger(__name__)


def build_call_env(
    fn: FunctionObject,
    args: list[Object],
    caller_env: Environment,
) -> Environment:
    """Bind `args` to the formals of `fn`, then inherit the remaining caller bindings.

    Raises RispArityMismatch when the argument count differs from the parameter count.
    """
    if len(args) != len(fn.params):
        raise RispArityMismatch(
            f"Function ({' '.join(fn.params)}) expects {len(fn.params)} argument(s), got {len(args)}"
        )
    call_env = Environment()
    for name, value in zip(fn.params, args):
        call_env.define(name, value)
    call_env.update({name: value for name, value in caller_env.items() if name not in call_env})
    return call_env


def apply_function(
    fn: FunctionObject,
    args: list[Object],
    caller_env: Environment,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> Object:
    """Apply a FunctionObject to already-evaluated arguments.

    Parameters:
    - fn: The function being applied.
    - args: The evaluated argument values, in order.
    - caller_env: The environment the application originates from. It is read,
      never written.
    - ctx: Runtime context; tracks application depth against ctx.max_depth.
    - evaluate_fn: Evaluator used for the body.
    """
    call_env = build_call_env(fn, args, caller_env)
    ctx.enter_call()
    try:
        logger.debug("Applying %s to %d argument(s) at depth %d", fn, len(args), ctx.depth)
        return evaluate_fn(fn.body, call_env, ctx)
    finally:
        ctx.exit_call()
