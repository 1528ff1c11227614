from risp import EvaluatorFn
from risp.errors import RispNotCallable
from risp.evaluation.apply import apply_function
from risp.runtime_context import RuntimeContext
from risp.types.ast import Apply
from risp.types.environment import Environment
from risp.types.objects import FunctionObject, Object


def apply_form(
    node: Apply,
    env: Environment,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> Object:
    """
    (Apply callee arg1 arg2 ...)
    The callee and each argument are evaluated left to right, each against its
    own snapshot of the caller's environment, so a Define inside any of them
    is invisible to siblings and to the caller. Application itself is delegated
    to the application engine.
    """
    fn = evaluate_fn(node.callee, env.copy(), ctx)
    if not isinstance(fn, FunctionObject):
        raise RispNotCallable(f"Cannot apply non-function {fn}")

    args = [evaluate_fn(arg, env.copy(), ctx) for arg in node.args]
    return apply_function(fn, args, env, ctx, evaluate_fn)
