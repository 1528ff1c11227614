from risp import EvaluatorFn
from risp.errors import RispTypeMismatch
from risp.runtime_context import RuntimeContext
from risp.types.ast import If
from risp.types.environment import Environment
from risp.types.objects import BoolObject, NumObject, Object


def is_truthy(val: Object) -> bool:
    if isinstance(val, BoolObject):
        return val.value
    if isinstance(val, NumObject):
        return val.value != 0
    raise RispTypeMismatch(f"If condition must be Bool or Num, got {val}")


def if_form(
    node: If,
    env: Environment,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> Object:
    # Only the selected branch is evaluated
    if is_truthy(evaluate_fn(node.cond, env, ctx)):
        return evaluate_fn(node.then, env, ctx)
    return evaluate_fn(node.els, env, ctx)
