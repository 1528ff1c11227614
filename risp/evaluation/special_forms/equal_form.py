from risp import EvaluatorFn
from risp.runtime_context import RuntimeContext
from risp.types.ast import Equal
from risp.types.environment import Environment
from risp.types.objects import BoolObject, Object


def equal_form(
    node: Equal,
    env: Environment,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> Object:
    """
    (== left right)
    Structural equality of the two evaluated operands. Values of different kinds
    are simply unequal, never an error.
    """
    left = evaluate_fn(node.left, env, ctx)
    right = evaluate_fn(node.right, env, ctx)
    return BoolObject(left == right)
