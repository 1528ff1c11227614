from risp import EvaluatorFn
from risp.errors import RispNumericUnderflow, RispTypeMismatch
from risp.runtime_context import RuntimeContext
from risp.types.ast import Add, Minus, AST
from risp.types.environment import Environment
from risp.types.objects import NumObject, Object


def _num_operands(
    left: AST,
    right: AST,
    env: Environment,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
    op: str,
) -> tuple[int, int]:
    # Left first: a Define inside the left operand is visible to the right one.
    left_obj = evaluate_fn(left, env, ctx)
    right_obj = evaluate_fn(right, env, ctx)
    if not isinstance(left_obj, NumObject) or not isinstance(right_obj, NumObject):
        raise RispTypeMismatch(
            f"{op} expected Num operands, but got left: {left_obj}, right: {right_obj}"
        )
    return left_obj.value, right_obj.value


def add_form(
    node: Add,
    env: Environment,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> Object:
    left, right = _num_operands(node.left, node.right, env, ctx, evaluate_fn, "+")
    return NumObject(left + right)


def minus_form(
    node: Minus,
    env: Environment,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> Object:
    """Unsigned subtraction; a negative result errors or clamps to 0 depending on ctx.underflow."""
    left, right = _num_operands(node.left, node.right, env, ctx, evaluate_fn, "-")
    if left < right:
        if ctx.underflow == "saturate":
            return NumObject(0)
        raise RispNumericUnderflow(f"{left} - {right} would be negative")
    return NumObject(left - right)
