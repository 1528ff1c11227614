from risp import EvaluatorFn
from risp.runtime_context import RuntimeContext
from risp.types.ast import Function
from risp.types.environment import Environment
from risp.types.objects import FunctionObject, Object


def function_form(
    node: Function,
    env: Environment,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> Object:
    # No environment is captured; see risp.evaluation.apply for call scoping.
    return FunctionObject(tuple(node.params), node.body)
