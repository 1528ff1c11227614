import logging

from risp import EvaluatorFn
from risp.runtime_context import RuntimeContext
from risp.types.ast import Define
from risp.types.environment import Environment
from risp.types.objects import Object

logger = logging.getLogger(__name__)


def define_form(
    node: Define,
    env: Environment,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> Object:
    """
    (Define name value)
    Binds name in the current environment and yields the bound value.
    Redefining an existing name overwrites it.
    """
    value = evaluate_fn(node.value, env, ctx)
    if node.name in env:
        logger.debug("Redefining %s", node.name)
    env.define(node.name, value)
    return value
