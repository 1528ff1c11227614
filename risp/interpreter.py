from __future__ import annotations

from risp.config import UnderflowPolicy
from risp.evaluation.evaluator import evaluate
from risp.reader.parser import lex, TokenStream
from risp.runtime_context import RuntimeContext
from risp.types.ast import AST
from risp.types.environment import Environment
from risp.types.objects import Object


class Interpreter:
    """
    Reads and evaluates Risp source text against one session environment.
    Bindings made with Define persist across calls to `eval`.
    """

    def __init__(
        self,
        max_depth: int | None = None,
        underflow: UnderflowPolicy | None = None,
    ):
        self.env: Environment = Environment()
        self.ctx: RuntimeContext = RuntimeContext(max_depth=max_depth, underflow=underflow)

    def eval_ast(self, expr: AST) -> Object:
        return evaluate(expr, self.env, self.ctx)

    def eval(self, code: str) -> Object | list[Object] | None:
        """Evaluate every expression in `code` in order.

        Returns None for empty input, the value itself for a single expression,
        and the list of values otherwise.
        """
        stream = TokenStream(lex(code))
        results: list[Object] = []
        while (expr := stream.parse_expr()) is not None:
            results.append(self.eval_ast(expr))
        if not results:
            return None
        if len(results) == 1:
            return results[0]
        return results
