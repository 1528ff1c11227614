# Core type aliases and public API for Risp.
#
# The aliases are defined before the submodule imports below, since the
# evaluation modules import them back from the package.

from typing import Any, Callable

# Evaluator function type: passed to syntax form handlers so they can recurse
EvaluatorFn = Callable[..., Any]

from risp.errors import (  # noqa: E402
    RispArityMismatch,
    RispConfigError,
    RispError,
    RispNotCallable,
    RispNumericUnderflow,
    RispStackExhausted,
    RispSyntaxError,
    RispTypeMismatch,
    RispUnboundIdentifier,
)
from risp.types.environment import Environment  # noqa: E402
from risp.types.objects import BoolObject, FunctionObject, NumObject, Object  # noqa: E402
from risp.runtime_context import RuntimeContext  # noqa: E402
from risp.reader.parser import parse  # noqa: E402
from risp.evaluation.evaluator import evaluate  # noqa: E402
from risp.interpreter import Interpreter  # noqa: E402

__all__ = [
    "EvaluatorFn",
    "evaluate",
    "parse",
    "Interpreter",
    "Environment",
    "RuntimeContext",
    "Object",
    "NumObject",
    "BoolObject",
    "FunctionObject",
    "RispError",
    "RispSyntaxError",
    "RispConfigError",
    "RispTypeMismatch",
    "RispUnboundIdentifier",
    "RispNotCallable",
    "RispArityMismatch",
    "RispNumericUnderflow",
    "RispStackExhausted",
]
