from __future__ import annotations
import os
from typing import Literal

from risp.errors import RispConfigError

UnderflowPolicy = Literal['error', 'saturate']

# Defaults
_DEFAULT_MAX_DEPTH = 500
_DEFAULT_UNDERFLOW: UnderflowPolicy = 'error'
_UNDERFLOW_POLICIES = ('error', 'saturate')


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise RispConfigError(f"{var} must be an integer, got {raw!r}") from None
    if value < 1:
        raise RispConfigError(f"{var} must be positive, got {value}")
    return value


def get_max_depth() -> int:
    return int_from_env('RISP_MAX_DEPTH', _DEFAULT_MAX_DEPTH)


def get_underflow_policy() -> UnderflowPolicy:
    raw = os.environ.get('RISP_UNDERFLOW')
    if not raw or not raw.strip():
        return _DEFAULT_UNDERFLOW
    policy = raw.strip().lower()
    if policy not in _UNDERFLOW_POLICIES:
        raise RispConfigError(
            f"RISP_UNDERFLOW must be one of {', '.join(_UNDERFLOW_POLICIES)}, got {raw!r}"
        )
    return policy  # type: ignore[return-value]
