from __future__ import annotations

from risp.config import UnderflowPolicy, get_max_depth, get_underflow_policy
from risp.errors import RispConfigError, RispStackExhausted


class RuntimeContext:
    """Per-session evaluation state: application depth and policies.

    One context belongs to one evaluation session. It is not thread-safe and
    must not be shared across threads.
    """

    __slots__ = ("max_depth", "underflow", "depth")

    def __init__(
        self,
        max_depth: int | None = None,
        underflow: UnderflowPolicy | None = None,
    ):
        self.max_depth: int = max_depth if max_depth is not None else get_max_depth()
        self.underflow: UnderflowPolicy = underflow if underflow is not None else get_underflow_policy()
        if self.max_depth < 1:
            raise RispConfigError(f"max_depth must be positive, got {self.max_depth}")
        if self.underflow not in ("error", "saturate"):
            raise RispConfigError(f"Unknown underflow policy {self.underflow!r}")
        self.depth: int = 0

    def enter_call(self) -> None:
        if self.depth >= self.max_depth:
            raise RispStackExhausted(
                f"Maximum application depth exceeded (max depth: {self.max_depth})"
            )
        self.depth += 1

    def exit_call(self) -> None:
        self.depth -= 1

    def __repr__(self) -> str:
        return (
            f"RuntimeContext(max_depth={self.max_depth}, "
            f"underflow={self.underflow!r}, depth={self.depth})"
        )
