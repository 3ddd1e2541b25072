from __future__ import annotations

import inspect
import sys
import threading

from skicalc.errors import ReductionDepthExceeded
from skicalc.evaluation.evaluator import evaluate
from skicalc.types.budget import Budget
from skicalc.types.term import Term

# Host frames one budget level can occupy: resolve, apply_term and apply_rule
FRAMES_PER_LEVEL = 4
# Ceiling for the raised recursion limit; larger budgets fall back to the error below
MAX_RECURSION_LIMIT = 10_000

_limit_lock = threading.Lock()


def _stack_depth() -> int:
    depth = 0
    frame = inspect.currentframe()
    while frame is not None:
        depth += 1
        frame = frame.f_back
    return depth


def ensure_recursion_headroom(max_depth: int) -> None:
    """Raise the interpreter's recursion limit so `max_depth` levels fit on the stack.

    The limit is process-wide, so it is only ever raised, never lowered.
    """
    needed = min(_stack_depth() + FRAMES_PER_LEVEL * max_depth + 100, MAX_RECURSION_LIMIT)
    with _limit_lock:
        if sys.getrecursionlimit() < needed:
            sys.setrecursionlimit(needed)


class EvalBackend:
    """Recursive tree-walking reducer."""

    name = "interp"

    def reduce(self, term: Term, budget: Budget) -> Term:
        ensure_recursion_headroom(budget.max_depth)
        try:
            return evaluate(term, budget)
        except RecursionError as ex:
            # The raised limit is capped, and partial shapes nest without spending budget
            raise ReductionDepthExceeded(
                budget.max_depth,
                budget.root,
                reason=f"host recursion limit reached before depth budget {budget.max_depth}",
            ) from ex
