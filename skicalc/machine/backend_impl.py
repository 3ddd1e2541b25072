from __future__ import annotations

from skicalc import config
from skicalc.types.budget import Budget
from skicalc.types.term import Term
from .vm import Machine


class MachineBackend:
    """
    Stack-machine backend: resolves a term on a fresh Machine per call.
    """

    name = "machine"

    def __init__(self, trace: bool | None = None):
        self.trace = trace

    def reduce(self, term: Term, budget: Budget) -> Term:
        trace = config.trace_enabled() if self.trace is None else self.trace
        return Machine(budget, trace=trace).run(term)
