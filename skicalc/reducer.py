from __future__ import annotations
from typing import ClassVar

from skicalc import Engine, config
from skicalc.types.budget import Budget
from skicalc.types.term import Term
from skicalc.errors import SkiTypeError
from skicalc.realizer import Realized, realize


class Reducer:
    """
    Resolves terms with a pluggable backend under a per-call depth budget.

    The backend is either the tree-walking evaluator ('interp') or the
    explicit-stack machine ('machine'); both fire the same rules in the same
    order and spend the budget identically.
    """

    # Class-level default to avoid env-variable coupling in tests; None defers to config
    DefaultEngine: ClassVar[Engine | None] = None

    def __init__(
        self,
        max_depth: int | None = None,
        engine: Engine | None = None,
        *,
        trace: bool | None = None,
    ):
        self.max_depth = config.check_max_depth(
            max_depth if max_depth is not None else config.get_max_depth()
        )
        eng = config.check_engine(engine or self.DefaultEngine or config.get_engine())
        if eng == 'machine':
            from skicalc.machine.backend_impl import MachineBackend
            self.backend = MachineBackend(trace=trace)
        else:
            from skicalc.evaluation.backend_impl import EvalBackend
            self.backend = EvalBackend()
        self.engine: Engine = eng

    def reduce(self, term: Term, max_depth: int | None = None) -> Term:
        """Return the resolved shape of `term`.

        Raises ReductionDepthExceeded if resolving needs more nested rewrites
        than `max_depth` (or this reducer's default) allows.
        """
        if not isinstance(term, Term):
            raise SkiTypeError(f"Cannot reduce non-term {term!r}")
        limit = self.max_depth if max_depth is None else config.check_max_depth(max_depth)
        return self.backend.reduce(term, Budget(limit, term))

    def construct(self, term: Term, max_depth: int | None = None) -> Realized:
        """Reduce `term`, then realize the result."""
        return realize(self.reduce(term, max_depth))


def reduce(term: Term, max_depth: int | None = None, *, engine: Engine | None = None) -> Term:
    """Resolve `term` under a fresh budget of `max_depth` nested rewrites."""
    return Reducer(max_depth, engine).reduce(term)
