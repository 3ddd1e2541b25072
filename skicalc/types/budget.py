from __future__ import annotations

from skicalc.errors import ReductionDepthExceeded
from skicalc.types.term import Term


class Budget:
    """Per-call reduction depth budget.

    `root` is the term the caller asked to reduce; it is reported when the
    budget runs out.
    """

    __slots__ = ("max_depth", "root")

    def __init__(self, max_depth: int, root: Term | None = None):
        self.max_depth = max_depth
        self.root = root

    def descend(self, depth: int) -> int:
        """Return the depth one level below `depth`, or raise if none is left."""
        if depth >= self.max_depth:
            raise ReductionDepthExceeded(self.max_depth, self.root)
        return depth + 1
