from __future__ import annotations

from skicalc.types.term import Term


class TailCall:
    """A pending `function argument` rewrite, returned instead of recursing."""

    __slots__ = ("function", "argument", "depth")

    def __init__(self, function: Term, argument: Term, depth: int):
        self.function = function
        self.argument = argument
        self.depth = depth
