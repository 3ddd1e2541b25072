"""Rewrite rules for skicalc.

This module centralizes what "apply term F to argument X" rewrites into:
- The five structural rules (I, K, K x, S, S x), which only build a new shape.
- The distribution rule for S x y, the only rule that applies terms again and
  therefore the only one that can fail to terminate. It descends one level of
  the budget and hands its final application back as a TailCall.
- Resolution of an Application in function position before any rule fires.

Operands are expected to be resolved (call by value). A top-level Application
in either position is resolved first; payloads of partial shapes are assumed
to be resolved already, which holds for everything the rules themselves build.
"""

from __future__ import annotations

from typing import Callable

from skicalc.errors import MalformedApplication
from skicalc.types.budget import Budget
from skicalc.types.tail_call import TailCall
from skicalc.types.term import (
    Term,
    Identity,
    Constant,
    Substitutor,
    PartialConstant,
    PartialSubstitutor1,
    PartialSubstitutor2,
    Application,
)

ResolveFn = Callable[[Term, Budget, int], Term]
ApplyFn = Callable[[Term, Term, Budget, int], Term]


def contract(function: Term, argument: Term) -> Term | None:
    """Apply one of the structural rules, or return None if none matches.

    None means `function` is a PartialSubstitutor2 (distribution) or an
    unresolved Application; both need the evaluator.
    """
    match function:
        case Identity():
            return argument
        case Constant():
            return PartialConstant(argument)
        case PartialConstant(held):
            return held
        case Substitutor():
            return PartialSubstitutor1(argument)
        case PartialSubstitutor1(first):
            return PartialSubstitutor2(first, argument)
    return None


def apply_rule(
    function: Term,
    argument: Term,
    depth: int,
    budget: Budget,
    resolve_fn: ResolveFn,
    apply_fn: ApplyFn,
) -> Term | TailCall:
    """Rewrite `function argument` by case analysis on the function's shape.

    Parameters:
    - depth: nesting level of this rewrite; the S rule descends from it.
    - budget: the per-call budget; raises ReductionDepthExceeded when spent.
    - resolve_fn: resolves an Application to its shape (the evaluator).
    - apply_fn: fully applies a function to an argument (used for `x z`, `y z`).

    Behavior:
    - Structural rules return the new shape directly.
    - `S x y z` computes `x z` and `y z` one level down and returns a TailCall
      for `(x z)(y z)` at that level, to be stepped by the caller's trampoline.
    - An Application in function position is resolved and re-dispatched as a
      TailCall at the same depth (resolution descends on its own).
    """
    if isinstance(argument, Application):
        argument = resolve_fn(argument, budget, depth)

    result = contract(function, argument)
    if result is not None:
        return result

    match function:
        case PartialSubstitutor2(first, second):
            inner = budget.descend(depth)
            left = apply_fn(first, argument, budget, inner)
            right = apply_fn(second, argument, budget, inner)
            return TailCall(left, right, inner)
        case Application():
            return TailCall(resolve_fn(function, budget, depth), argument, depth)

    raise MalformedApplication(f"Cannot apply {function!r}: not a term shape")
