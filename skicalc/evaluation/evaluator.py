"""Tree-walking reducer and trampoline for skicalc.

Resolves a term by recursing over Application nodes and stepping the rewrite
rules of skicalc.evaluation.apply. The tail application of the S rule comes
back as a TailCall and is driven by a loop, so a rewrite cycle such as
`SII(SII)` grows the depth count but not the host stack.
"""

from __future__ import annotations

from skicalc.evaluation.apply import apply_rule
from skicalc.types.budget import Budget
from skicalc.types.tail_call import TailCall
from skicalc.types.term import (
    Term,
    PartialConstant,
    PartialSubstitutor1,
    PartialSubstitutor2,
    Application,
)


def evaluate(term: Term, budget: Budget) -> Term:
    """
    Resolve `term` completely, starting at depth 0.
    """
    return resolve(term, budget, 0)


def resolve(term: Term, budget: Budget, depth: int = 0) -> Term:
    """Return `term` with every Application inside it rewritten away."""
    if term.is_resolved:
        return term
    match term:
        case Application(function, argument):
            inner = budget.descend(depth)
            f = resolve(function, budget, inner)
            a = resolve(argument, budget, inner)
            return apply_term(f, a, budget, inner)
        case PartialConstant(held):
            h = resolve(held, budget, depth)
            return term if h is held else PartialConstant(h)
        case PartialSubstitutor1(first):
            x = resolve(first, budget, depth)
            return term if x is first else PartialSubstitutor1(x)
        case PartialSubstitutor2(first, second):
            x = resolve(first, budget, depth)
            y = resolve(second, budget, depth)
            if x is first and y is second:
                return term
            return PartialSubstitutor2(x, y)
    return term


def apply_term(function: Term, argument: Term, budget: Budget, depth: int) -> Term:
    """
    Trampoline: apply resolved `function` to resolved `argument`.
    """
    result = apply_rule(function, argument, depth, budget, resolve, apply_term)
    while isinstance(result, TailCall):
        result = apply_rule(
            result.function, result.argument, result.depth, budget, resolve, apply_term
        )
    return result
