"""Church numerals built from S, K and I.

A numeral n is a term such that `n f x` reduces to f applied n times to x.
Everything here is an ordinary term; the numerals are reduced by the same
engine as any other expression.

Two successor encodings are provided:

- SUCCESSOR, `S(S(KS)K)`: `successor(n) f x` reduces to `f (n f x)` for every
  f and x. The numeral library is built on it.
- INVERT, `S(K(SI)K)`, which resolves to `S(SI)`. `invert(n) f` reduces to
  `(n f)(f (n f))`, which only agrees with the successor when f is I; it is
  kept for comparison and for reproducing the classic identity examples.
"""

from __future__ import annotations

from skicalc.errors import SkiTypeError
from skicalc.types.term import (
    Term,
    Identity,
    PartialConstant,
    I,
    K,
    S,
    apply,
)

ZERO = apply(K, I)

INVERT = apply(S, apply(apply(K, apply(S, I)), K))

SUCCESSOR = apply(S, apply(apply(S, apply(K, S)), K))

# Self-application: OMEGA x reduces to x x, so OMEGA OMEGA never resolves
OMEGA = apply(apply(S, I), I)

NAMES = (
    "Zero", "One", "Two", "Three", "Four", "Five", "Six",
    "Seven", "Eight", "Nine", "Ten", "Eleven", "Twelve",
)


def successor(n: Term) -> Term:
    return apply(SUCCESSOR, n)


def invert(n: Term) -> Term:
    return apply(INVERT, n)


def numeral(n: int) -> Term:
    """Build the numeral for `n` as n successors over ZERO."""
    if n < 0:
        raise ValueError("numeral only supports n>=0")
    term = ZERO
    for _ in range(n):
        term = successor(term)
    return term


def numeral_value(term: Term, reducer=None) -> int:
    """
    Decode a numeral by reducing `term K I`.

    Each application of K wraps its argument in one PartialConstant, so the
    result is I under exactly n layers. Raises SkiTypeError for any other shape.
    """
    if reducer is None:
        from skicalc.reducer import Reducer
        reducer = Reducer()
    cur = reducer.reduce(apply(apply(term, K), I))
    n = 0
    while isinstance(cur, PartialConstant):
        n += 1
        cur = cur.held
    if not isinstance(cur, Identity):
        raise SkiTypeError(f"{term} is not a Church numeral")
    return n
