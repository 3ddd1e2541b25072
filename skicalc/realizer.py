"""Realization of resolved terms into inspectable values.

A Realized value is the runtime stand-in for a resolved term: it names the
term's variant and exposes the frozen sub-terms of partial shapes as realized
values of their own. Realizing structurally equal terms yields the same
object while that object is alive, and realizing a Realized returns it
unchanged. Realization never reduces anything.
"""

from __future__ import annotations

import threading
import weakref

from skicalc.errors import MalformedApplication, SkiTypeError
from skicalc.types.term import Term, Application


class Realized:
    """Concrete value of a resolved term."""

    __slots__ = ("term", "__weakref__")

    def __init__(self, term: Term):
        self.term = term

    @property
    def tag(self) -> str:
        """Stable variant name, e.g. 'PartialConstant'."""
        return type(self.term).__name__

    @property
    def parts(self) -> tuple[Realized, ...]:
        return tuple(realize(t) for t in self.term.payload)

    def __eq__(self, other) -> bool:
        return isinstance(other, Realized) and self.term == other.term

    def __hash__(self) -> int:
        return hash(self.term)

    def __repr__(self) -> str:
        return repr(self.term)

    def __str__(self) -> str:
        return str(self.term)


_interned: weakref.WeakValueDictionary[Term, Realized] = weakref.WeakValueDictionary()
_lock = threading.Lock()


def check_resolved(term: Term) -> None:
    """Raise MalformedApplication if an Application occurs anywhere in `term`."""
    if term.is_resolved:
        return
    pending = [term]
    while pending:
        t = pending.pop()
        if isinstance(t, Application):
            raise MalformedApplication(f"Cannot realize unreduced application {t}")
        pending.extend(t.payload)


def realize(value: Term | Realized) -> Realized:
    if isinstance(value, Realized):
        return value
    if not isinstance(value, Term):
        raise SkiTypeError(f"Cannot realize non-term {value!r}")
    with _lock:
        existing = _interned.get(value)
        if existing is not None:
            return existing
    check_resolved(value)
    with _lock:
        # Another thread may have realized an equal term meanwhile
        return _interned.setdefault(value, Realized(value))
