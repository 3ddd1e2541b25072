"""Term algebra for skicalc.

A term is one of seven immutable shapes. The three primitives carry no state;
the partial shapes freeze the arguments a primitive has already received; an
Application is a pending combination whose shape is unknown until reduction.

Equality and hashing are purely structural. Reduction can build terms nested
far deeper than the host stack, so nothing in this module recurses over a
term: hashes and the resolved flag are cached from the sub-terms when a term
is built, and comparison and notation walk an explicit stack.
"""

from __future__ import annotations

from dataclasses import dataclass

from skicalc.errors import SkiTypeError


@dataclass(frozen=True, repr=False, eq=False)
class Term:
    """Abstract base of every combinator term."""

    __slots__ = ()

    def __call__(self, argument: Term) -> Application:
        return apply(self, argument)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Term):
            return NotImplemented
        pending = [(self, other)]
        while pending:
            a, b = pending.pop()
            if a is b:
                continue
            if type(a) is not type(b) or hash(a) != hash(b):
                return False
            pending.extend(zip(a.payload, b.payload))
        return True

    def __hash__(self) -> int:
        return hash(type(self).__name__)

    def __str__(self) -> str:
        return _notation(self)

    def __repr__(self) -> str:
        return _debug_repr(self)

    @property
    def payload(self) -> tuple[Term, ...]:
        """Sub-terms held by this term, in argument order."""
        return ()

    @property
    def is_resolved(self) -> bool:
        """True when no Application occurs anywhere in this term."""
        return True


class _Compound(Term):
    # Hash and resolved flag, derived once from the sub-terms' cached values
    __slots__ = ("_hash", "_resolved")

    def __post_init__(self) -> None:
        payload = self.payload
        object.__setattr__(self, "_hash", hash((type(self).__name__, *map(hash, payload))))
        object.__setattr__(
            self,
            "_resolved",
            not isinstance(self, Application) and all(t.is_resolved for t in payload),
        )

    def __hash__(self) -> int:
        return self._hash

    @property
    def is_resolved(self) -> bool:
        return self._resolved


@dataclass(frozen=True, repr=False, eq=False)
class Identity(Term):
    __slots__ = ()


@dataclass(frozen=True, repr=False, eq=False)
class Constant(Term):
    __slots__ = ()


@dataclass(frozen=True, repr=False, eq=False)
class Substitutor(Term):
    __slots__ = ()


@dataclass(frozen=True, repr=False, eq=False)
class PartialConstant(_Compound):
    """K applied to one argument; applying it to anything yields `held`."""

    __slots__ = ("held",)
    held: Term

    @property
    def payload(self) -> tuple[Term, ...]:
        return (self.held,)


@dataclass(frozen=True, repr=False, eq=False)
class PartialSubstitutor1(_Compound):
    __slots__ = ("first",)
    first: Term

    @property
    def payload(self) -> tuple[Term, ...]:
        return (self.first,)


@dataclass(frozen=True, repr=False, eq=False)
class PartialSubstitutor2(_Compound):
    __slots__ = ("first", "second")
    first: Term
    second: Term

    @property
    def payload(self) -> tuple[Term, ...]:
        return (self.first, self.second)


@dataclass(frozen=True, repr=False, eq=False)
class Application(_Compound):
    """`function` applied to `argument`, not yet reduced."""

    __slots__ = ("function", "argument")
    function: Term
    argument: Term

    @property
    def payload(self) -> tuple[Term, ...]:
        return (self.function, self.argument)


I = Identity()
K = Constant()
S = Substitutor()

PRIMITIVES = (Identity, Constant, Substitutor)


def apply(function: Term, argument: Term) -> Application:
    """Build the pending application of `function` to `argument`.

    Nothing is reduced here; see skicalc.reducer.reduce.
    """
    for operand in (function, argument):
        if not isinstance(operand, Term):
            raise SkiTypeError(f"Cannot apply non-term {operand!r}")
    return Application(function, argument)


# --- Notation ---
_LETTERS = {Identity: "I", Constant: "K", Substitutor: "S"}
_PARTIAL_LETTERS = {PartialConstant: "K", PartialSubstitutor1: "S", PartialSubstitutor2: "S"}


def _notation(term: Term) -> str:
    # Application is left-associative: "SKSK" is ((SK)S)K
    parts: list[str] = []
    pending: list[Term | str] = [term]
    while pending:
        item = pending.pop()
        if isinstance(item, str):
            parts.append(item)
            continue
        if type(item) in _LETTERS:
            parts.append(_LETTERS[type(item)])
            continue
        if isinstance(item, Application):
            head, operands = item.function, (item.argument,)
        else:
            head, operands = _PARTIAL_LETTERS[type(item)], item.payload
        for operand in reversed(operands):
            if type(operand) in _LETTERS:
                pending.append(operand)
            else:
                pending.extend((")", operand, "("))
        pending.append(head)
    return "".join(parts)


def _debug_repr(term: Term) -> str:
    # e.g. "PartialSubstitutor2(PartialConstant(Identity), Constant)"
    parts: list[str] = []
    pending: list[Term | str] = [term]
    while pending:
        item = pending.pop()
        if isinstance(item, str):
            parts.append(item)
            continue
        payload = item.payload
        if not payload:
            parts.append(type(item).__name__)
            continue
        pending.append(")")
        for i, sub in enumerate(reversed(payload)):
            if i:
                pending.append(", ")
            pending.append(sub)
        pending.append(f"{type(item).__name__}(")
    return "".join(parts)
