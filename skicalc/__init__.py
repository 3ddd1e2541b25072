# Core type aliases and public surface for skicalc.
# Terms are frozen dataclasses (skicalc.types.term). Reduction returns a Term whose
# outermost shape is never an Application; realization turns such a term into an
# inspectable Realized value.
#
# Naming guidance:
# - Term:     any node of the combinator tree, resolved or not.
# - Resolved: a Term with no Application left anywhere inside it.
# Both aliases are interchangeable at runtime; Resolved documents intent.

from typing import Literal

# Engine selector: tree-walking evaluator or explicit-stack machine
Engine = Literal["interp", "machine"]

from skicalc.types.term import (  # noqa: E402
    Term,
    Identity,
    Constant,
    Substitutor,
    PartialConstant,
    PartialSubstitutor1,
    PartialSubstitutor2,
    Application,
    I,
    K,
    S,
    apply,
)

Resolved = Term

from skicalc.errors import (  # noqa: E402
    SkiError,
    SkiTypeError,
    SkiConfigError,
    ReductionDepthExceeded,
    MalformedApplication,
)
from skicalc.reducer import Reducer, reduce  # noqa: E402
from skicalc.realizer import Realized, realize  # noqa: E402

__all__ = [
    "Engine",
    "Resolved",
    # terms
    "Term",
    "Identity",
    "Constant",
    "Substitutor",
    "PartialConstant",
    "PartialSubstitutor1",
    "PartialSubstitutor2",
    "Application",
    "I",
    "K",
    "S",
    "apply",
    # errors
    "SkiError",
    "SkiTypeError",
    "SkiConfigError",
    "ReductionDepthExceeded",
    "MalformedApplication",
    # engine
    "Reducer",
    "reduce",
    # realizer
    "Realized",
    "realize",
]
