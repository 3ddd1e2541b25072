"""Demonstration driver: prints a fixed set of example reductions.

Each line has the form `<name> = <realized value>`. Exits 1 with a diagnostic
on stderr if any example has no normal form within the depth budget.
"""

from __future__ import annotations

import argparse
import sys

from skicalc import config
from skicalc.errors import ReductionDepthExceeded, SkiConfigError
from skicalc.numerals import NAMES, OMEGA, numeral
from skicalc.reducer import Reducer
from skicalc.types.term import Term, I, K, S, apply


def examples(include_omega: bool = False) -> list[tuple[str, Term]]:
    items: list[tuple[str, Term]] = [
        # I K = K
        ("IK", apply(I, K)),
        # S K S K = K K (S K) = K
        ("SKSK", apply(apply(apply(S, K), S), K)),
    ]
    # n I K = K for every numeral: I composed with itself is still I
    for n, name in enumerate(NAMES):
        items.append((name, apply(apply(numeral(n), I), K)))
    if include_omega:
        items.append(("Omega", apply(OMEGA, OMEGA)))
    return items


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m skicalc.demo",
        description="Print example SKI reductions.",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help=f"reduction depth budget (default: $SKICALC_MAX_DEPTH or {config.DEFAULT_MAX_DEPTH})",
    )
    parser.add_argument(
        "--engine",
        choices=config.ENGINES,
        default=None,
        help="reduction engine (default: $SKICALC_ENGINE or machine)",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="render results as nested forms instead of debug strings",
    )
    parser.add_argument(
        "--pretty-options",
        metavar="JSON",
        default=None,
        help="JSON object overriding pretty-printer options; implies --pretty",
    )
    parser.add_argument(
        "--include-omega",
        action="store_true",
        help="also reduce SII(SII), which has no normal form",
    )
    return parser


def pretty_options(args: argparse.Namespace) -> dict | None:
    """Pretty-printer options for `args`, or None for plain output."""
    if not args.pretty and args.pretty_options is None:
        return None
    from skicalc.debug_utils.pprint import DEFAULT_OPTIONS, load_options_from_json
    color = sys.stdout.isatty()
    options = {**DEFAULT_OPTIONS, "color_primitives": color,
               "color_partials": color, "color_applications": color}
    if args.pretty_options is not None:
        options = load_options_from_json(args.pretty_options, base=options)
    return options


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        reducer = Reducer(args.max_depth, args.engine)
        options = pretty_options(args)
    except SkiConfigError as ex:
        print(f"error: {ex}", file=sys.stderr)
        return 2

    for name, term in examples(args.include_omega):
        try:
            value = reducer.construct(term)
        except ReductionDepthExceeded as ex:
            print(
                f"error: {name} has no normal form within depth budget {ex.max_depth} ({term})",
                file=sys.stderr,
            )
            return 1
        if options is not None:
            from skicalc.debug_utils.pprint import pprint_term
            print(f"{name} = {pprint_term(value, options=options)}")
        else:
            print(f"{name} = {value!r}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
