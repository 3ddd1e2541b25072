import json
import re

from skicalc.errors import SkiConfigError
from skicalc.realizer import Realized
from skicalc.types.term import Term, Application

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_PRIMITIVE = "\033[94m"
COLOR_PARTIAL = "\033[92m"
COLOR_APPLICATION = "\033[93m"

_ANSI = re.compile(r"\033\[[0-9;]*m")

# ----------------- Defaults -----------------
DEFAULT_OPTIONS = {
    "max_line_length": 80,
    "max_depth": 16,
    "display_legend": False,
    "color_primitives": True,
    "color_partials": True,
    "color_applications": True,
}

PRIMITIVE_TAGS = {"Identity", "Constant", "Substitutor"}


# ----------------- Colorize utility -----------------
def colorize(tag: str, options: dict = DEFAULT_OPTIONS) -> str:
    if tag in PRIMITIVE_TAGS:
        if options.get("color_primitives", True):
            return f"{COLOR_PRIMITIVE}{tag}{RESET}"
        return tag
    if tag == "Application":
        if options.get("color_applications", True):
            return f"{COLOR_APPLICATION}{tag}{RESET}"
        return tag
    if options.get("color_partials", True):
        return f"{COLOR_PARTIAL}{tag}{RESET}"
    return tag


def _legend_item(color: str, label: str, enabled: bool) -> str:
    return f"{color}{label}{RESET}" if enabled else label


def visible_length(text: str) -> int:
    return len(_ANSI.sub("", text))


# ----------------- Pretty printer -----------------
def pprint_term(
    value,
    indent: int = 0,
    options: dict = DEFAULT_OPTIONS,
    _current_depth: int = 0,
) -> str:
    """Render a term or realized value as a nested, optionally coloured, form.

    Unresolved Applications are shown as well, so this also works on the
    input side of a reduction.
    """
    term = value.term if isinstance(value, Realized) else value
    if not isinstance(term, Term):
        return str(value)

    legend_str = ""
    if options.get("display_legend", True) and indent == 0:
        legend_items = [
            _legend_item(COLOR_PRIMITIVE, "Primitive", options.get("color_primitives", True)),
            _legend_item(COLOR_PARTIAL, "Partial", options.get("color_partials", True)),
            _legend_item(COLOR_APPLICATION, "Application", options.get("color_applications", True)),
        ]
        legend_str = "Color Key: " + " | ".join(legend_items) + "\n"

    if _current_depth >= options.get("max_depth", 16):
        return legend_str + "…"

    head = colorize(type(term).__name__, options)
    if not term.payload:
        return legend_str + head

    parts = [
        pprint_term(t, indent + 1, options, _current_depth + 1)
        for t in term.payload
    ]

    single_line = "(" + " ".join([head] + parts) + ")"
    if visible_length(single_line) + indent * 2 <= options.get("max_line_length", 80):
        return legend_str + single_line

    aligned_lines = ["(" + head]
    for part in parts:
        aligned_lines.append("  " * (indent + 1) + part)
    aligned_lines[-1] += ")"
    return legend_str + "\n".join(aligned_lines)


# ----------------- Load JSON config -----------------
def load_options_from_json(json_str: str, base: dict = DEFAULT_OPTIONS) -> dict:
    try:
        user_opts = json.loads(json_str)
    except json.JSONDecodeError as ex:
        raise SkiConfigError(f"Invalid pretty-printer options: {ex}") from ex
    if not isinstance(user_opts, dict):
        raise SkiConfigError("Pretty-printer options must be a JSON object")
    return {**base, **user_opts}
