from __future__ import annotations
import os
from typing import get_args

from skicalc import Engine
from skicalc.errors import SkiConfigError


# Defaults
# 512 matches the recursion limit of the type-level encoding this engine models
DEFAULT_MAX_DEPTH = 512
DEFAULT_ENGINE: Engine = "machine"

ENGINES: tuple[str, ...] = get_args(Engine)


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError as ex:
        raise SkiConfigError(f"{var} must be an integer, got {raw!r}") from ex


def check_max_depth(max_depth: int) -> int:
    if isinstance(max_depth, bool) or not isinstance(max_depth, int):
        raise SkiConfigError(f"max_depth must be an integer, got {max_depth!r}")
    if max_depth < 1:
        raise SkiConfigError(f"max_depth must be positive, got {max_depth}")
    return max_depth


def get_max_depth() -> int:
    return check_max_depth(int_from_env('SKICALC_MAX_DEPTH', DEFAULT_MAX_DEPTH))


def check_engine(engine: str) -> Engine:
    if engine not in ENGINES:
        raise SkiConfigError(f"Unknown engine {engine!r}; expected one of {', '.join(ENGINES)}")
    return engine


def get_engine() -> Engine:
    raw = os.environ.get('SKICALC_ENGINE', '').strip()
    return check_engine(raw) if raw else DEFAULT_ENGINE


def trace_enabled() -> bool:
    return os.environ.get('SKICALC_TRACE', '').strip() not in ('', '0')
