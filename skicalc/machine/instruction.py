from __future__ import annotations

from typing import NamedTuple

from skicalc.types.term import Term
from .opcodes import Opcode


class Instruction(NamedTuple):
    op: Opcode
    operand: Term | None
    depth: int
