from __future__ import annotations

# Public surface for the machine package
from .opcodes import Opcode
from .instruction import Instruction
from .vm import Machine, run_term
from .disasm import disassemble, format_instruction

__all__ = [
    "Opcode",
    "Instruction",
    "Machine",
    "run_term",
    "disassemble",
    "format_instruction",
]
