from __future__ import annotations

from .opcodes import Opcode
from .instruction import Instruction

MAX_OPERAND_WIDTH = 60


def format_operand(operand) -> str:
    if operand is None:
        return ""
    text = str(operand)
    if len(text) > MAX_OPERAND_WIDTH:
        text = text[: MAX_OPERAND_WIDTH - 3] + "..."
    return text


def format_instruction(ins: Instruction, step: int | None = None, stack_size: int | None = None) -> str:
    try:
        opname = Opcode(ins.op).name
    except ValueError:
        opname = f"OP_{ins.op:02X}"
    line = f"{opname:<26} depth={ins.depth:<4d}"
    if stack_size is not None:
        line += f" values={stack_size:<3d}"
    operand = format_operand(ins.operand)
    if operand:
        line += f" {operand}"
    if step is not None:
        line = f"{step:05d}: {line}"
    return line.rstrip()


def disassemble(program: list[Instruction]) -> str:
    """Render a pending program, next instruction first."""
    return "\n".join(format_instruction(ins) for ins in reversed(program))
