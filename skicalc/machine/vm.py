from __future__ import annotations

from typing import Callable, List

from skicalc.errors import MalformedApplication, SkiError
from skicalc.evaluation.apply import contract
from skicalc.types.budget import Budget
from skicalc.types.term import (
    Term,
    PartialConstant,
    PartialSubstitutor1,
    PartialSubstitutor2,
    Application,
)

from .opcodes import Opcode
from .instruction import Instruction
from .disasm import disassemble, format_instruction


class Machine:
    """Explicit-stack reducer.

    `program` holds pending instructions (top of the list runs next) and
    `values` holds resolved terms. Nothing recurses on the host stack, so the
    depth budget is the only limit on how far a reduction can go.
    """

    def __init__(self, budget: Budget, trace: bool = False):
        self.budget = budget
        self.trace = trace
        self.values: List[Term] = []
        self.program: List[Instruction] = []
        self.steps = 0
        # Opcode dispatch table
        self._dispatch: dict[int, Callable[[Instruction], None]] = {}
        self._init_dispatch()

    def _init_dispatch(self) -> None:
        d = self._dispatch
        d[Opcode.EVAL] = self.op_eval
        d[Opcode.PUSH] = self.op_push
        d[Opcode.APPLY] = self.op_apply
        d[Opcode.MAKE_PARTIAL_CONSTANT] = self.op_make_partial_constant
        d[Opcode.MAKE_PARTIAL_SUBSTITUTOR1] = self.op_make_partial_substitutor1
        d[Opcode.MAKE_PARTIAL_SUBSTITUTOR2] = self.op_make_partial_substitutor2

    def emit(self, *instructions: Instruction) -> None:
        """Schedule `instructions` to run in the order given."""
        self.program.extend(reversed(instructions))

    def run(self, term: Term) -> Term:
        self.emit(Instruction(Opcode.EVAL, term, 0))
        if self.trace:
            print("=== TRACE ===")
        try:
            while self.program:
                ins = self.program.pop()
                self.steps += 1
                if self.trace:
                    print(format_instruction(ins, self.steps, len(self.values)))
                self._dispatch[ins.op](ins)
        except SkiError:
            if self.trace:
                print("=== PENDING ===")
                print(disassemble(self.program))
            raise
        finally:
            if self.trace:
                print("=== END TRACE ===")
        if len(self.values) != 1:
            raise MalformedApplication(
                f"Machine halted with {len(self.values)} values, expected 1"
            )
        return self.values.pop()

    # --- Opcodes ---
    def op_push(self, ins: Instruction) -> None:
        self.values.append(ins.operand)

    def op_eval(self, ins: Instruction) -> None:
        term, depth = ins.operand, ins.depth
        if term.is_resolved:
            self.values.append(term)
            return
        match term:
            case Application(function, argument):
                inner = self.budget.descend(depth)
                self.emit(
                    Instruction(Opcode.EVAL, function, inner),
                    Instruction(Opcode.EVAL, argument, inner),
                    Instruction(Opcode.APPLY, None, inner),
                )
            case PartialConstant(held):
                self.emit(
                    Instruction(Opcode.EVAL, held, depth),
                    Instruction(Opcode.MAKE_PARTIAL_CONSTANT, term, depth),
                )
            case PartialSubstitutor1(first):
                self.emit(
                    Instruction(Opcode.EVAL, first, depth),
                    Instruction(Opcode.MAKE_PARTIAL_SUBSTITUTOR1, term, depth),
                )
            case PartialSubstitutor2(first, second):
                self.emit(
                    Instruction(Opcode.EVAL, first, depth),
                    Instruction(Opcode.EVAL, second, depth),
                    Instruction(Opcode.MAKE_PARTIAL_SUBSTITUTOR2, term, depth),
                )

    def op_apply(self, ins: Instruction) -> None:
        argument = self.values.pop()
        function = self.values.pop()
        result = contract(function, argument)
        if result is not None:
            self.values.append(result)
            return
        if isinstance(function, PartialSubstitutor2):
            # S x y z -> (x z)(y z), one level down
            inner = self.budget.descend(ins.depth)
            self.emit(
                Instruction(Opcode.PUSH, function.first, inner),
                Instruction(Opcode.PUSH, argument, inner),
                Instruction(Opcode.APPLY, None, inner),
                Instruction(Opcode.PUSH, function.second, inner),
                Instruction(Opcode.PUSH, argument, inner),
                Instruction(Opcode.APPLY, None, inner),
                Instruction(Opcode.APPLY, None, inner),
            )
            return
        # Values on the stack are always resolved
        raise MalformedApplication(f"Cannot apply unresolved {function!r}")

    def op_make_partial_constant(self, ins: Instruction) -> None:
        term: PartialConstant = ins.operand
        held = self.values.pop()
        self.values.append(term if held is term.held else PartialConstant(held))

    def op_make_partial_substitutor1(self, ins: Instruction) -> None:
        term: PartialSubstitutor1 = ins.operand
        first = self.values.pop()
        self.values.append(term if first is term.first else PartialSubstitutor1(first))

    def op_make_partial_substitutor2(self, ins: Instruction) -> None:
        term: PartialSubstitutor2 = ins.operand
        second = self.values.pop()
        first = self.values.pop()
        if first is term.first and second is term.second:
            self.values.append(term)
        else:
            self.values.append(PartialSubstitutor2(first, second))


def run_term(term: Term, budget: Budget, trace: bool = False) -> Term:
    return Machine(budget, trace).run(term)
