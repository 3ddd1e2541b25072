from __future__ import annotations

from enum import IntEnum


class Opcode(IntEnum):
    # Operand is a term to resolve
    EVAL = 0x01
    # Operand is an already resolved term
    PUSH = 0x02
    # Pops argument then function; pushes the rewrite result
    APPLY = 0x10

    # Rebuild a partial shape from resolved payloads; operand is the source term
    MAKE_PARTIAL_CONSTANT = 0x20  # pops 1
    MAKE_PARTIAL_SUBSTITUTOR1 = 0x21  # pops 1
    MAKE_PARTIAL_SUBSTITUTOR2 = 0x22  # pops 2
