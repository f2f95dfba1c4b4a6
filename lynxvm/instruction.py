"""Opcodes and fixed-width instructions."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass

_LAYOUT = struct.Struct("<4H")

INSTRUCTION_SIZE = _LAYOUT.size
OPERAND_MAX = 0xFFFF


class Opcode(enum.IntEnum):
    """Operation codes, stored as 16-bit numbers."""

    NOP = 0
    CONST = 1
    ADD = 2
    SUB = 3
    MUL = 4
    DIV = 5


@dataclass(frozen=True)
class Instruction:
    """An opcode with three 16-bit operands, eight bytes when packed."""

    op: Opcode = Opcode.NOP
    a: int = 0
    b: int = 0
    c: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "op", Opcode(self.op))
        for name in ("a", "b", "c"):
            operand = getattr(self, name)
            if isinstance(operand, bool) or not isinstance(operand, int):
                raise TypeError(f"operand {name} must be an int, got {operand!r}")
            if not 0 <= operand <= OPERAND_MAX:
                raise ValueError(f"operand {name}={operand} is not a 16-bit number")

    def pack(self) -> bytes:
        """Return the little-endian eight-byte form."""
        return _LAYOUT.pack(self.op, self.a, self.b, self.c)

    @classmethod
    def unpack(cls, data: bytes) -> Instruction:
        """Read an instruction from exactly eight bytes."""
        if len(data) != INSTRUCTION_SIZE:
            raise ValueError(
                f"an instruction is {INSTRUCTION_SIZE} bytes, got {len(data)}"
            )
        op, a, b, c = _LAYOUT.unpack(data)
        return cls(Opcode(op), a, b, c)