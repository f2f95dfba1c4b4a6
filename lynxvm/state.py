"""Interpreter state and register access."""

from __future__ import annotations

from dataclasses import dataclass, field

from lynxvm.header import Header
from lynxvm.value import Value

REGISTER_COUNT = 1 << 16


@dataclass(eq=False)
class State:
    """The running state of the interpreter for one header."""

    header: Header = field(default_factory=Header)
    register_count: int = REGISTER_COUNT
    pc: int = 0
    stack: list[Value] = field(default_factory=list)
    registers: list[Value] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not 0 < self.register_count <= REGISTER_COUNT:
            raise ValueError(
                f"register count must be between 1 and {REGISTER_COUNT}, "
                f"got {self.register_count}"
            )
        self.registers = [Value.nil()] * self.register_count

    def _index(self, reg: int) -> int:
        if isinstance(reg, bool) or not isinstance(reg, int):
            raise TypeError(f"register index must be an int, got {reg!r}")
        if not 0 <= reg < self.register_count:
            raise IndexError(f"register {reg} out of range")
        return reg

    def set_register(self, reg: int, value: object) -> None:
        """Store a value (or anything Value.of accepts) in a register."""
        self.registers[self._index(reg)] = Value.of(value)

    def get_register(self, reg: int) -> Value:
        """Return the value held in a register."""
        return self.registers[self._index(reg)]


def set_register(state: State, reg: int, value: object) -> None:
    """Store a value in a register of the given state."""
    state.set_register(reg, value)


def get_register(state: State, reg: int) -> Value:
    """Return the value held in a register of the given state."""
    return state.get_register(reg)