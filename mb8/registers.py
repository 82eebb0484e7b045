"""CPU registers, one set for the judge and one per bot."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from mb8.isa import BOTS_LIMIT, GENERAL_PURPOSE_REGISTERS_COUNT, Register
from mb8.role import Role

_GENERAL_PURPOSE = {
    Register.R0, Register.R1, Register.R2, Register.R3,
    Register.R4, Register.R5, Register.R6, Register.R7,
}


@dataclass
class RegistersContext:
    """Register file of one program."""

    general_purpose: List[int] = field(
        default_factory=lambda: [0] * GENERAL_PURPOSE_REGISTERS_COUNT
    )
    index_register: int = 0
    program_counter: int = 0
    stack_pointer: int = 0
    flag: int = 0

    def write(self, register: Register, value: int) -> None:
        """Write ``value``, truncated to the width of ``register``."""
        if register in _GENERAL_PURPOSE:
            self.general_purpose[register.value] = value & 0xFF
        elif register is Register.I:
            self.index_register = value & 0xFFFF
        elif register is Register.F:
            self.flag = value & 0xFF
        elif register is Register.PC:
            self.program_counter = value & 0xFFFF
        elif register is Register.SP:
            self.stack_pointer = value & 0xFF
        else:
            raise ValueError(f"unknown register {register!r}")

    def read(self, register: Register) -> int:
        """Return the value of ``register``."""
        if register in _GENERAL_PURPOSE:
            return self.general_purpose[register.value]
        if register is Register.I:
            return self.index_register
        if register is Register.F:
            return self.flag
        if register is Register.PC:
            return self.program_counter
        if register is Register.SP:
            return self.stack_pointer
        raise ValueError(f"unknown register {register!r}")


_DISPLAY_ORDER = (
    Register.R0, Register.R1, Register.R2, Register.R3,
    Register.R4, Register.R5, Register.R6, Register.R7,
    Register.I, Register.F, Register.PC, Register.SP,
)


class Registers:
    """Registers of the judge and every bot slot, with one active set."""

    def __init__(self) -> None:
        self.role = Role()
        self._host = RegistersContext()
        self._bots = [RegistersContext() for _ in range(BOTS_LIMIT)]

    def __repr__(self) -> str:
        return f"Registers(role={self.role!r})"

    def _current(self) -> RegistersContext:
        if self.role.is_judge():
            return self._host
        return self._bots[self.role.bot]

    def switch_context(self, role: Role) -> None:
        """Make ``role`` the active role."""
        self.role = role

    def write(self, register: Register, value: int) -> None:
        """Write ``value`` to ``register`` of the active role."""
        self._current().write(register, value)

    def read(self, register: Register) -> int:
        """Return ``register`` of the active role."""
        return self._current().read(register)

    def __str__(self) -> str:
        return "\t".join(f"{reg.name}={self.read(reg)}" for reg in _DISPLAY_ORDER)