"""State of an MB8 machine: memory, registers and the running role."""

from __future__ import annotations

from dataclasses import dataclass, field

from mb8.memory import Memory
from mb8.registers import Registers
from mb8.role import Role


@dataclass(eq=False)
class Machine:
    """Memory, registers and run state shared by every instruction."""

    mem: Memory = field(default_factory=Memory)
    registers: Registers = field(default_factory=Registers)
    role: Role = field(default_factory=Role)
    halted: bool = False
    redraw: bool = False
    bots: int = 0

    def switch_context(self, role: Role) -> None:
        """Make ``role`` active for both memory and registers."""
        self.mem.switch_context(role)
        self.registers.switch_context(role)
        self.role = role