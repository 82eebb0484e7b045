"""Memory banks of the judge and the bots, split into regions."""

from __future__ import annotations

from typing import List

from mb8.isa import BOTS_LIMIT, GRAPHIC_BUFFER_SIZE, MEMORY_BANK_SIZE, STACK_SIZE
from mb8.regions import GeneralRegion, GraphicBufferRegion, RomRegion, StackRegion
from mb8.role import Role


class MemoryContext:
    """The ROM and RAM banks of one program."""

    def __init__(self) -> None:
        self.rom_bank = bytearray(MEMORY_BANK_SIZE)
        self.ram = bytearray(MEMORY_BANK_SIZE)

    def __repr__(self) -> str:
        return "MemoryContext()"

    def stack(self) -> StackRegion:
        """Return the stack at the bottom of RAM."""
        begin, end = 0, STACK_SIZE - 1
        return StackRegion(begin, end, memoryview(self.ram)[begin:end + 1])

    def graphic_buffer(self) -> GraphicBufferRegion:
        """Return the frame buffer at the top of RAM."""
        begin, end = MEMORY_BANK_SIZE - GRAPHIC_BUFFER_SIZE, MEMORY_BANK_SIZE - 1
        return GraphicBufferRegion(begin, end, memoryview(self.ram)[begin:end + 1])

    def general(self) -> GeneralRegion:
        """Return the RAM between the stack and the frame buffer."""
        begin, end = STACK_SIZE, MEMORY_BANK_SIZE - GRAPHIC_BUFFER_SIZE - 1
        return GeneralRegion(begin, end, memoryview(self.ram)[begin:end + 1])

    def rom(self) -> RomRegion:
        """Return the whole ROM bank."""
        begin, end = 0, MEMORY_BANK_SIZE - 1
        return RomRegion(begin, end, memoryview(self.rom_bank)[begin:end + 1])


class Memory:
    """Memory of the judge and every bot slot, with one active context."""

    def __init__(self) -> None:
        self.role = Role()
        self._host = MemoryContext()
        self._bots: List[MemoryContext] = [MemoryContext() for _ in range(BOTS_LIMIT)]

    def __repr__(self) -> str:
        return f"Memory(role={self.role!r})"

    def current_context(self) -> MemoryContext:
        """Return the memory of the active role."""
        if self.role.is_judge():
            return self._host
        return self._bots[self.role.bot]

    def switch_context(self, role: Role) -> None:
        """Make ``role`` the active role."""
        self.role = role

    def host(self) -> MemoryContext:
        """Return the judge's memory."""
        return self._host

    def bot(self, id: int) -> MemoryContext:  # noqa: A002
        """Return the memory of bot ``id``."""
        return self._bots[id]

    def stack(self) -> StackRegion:
        """Return the active stack."""
        return self.current_context().stack()

    def graphic_buffer(self) -> GraphicBufferRegion:
        """Return the active frame buffer."""
        return self.current_context().graphic_buffer()

    def general(self) -> GeneralRegion:
        """Return the active general RAM."""
        return self.current_context().general()

    def rom(self) -> RomRegion:
        """Return the active ROM."""
        return self.current_context().rom()