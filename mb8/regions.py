"""Views onto parts of a memory bank: general RAM, graphics, ROM and stack."""

from __future__ import annotations

from typing import Tuple, Union

_Buffer = Union[bytearray, memoryview]

_BYTES_PER_ROW = 8


class StackError(Exception):
    """Base class of stack errors."""


class StackOverflowError(StackError):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(StackError):
    """Raised when popping from an empty stack."""


class MemoryRegion:
    """A window of ``data`` covering addresses ``begin`` to ``end`` inclusive.

    Addresses are taken relative to ``begin`` unless a subclass says otherwise.
    """

    _relative = True

    def __init__(self, begin: int, end: int, data: _Buffer) -> None:
        self.begin = begin
        self.end = end
        self._data = memoryview(data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(begin={self.begin}, end={self.end})"

    def _slot(self, index: int) -> int:
        if not 0 <= index < len(self._data):
            raise IndexError(f"address {index} outside {self!r}")
        return index

    def _index(self, addr: int) -> int:
        return self._slot(addr - self.begin if self._relative else addr)

    def read(self, addr: int) -> int:
        """Return the byte at ``addr``."""
        return self._data[self._index(addr)]

    def write(self, addr: int, value: int) -> None:
        """Store the byte ``value`` at ``addr``."""
        self._data[self._index(addr)] = value

    def size(self) -> int:
        """Return the number of addresses the region spans."""
        return self.end - self.begin + 1


class GeneralRegion(MemoryRegion):
    """General purpose RAM, addressed from the start of its window."""

    _relative = False


class GraphicBufferRegion(MemoryRegion):
    """A 64x32 monochrome frame buffer, one bit per pixel, MSB first."""

    _relative = False

    def get_pixel(self, x: int, y: int) -> bool:
        """Return True if the pixel at (``x``, ``y``) is lit."""
        byte = self.read(y * _BYTES_PER_ROW + x // 8)
        return bool(byte & (0x80 >> (x % 8)))


class RomRegion(MemoryRegion):
    """Program memory."""

    def next_instruction(self, pc: int) -> int:
        """Return the big-endian 16-bit instruction at ``pc``."""
        hi = self._data[self._slot(pc)]
        lo = self._data[self._slot(pc + 1)]
        return (hi << 8) | lo


class StackRegion(MemoryRegion):
    """An upward growing stack; the stack pointer indexes the next free byte."""

    def push_u8(self, sp: int, value: int) -> int:
        """Push a byte and return the new stack pointer."""
        if sp >= self.end:
            raise StackOverflowError(f"cannot push a byte at {sp}")
        self._data[self._slot(sp)] = value
        return sp + 1

    def pop_u8(self, sp: int) -> Tuple[int, int]:
        """Pop a byte, returning it and the new stack pointer."""
        if sp <= self.begin:
            raise StackUnderflowError(f"cannot pop a byte at {sp}")
        return self._data[self._slot(sp - 1)], sp - 1

    def push_u16(self, sp: int, value: int) -> int:
        """Push a big-endian 16-bit value and return the new stack pointer."""
        if sp >= self.end - 2:
            raise StackOverflowError(f"cannot push a word at {sp}")
        self._slot(sp)
        self._slot(sp + 1)
        self._data[sp:sp + 2] = value.to_bytes(2, "big")
        return sp + 2

    def pop_u16(self, sp: int) -> Tuple[int, int]:
        """Pop a big-endian 16-bit value, returning it and the new stack pointer."""
        if sp < self.begin + 2:
            raise StackUnderflowError(f"cannot pop a word at {sp}")
        hi = self._data[self._slot(sp - 2)]
        lo = self._data[self._slot(sp - 1)]
        return (hi << 8) | lo, sp - 2