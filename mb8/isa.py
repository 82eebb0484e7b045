"""Instruction set of the MB8 machine: registers, flags, syscalls and opcodes."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

MEMORY_BANK_SIZE = 4096
"""Size of one memory bank in bytes."""
STACK_SIZE = 256
"""Size of the stack region in bytes."""
GRAPHIC_BUFFER_SIZE = 256
"""Size of the graphic buffer region in bytes."""
GENERAL_PURPOSE_REGISTERS_COUNT = 8
"""Number of general purpose registers of the CPU."""
BOTS_LIMIT = 4
"""Maximum number of bots that can be loaded."""


class Register(enum.Enum):
    """CPU registers, valued by their 4-bit instruction code."""

    R0 = 0x0
    R1 = 0x1
    R2 = 0x2
    R3 = 0x3
    R4 = 0x4
    R5 = 0x5
    R6 = 0x6
    R7 = 0x7
    I = 0xC  # noqa: E741 - index register
    SP = 0xD
    PC = 0xE
    F = 0xF


class Flag(enum.IntFlag):
    """Bits of the flag register."""

    Z = 0b0000_0001
    N = 0b0000_0010
    C = 0b0000_0100


class Syscall(enum.Enum):
    """System calls available through the SYS instruction."""

    PUTC = 0x0
    YIELD = 0x1


def _check_range(name: str, value: int, bits: int) -> None:
    if not 0 <= value < (1 << bits):
        raise ValueError(f"{name} must fit in {bits} bits, got {value!r}")


# Control group


@dataclass(frozen=True)
class Nop:
    """Do nothing."""


@dataclass(frozen=True)
class Halt:
    """Halt the machine."""


@dataclass(frozen=True)
class Sys:
    """Perform a system call with the value of ``src``."""

    syscall: Syscall
    src: Register


# Register-register group


@dataclass(frozen=True)
class Mov:
    """Copy ``src`` into ``dst``."""

    dst: Register
    src: Register


@dataclass(frozen=True)
class Add:
    """Store ``dst + src`` in ``dst``."""

    dst: Register
    src: Register


@dataclass(frozen=True)
class Sub:
    """Store ``dst - src`` in ``dst``."""

    dst: Register
    src: Register


@dataclass(frozen=True)
class And:
    """Store ``dst & src`` in ``dst``."""

    dst: Register
    src: Register


@dataclass(frozen=True)
class Or:
    """Store ``dst | src`` in ``dst``."""

    dst: Register
    src: Register


@dataclass(frozen=True)
class Xor:
    """Store ``dst ^ src`` in ``dst``."""

    dst: Register
    src: Register


@dataclass(frozen=True)
class Shr:
    """Shift ``dst`` right by ``src`` bits."""

    dst: Register
    src: Register


@dataclass(frozen=True)
class Shl:
    """Shift ``dst`` left by ``src`` bits."""

    dst: Register
    src: Register


# Load


@dataclass(frozen=True)
class Ldi:
    """Load an 8-bit immediate into ``dst``."""

    dst: Register
    value: int

    def __post_init__(self) -> None:
        _check_range("value", self.value, 8)


# Jumps


@dataclass(frozen=True)
class _Jump:
    addr: int

    def __post_init__(self) -> None:
        _check_range("addr", self.addr, 16)


@dataclass(frozen=True)
class Jmp(_Jump):
    """Jump to ``addr``."""


@dataclass(frozen=True)
class Jz(_Jump):
    """Jump to ``addr`` if the zero flag is set."""


@dataclass(frozen=True)
class Jnz(_Jump):
    """Jump to ``addr`` if the zero flag is clear."""


@dataclass(frozen=True)
class Jc(_Jump):
    """Jump to ``addr`` if the carry flag is set."""


@dataclass(frozen=True)
class Jnc(_Jump):
    """Jump to ``addr`` if the carry flag is clear."""


# Stack


@dataclass(frozen=True)
class Call(_Jump):
    """Call the subroutine at ``addr``."""


@dataclass(frozen=True)
class Ret:
    """Return from a subroutine."""


@dataclass(frozen=True)
class Push:
    """Push ``src`` onto the stack."""

    src: Register


@dataclass(frozen=True)
class Pop:
    """Pop the top of the stack into ``dst``."""

    dst: Register


# Memory


@dataclass(frozen=True)
class LdiI:
    """Set the index register ``I`` to ``value``."""

    value: int

    def __post_init__(self) -> None:
        _check_range("value", self.value, 16)


@dataclass(frozen=True)
class Ld:
    """Load the byte at address ``I`` into ``dst``."""

    dst: Register


@dataclass(frozen=True)
class St:
    """Store ``src`` at address ``I``."""

    src: Register


@dataclass(frozen=True)
class IncI:
    """Increase ``I`` by the value of ``src``."""

    src: Register


@dataclass(frozen=True)
class DecI:
    """Decrease ``I`` by the value of ``src``."""

    src: Register


# Graphics


@dataclass(frozen=True)
class Draw:
    """Draw a sprite of ``height`` rows at (``x``, ``y``)."""

    x: Register
    y: Register
    height: int

    def __post_init__(self) -> None:
        _check_range("height", self.height, 8)


Opcode = Union[
    Nop, Halt, Sys,
    Mov, Add, Sub, And, Or, Xor, Shr, Shl,
    Ldi,
    Jmp, Jz, Jnz, Jc, Jnc,
    Call, Ret, Push, Pop,
    LdiI, Ld, St, IncI, DecI,
    Draw,
]