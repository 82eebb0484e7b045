"""Decoding of 16-bit MB8 instructions."""

from __future__ import annotations

from typing import Optional

from mb8.isa import (
    Add,
    And,
    Call,
    DecI,
    Draw,
    Halt,
    IncI,
    Jc,
    Jmp,
    Jnc,
    Jnz,
    Jz,
    Ld,
    Ldi,
    LdiI,
    Mov,
    Nop,
    Opcode,
    Or,
    Pop,
    Push,
    Register,
    Ret,
    Shl,
    Shr,
    St,
    Sub,
    Sys,
    Syscall,
    Xor,
)

_REG_REG = {0x0: Mov, 0x1: Add, 0x2: Sub, 0x3: And, 0x4: Or, 0x5: Xor, 0x6: Shr, 0x7: Shl}
_ADDRESSED = {0x3: Jmp, 0x4: Jz, 0x5: Jnz, 0x6: Jc, 0x7: Jnc, 0x8: Call}
_MEMORY = {0x0: Ld, 0x1: St, 0x2: IncI, 0x3: DecI}


def decode_register(reg: int) -> Optional[Register]:
    """Return the register for a 4-bit code, or None if the code names none."""
    try:
        return Register(reg)
    except ValueError:
        return None


def _decode_syscall(code: int) -> Optional[Syscall]:
    try:
        return Syscall(code)
    except ValueError:
        return None


def decode(instruction: int) -> Optional[Opcode]:
    """Decode a 16-bit instruction, returning None if it is not valid."""
    opcode = (instruction >> 12) & 0xF
    a = (instruction >> 8) & 0xF
    b = (instruction >> 4) & 0xF
    c = instruction & 0xF
    addr = instruction & 0xFFF

    if opcode == 0x0:
        if a == 0x0:
            return Nop()
        if a == 0x1:
            return Halt()
        if a == 0x2:
            syscall = _decode_syscall(b)
            src = decode_register(c)
            if syscall is None or src is None:
                return None
            return Sys(syscall=syscall, src=src)
        return None

    if opcode == 0x1:
        kind = _REG_REG.get(a)
        dst, src = decode_register(b), decode_register(c)
        if kind is None or dst is None or src is None:
            return None
        return kind(dst=dst, src=src)

    if opcode == 0x2:
        dst = decode_register(a)
        return None if dst is None else Ldi(dst=dst, value=(b << 4) | c)

    if opcode in _ADDRESSED:
        return _ADDRESSED[opcode](addr=addr)

    if opcode == 0x9:
        if a == 0x0:
            return Ret()
        reg = decode_register(b)
        if reg is None:
            return None
        if a == 0x1:
            return Push(src=reg)
        if a == 0x2:
            return Pop(dst=reg)
        return None

    if opcode == 0xA:
        return LdiI(value=addr)

    if opcode == 0xB:
        kind = _MEMORY.get(a)
        reg = decode_register(b)
        if kind is None or reg is None:
            return None
        return kind(reg)

    if opcode == 0xC:
        x, y = decode_register(a), decode_register(b)
        if x is None or y is None:
            return None
        return Draw(x=x, y=y, height=c)

    return None