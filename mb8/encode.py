"""Encoding of MB8 opcodes into 16-bit instructions."""

from __future__ import annotations

from typing import Iterable

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
    Xor,
)

_REG_REG_BASE = {
    Mov: 0x1000,
    Add: 0x1100,
    Sub: 0x1200,
    And: 0x1300,
    Or: 0x1400,
    Xor: 0x1500,
    Shr: 0x1600,
    Shl: 0x1700,
}

_ADDRESSED_BASE = {
    Jmp: 0x3000,
    Jz: 0x4000,
    Jnz: 0x5000,
    Jc: 0x6000,
    Jnc: 0x7100,
    Call: 0x8000,
}

_SINGLE_REG_BASE = {
    Push: 0x9100,
    Pop: 0x9200,
    Ld: 0xB000,
    St: 0xB100,
    IncI: 0xB200,
    DecI: 0xB300,
}


def encode_register(register: Register) -> int:
    """Return the 4-bit code of a register."""
    return register.value


def encode(opcode: Opcode) -> int:
    """Encode an opcode into a 16-bit instruction."""
    kind = type(opcode)

    if kind is Nop:
        return 0x0000
    if kind is Halt:
        return 0x0100
    if kind is Ret:
        return 0x9000
    if kind is Sys:
        return 0x0200 | (opcode.syscall.value << 4) | encode_register(opcode.src)
    if kind in _REG_REG_BASE:
        return (
            _REG_REG_BASE[kind]
            | (encode_register(opcode.dst) << 4)
            | encode_register(opcode.src)
        )
    if kind is Ldi:
        return 0x2000 | (encode_register(opcode.dst) << 4) | opcode.value
    if kind in _ADDRESSED_BASE:
        return _ADDRESSED_BASE[kind] | (opcode.addr & 0xFFF)
    if kind is LdiI:
        return 0xA000 | (opcode.value & 0xFFF)
    if kind in _SINGLE_REG_BASE:
        reg = opcode.src if hasattr(opcode, "src") else opcode.dst
        return _SINGLE_REG_BASE[kind] | (encode_register(reg) << 4)
    if kind is Draw:
        return (
            0xC000
            | (encode_register(opcode.x) << 8)
            | (encode_register(opcode.y) << 4)
            | (opcode.height & 0xF)
        )
    raise TypeError(f"cannot encode {opcode!r}")


def encode_program(program: Iterable[Opcode]) -> bytes:
    """Encode a sequence of opcodes into big-endian machine code."""
    return b"".join(encode(opcode).to_bytes(2, "big") for opcode in program)