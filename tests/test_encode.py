import pytest

from mb8.decode import decode
from mb8.encode import encode, encode_program, encode_register
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


@pytest.mark.parametrize(
    "register, code",
    [
        (Register.R0, 0x0),
        (Register.R1, 0x1),
        (Register.R2, 0x2),
        (Register.R3, 0x3),
        (Register.R4, 0x4),
        (Register.R5, 0x5),
        (Register.R6, 0x6),
        (Register.R7, 0x7),
        (Register.SP, 0xD),
        (Register.PC, 0xE),
        (Register.F, 0xF),
    ],
)
def test_encode_register(register, code):
    assert encode_register(register) == code


def test_encode_program():
    assert encode_program([Nop(), Halt()]) == bytes([0x00, 0x00, 0x01, 0x00])


def test_encode_program_empty():
    assert encode_program([]) == b""


ENCODED = [
    (Nop(), 0x0000),
    (Halt(), 0x0100),
    (Sys(syscall=Syscall.PUTC, src=Register.R1), 0x0201),
    (Sys(syscall=Syscall.YIELD, src=Register.R1), 0x0211),
    (Mov(dst=Register.R0, src=Register.R1), 0x1001),
    (Add(dst=Register.R0, src=Register.R1), 0x1101),
    (Sub(dst=Register.R0, src=Register.R1), 0x1201),
    (And(dst=Register.R0, src=Register.R1), 0x1301),
    (Or(dst=Register.R0, src=Register.R1), 0x1401),
    (Xor(dst=Register.R0, src=Register.R1), 0x1501),
    (Shr(dst=Register.R0, src=Register.R1), 0x1601),
    (Shl(dst=Register.R0, src=Register.R1), 0x1701),
    (Ldi(dst=Register.R0, value=0x12), 0x2012),
    (Jmp(addr=0x123), 0x3123),
    (Jz(addr=0x123), 0x4123),
    (Jnz(addr=0x123), 0x5123),
    (Jc(addr=0x123), 0x6123),
    (Jnc(addr=0x123), 0x7123),
    (Call(addr=0x123), 0x8123),
    (Ret(), 0x9000),
    (Push(src=Register.R1), 0x9110),
    (Pop(dst=Register.R1), 0x9210),
    (LdiI(value=0x123), 0xA123),
    (Ld(dst=Register.R1), 0xB010),
    (St(src=Register.R1), 0xB110),
    (IncI(src=Register.R1), 0xB210),
    (DecI(src=Register.R1), 0xB310),
    (Draw(x=Register.R1, y=Register.R2, height=0x3), 0xC123),
]


@pytest.mark.parametrize("opcode, expected", ENCODED)
def test_encode(opcode, expected):
    assert encode(opcode) == expected


@pytest.mark.parametrize("opcode", [opcode for opcode, _ in ENCODED])
def test_round_trip(opcode):
    assert decode(encode(opcode)) == opcode


def test_encode_address_is_masked_to_12_bits():
    assert encode(Jmp(addr=0xF123)) == 0x3123


def test_encode_draw_height_is_masked_to_4_bits():
    assert encode(Draw(x=Register.R1, y=Register.R2, height=0x13)) == 0xC123


def test_encode_unknown_opcode():
    with pytest.raises(TypeError):
        encode("not an opcode")