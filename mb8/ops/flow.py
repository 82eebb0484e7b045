"""Jump, subroutine and stack instructions."""

from __future__ import annotations

from mb8.isa import Flag, Register
from mb8.machine import Machine
from mb8.regions import StackError


def _flag_set(machine: Machine, flag: Flag) -> bool:
    return bool(machine.registers.read(Register.F) & flag)


def jmp(machine: Machine, addr: int) -> None:
    """Jump to ``addr``."""
    machine.registers.write(Register.PC, addr)


def jz(machine: Machine, addr: int) -> None:
    """Jump to ``addr`` if the zero flag is set."""
    if _flag_set(machine, Flag.Z):
        machine.registers.write(Register.PC, addr)


def jnz(machine: Machine, addr: int) -> None:
    """Jump to ``addr`` if the zero flag is clear."""
    if not _flag_set(machine, Flag.Z):
        machine.registers.write(Register.PC, addr)


def jc(machine: Machine, addr: int) -> None:
    """Jump to ``addr`` if the carry flag is set."""
    if _flag_set(machine, Flag.C):
        machine.registers.write(Register.PC, addr)


def jnc(machine: Machine, addr: int) -> None:
    """Jump to ``addr`` if the carry flag is clear."""
    if not _flag_set(machine, Flag.C):
        machine.registers.write(Register.PC, addr)


def call(machine: Machine, addr: int) -> None:
    """Push the program counter and jump to ``addr``; halt on stack overflow."""
    sp = machine.registers.read(Register.SP)
    pc = machine.registers.read(Register.PC)
    try:
        sp = machine.mem.stack().push_u16(sp, pc)
    except StackError:
        machine.halted = True
        return
    machine.registers.write(Register.SP, sp)
    machine.registers.write(Register.PC, addr)


def ret(machine: Machine) -> None:
    """Pop the return address into the program counter; halt on underflow."""
    sp = machine.registers.read(Register.SP)
    try:
        addr, sp = machine.mem.stack().pop_u16(sp)
    except StackError:
        machine.halted = True
        return
    machine.registers.write(Register.SP, sp)
    machine.registers.write(Register.PC, addr)


def push(machine: Machine, src: Register) -> None:
    """Push the low byte of ``src``; halt on stack overflow."""
    sp = machine.registers.read(Register.SP)
    value = machine.registers.read(src) & 0xFF
    try:
        sp = machine.mem.stack().push_u8(sp, value)
    except StackError:
        machine.halted = True
        return
    machine.registers.write(Register.SP, sp)


def pop(machine: Machine, dst: Register) -> None:
    """Pop a byte into ``dst``; halt on stack underflow."""
    sp = machine.registers.read(Register.SP)
    try:
        value, sp = machine.mem.stack().pop_u8(sp)
    except StackError:
        machine.halted = True
        return
    machine.registers.write(Register.SP, sp)
    machine.registers.write(dst, value)