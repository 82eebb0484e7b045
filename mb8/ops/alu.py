"""Arithmetic, logic, move and control instructions."""

from __future__ import annotations

from mb8.isa import Flag, Register
from mb8.machine import Machine


def _flags(result: int, *, carry: bool = False) -> Flag:
    flags = Flag(0)
    if result & 0xFF == 0:
        flags |= Flag.Z
    if carry:
        flags |= Flag.C
    if result & 0x80:
        flags |= Flag.N
    return flags


def _store(machine: Machine, dst: Register, result: int, flags: Flag) -> None:
    machine.registers.write(dst, result)
    machine.registers.write(Register.F, int(flags))


def nop(machine: Machine) -> None:
    """Do nothing."""


def halt(machine: Machine) -> None:
    """Stop the machine."""
    machine.halted = True


def mov(machine: Machine, dst: Register, src: Register) -> None:
    """Copy ``src`` into ``dst``."""
    machine.registers.write(dst, machine.registers.read(src))


def add(machine: Machine, dst: Register, src: Register) -> None:
    """Add ``src`` to ``dst``, setting Z, C and N."""
    result = (machine.registers.read(dst) + machine.registers.read(src)) & 0xFFFF
    _store(machine, dst, result, _flags(result, carry=result > 0xFF))


def sub(machine: Machine, dst: Register, src: Register) -> None:
    """Subtract ``src`` from ``dst`` as bytes, setting Z, C and N."""
    a = machine.registers.read(dst) & 0xFF
    b = machine.registers.read(src) & 0xFF
    result = (a - b) & 0xFF
    _store(machine, dst, result, _flags(result, carry=a < b))


def and_(machine: Machine, dst: Register, src: Register) -> None:
    """Bitwise AND ``src`` into ``dst``, setting Z and N."""
    result = machine.registers.read(dst) & machine.registers.read(src)
    _store(machine, dst, result, _flags(result))


def or_(machine: Machine, dst: Register, src: Register) -> None:
    """Bitwise OR ``src`` into ``dst``, setting Z and N."""
    result = machine.registers.read(dst) | machine.registers.read(src)
    _store(machine, dst, result, _flags(result))


def xor(machine: Machine, dst: Register, src: Register) -> None:
    """Bitwise XOR ``src`` into ``dst``, setting Z and N."""
    result = machine.registers.read(dst) ^ machine.registers.read(src)
    _store(machine, dst, result, _flags(result))


def shr(machine: Machine, dst: Register, src: Register) -> None:
    """Shift ``dst`` right by ``src`` bits (modulo 16), setting Z, C and N."""
    shift = machine.registers.read(src) % 16
    result = machine.registers.read(dst) >> shift
    _store(machine, dst, result, _flags(result, carry=result > 0xFF))


def shl(machine: Machine, dst: Register, src: Register) -> None:
    """Shift ``dst`` left by ``src`` bits (modulo 16), setting Z, C and N."""
    shift = machine.registers.read(src) % 16
    result = (machine.registers.read(dst) << shift) & 0xFFFF
    _store(machine, dst, result, _flags(result, carry=result > 0xFF))


def ldi(machine: Machine, dst: Register, value: int) -> None:
    """Load the immediate ``value`` into ``dst``."""
    machine.registers.write(dst, value & 0xFF)