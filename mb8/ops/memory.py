"""Index register, memory access and sprite drawing instructions."""

from __future__ import annotations

from mb8.isa import Register
from mb8.machine import Machine

SCREEN_WIDTH = 64
SCREEN_HEIGHT = 32
BYTES_PER_ROW = SCREEN_WIDTH // 8


def ldi_i(machine: Machine, value: int) -> None:
    """Set the index register to ``value``."""
    machine.registers.write(Register.I, value)


def ld(machine: Machine, dst: Register) -> None:
    """Load the byte at address ``I`` of general RAM into ``dst``."""
    addr = machine.registers.read(Register.I)
    machine.registers.write(dst, machine.mem.general().read(addr))


def st(machine: Machine, src: Register) -> None:
    """Store the low byte of ``src`` at address ``I`` of general RAM."""
    addr = machine.registers.read(Register.I)
    machine.mem.general().write(addr, machine.registers.read(src) & 0xFF)


def inc_i(machine: Machine, src: Register) -> None:
    """Add ``src`` to the index register, wrapping at 16 bits."""
    index = machine.registers.read(Register.I)
    machine.registers.write(Register.I, (index + machine.registers.read(src)) & 0xFFFF)


def dec_i(machine: Machine, src: Register) -> None:
    """Subtract ``src`` from the index register, wrapping at 16 bits."""
    index = machine.registers.read(Register.I)
    machine.registers.write(Register.I, (index - machine.registers.read(src)) & 0xFFFF)


def draw(machine: Machine, x_reg: Register, y_reg: Register, height: int) -> None:
    """XOR a sprite of ``height`` rows read from ``I`` onto the screen.

    The sprite is placed at the coordinates held in ``x_reg`` and ``y_reg``
    and wraps around the screen edges.
    """
    machine.redraw = True
    sprite_addr = machine.registers.read(Register.I)
    x0 = machine.registers.read(x_reg)
    y0 = machine.registers.read(y_reg)
    general = machine.mem.general()
    gfx = machine.mem.graphic_buffer()

    for row in range(height):
        sprite_byte = general.read(sprite_addr + row)
        if not sprite_byte:
            continue
        py = (y0 + row) % SCREEN_HEIGHT
        for bit in range(8):
            if not sprite_byte & (0x80 >> bit):
                continue
            px = (x0 + bit) % SCREEN_WIDTH
            byte_index = py * BYTES_PER_ROW + px // 8
            gfx.write(byte_index, gfx.read(byte_index) ^ (0x80 >> (px % 8)))