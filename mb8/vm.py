"""The MB8 virtual machine: program loading, fetch, decode and execute."""

from __future__ import annotations

import logging

from mb8.decode import decode
from mb8.isa import (
    MEMORY_BANK_SIZE,
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
from mb8.machine import Machine
from mb8.memory import MemoryContext
from mb8.ops import alu, flow, system
from mb8.ops import memory as memory_ops

logger = logging.getLogger(__name__)


class VirtualMachine(Machine):
    """An MB8 machine that loads images and runs them."""

    @staticmethod
    def load_rom(ctx: MemoryContext, data: bytes) -> None:
        """Copy ``data`` to the start of the ROM of ``ctx``."""
        rom = ctx.rom()
        for addr, value in enumerate(data):
            rom.write(addr, value)

    @staticmethod
    def load_ram(ctx: MemoryContext, data: bytes) -> None:
        """Copy ``data`` to the start of the general RAM of ``ctx``."""
        general = ctx.general()
        for addr, value in enumerate(data):
            general.write(addr, value)

    @staticmethod
    def _load_image(ctx: MemoryContext, data: bytes) -> None:
        if len(data) < MEMORY_BANK_SIZE:
            raise ValueError(
                f"image must hold at least {MEMORY_BANK_SIZE} bytes of ROM, "
                f"got {len(data)}"
            )
        VirtualMachine.load_rom(ctx, data[:MEMORY_BANK_SIZE])
        VirtualMachine.load_ram(ctx, data[MEMORY_BANK_SIZE:])

    def load_mem(self, data: bytes) -> None:
        """Load the judge image: one ROM bank followed by general RAM."""
        self._load_image(self.mem.host(), data)

    def load_bot(self, data: bytes) -> None:
        """Load a bot image into the next free bot slot."""
        self._load_image(self.mem.bot(self.bots), data)
        self.bots += 1

    def execute(self, instruction: Opcode) -> None:
        """Execute a single decoded instruction."""
        match instruction:
            case Nop():
                alu.nop(self)
            case Halt():
                alu.halt(self)
            case Sys(syscall, src):
                system.sys(self, syscall, src)
            case Mov(dst, src):
                alu.mov(self, dst, src)
            case Add(dst, src):
                alu.add(self, dst, src)
            case Sub(dst, src):
                alu.sub(self, dst, src)
            case And(dst, src):
                alu.and_(self, dst, src)
            case Or(dst, src):
                alu.or_(self, dst, src)
            case Xor(dst, src):
                alu.xor(self, dst, src)
            case Shr(dst, src):
                alu.shr(self, dst, src)
            case Shl(dst, src):
                alu.shl(self, dst, src)
            case Ldi(dst, value):
                alu.ldi(self, dst, value)
            case Jmp(addr):
                flow.jmp(self, addr)
            case Jz(addr):
                flow.jz(self, addr)
            case Jnz(addr):
                flow.jnz(self, addr)
            case Jc(addr):
                flow.jc(self, addr)
            case Jnc(addr):
                flow.jnc(self, addr)
            case Call(addr):
                flow.call(self, addr)
            case Ret():
                flow.ret(self)
            case Push(src):
                flow.push(self, src)
            case Pop(dst):
                flow.pop(self, dst)
            case LdiI(value):
                memory_ops.ldi_i(self, value)
            case Ld(dst):
                memory_ops.ld(self, dst)
            case St(src):
                memory_ops.st(self, src)
            case IncI(src):
                memory_ops.inc_i(self, src)
            case DecI(src):
                memory_ops.dec_i(self, src)
            case Draw(x, y, height):
                memory_ops.draw(self, x, y, height)
            case _:
                raise TypeError(f"cannot execute {instruction!r}")

    def step(self) -> None:
        """Fetch, decode and execute one instruction; halt on bad input."""
        self.redraw = False
        pc = self.registers.read(Register.PC)
        self.registers.write(Register.PC, min(pc + 2, 0xFFFF))

        if pc >= MEMORY_BANK_SIZE - 1:
            self.halted = True
            return

        instruction = self.mem.rom().next_instruction(pc)
        opcode = decode(instruction)
        if opcode is None:
            self.halted = True
            return

        logger.debug("%d:\t(%d)", pc, instruction)
        logger.debug("%r", opcode)
        logger.debug("%s", self.registers)

        self.execute(opcode)

    def run(self) -> None:
        """Step until the machine halts."""
        while not self.halted:
            self.step()