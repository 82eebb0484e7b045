import pytest

from mb8.encode import encode_program
from mb8.isa import (
    MEMORY_BANK_SIZE,
    Add,
    Halt,
    Ldi,
    Register,
)
from mb8.role import Role
from mb8.vm import VirtualMachine


def _image(program, ram=b""):
    code = encode_program(program)
    return code + bytes(MEMORY_BANK_SIZE - len(code)) + ram


def test_end_of_memory():
    vm = VirtualMachine()
    vm.registers.write(Register.PC, 4095)
    vm.step()
    assert vm.halted


def test_run_program_until_halt():
    vm = VirtualMachine()
    vm.load_mem(_image([Ldi(Register.R0, 0x55), Halt()]))
    vm.run()
    assert vm.halted
    assert vm.registers.read(Register.R0) == 0x55
    assert vm.registers.read(Register.PC) == 4


def test_run_arithmetic_program():
    vm = VirtualMachine()
    program = [Ldi(Register.R0, 5), Ldi(Register.R1, 3), Add(Register.R0, Register.R1), Halt()]
    vm.load_mem(_image(program))
    vm.run()
    assert vm.registers.read(Register.R0) == 8


def test_invalid_opcode_halts():
    vm = VirtualMachine()
    vm.load_mem(b"\xff\x00" + bytes(MEMORY_BANK_SIZE - 2))
    vm.step()
    assert vm.halted
    assert vm.registers.read(Register.PC) == 2


def test_empty_rom_runs_to_end_of_memory():
    vm = VirtualMachine()
    vm.run()
    assert vm.halted
    assert vm.registers.read(Register.PC) >= MEMORY_BANK_SIZE


def test_load_mem_places_rom_and_ram():
    vm = VirtualMachine()
    vm.load_mem(_image([Halt()], ram=b"\x12\x34"))
    assert vm.mem.host().rom().next_instruction(0) == 0x0100
    general = vm.mem.host().general()
    assert general.read(0) == 0x12
    assert general.read(1) == 0x34


def test_load_mem_rejects_short_image():
    vm = VirtualMachine()
    with pytest.raises(ValueError):
        vm.load_mem(b"\x00\x01")


def test_load_bot_fills_next_slot():
    vm = VirtualMachine()
    vm.load_bot(_image([Halt()], ram=b"\x07"))
    assert vm.bots == 1
    assert vm.mem.bot(0).rom().next_instruction(0) == 0x0100
    assert vm.mem.bot(0).general().read(0) == 0x07
    assert vm.mem.host().rom().next_instruction(0) == 0x0000


def test_load_rom_and_ram_static():
    vm = VirtualMachine()
    ctx = vm.mem.host()
    VirtualMachine.load_rom(ctx, b"\x01\x00")
    VirtualMachine.load_ram(ctx, b"\x09")
    assert ctx.rom().read(0) == 0x01
    assert ctx.general().read(0) == 0x09


def test_execute_halt():
    vm = VirtualMachine()
    vm.execute(Halt())
    assert vm.halted


def test_execute_rejects_unknown_instruction():
    vm = VirtualMachine()
    with pytest.raises(TypeError):
        vm.execute("not an opcode")


def test_step_clears_redraw():
    vm = VirtualMachine()
    vm.redraw = True
    vm.step()
    assert vm.redraw is False


def test_switch_context_selects_bot_registers():
    vm = VirtualMachine()
    vm.registers.write(Register.R2, 9)
    vm.switch_context(Role(0))
    assert vm.registers.read(Register.R2) == 0
    vm.switch_context(Role())
    assert vm.registers.read(Register.R2) == 9