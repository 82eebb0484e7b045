import pytest

from mb8.isa import Register, Syscall
from mb8.machine import Machine
from mb8.ops.system import putc, sys, yield_
from mb8.role import JUDGE, Role


def test_putc_prints_register_value(capsys):
    machine = Machine()
    machine.registers.write(Register.R0, ord("A"))
    putc(machine, Register.R0)
    assert capsys.readouterr().out == "A"


def test_sys_dispatches_putc(capsys):
    machine = Machine()
    machine.registers.write(Register.R1, ord("z"))
    sys(machine, Syscall.PUTC, Register.R1)
    assert capsys.readouterr().out == "z"


def test_yield_from_judge_switches_to_bot():
    machine = Machine()
    machine.bots = 2
    machine.registers.write(Register.R0, 1)
    yield_(machine, Register.R0)
    assert machine.role == Role(1)
    assert machine.mem.role == Role(1)
    assert machine.registers.role == Role(1)


def test_yield_uses_separate_bot_registers():
    machine = Machine()
    machine.bots = 1
    machine.registers.write(Register.R3, 42)
    machine.registers.write(Register.R0, 0)
    sys(machine, Syscall.YIELD, Register.R0)
    assert machine.registers.read(Register.R3) == 0


def test_yield_to_unloaded_bot_raises():
    machine = Machine()
    machine.bots = 1
    machine.registers.write(Register.R0, 1)
    with pytest.raises(ValueError):
        yield_(machine, Register.R0)
    assert machine.role == JUDGE


def test_yield_from_bot_returns_registers_to_judge():
    machine = Machine()
    machine.bots = 1
    machine.switch_context(Role(0))
    yield_(machine, Register.R0)
    assert machine.registers.role == JUDGE
    assert machine.role == Role(0)