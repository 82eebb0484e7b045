"""System call instructions."""

from __future__ import annotations

from mb8.isa import Register, Syscall
from mb8.machine import Machine
from mb8.role import JUDGE, Role


def sys(machine: Machine, syscall: Syscall, src: Register) -> None:
    """Dispatch the system call ``syscall`` with argument register ``src``."""
    if syscall is Syscall.PUTC:
        putc(machine, src)
    elif syscall is Syscall.YIELD:
        yield_(machine, src)
    else:
        raise ValueError(f"unknown syscall {syscall!r}")


def putc(machine: Machine, src: Register) -> None:
    """Write the low byte of ``src`` to standard output as a character."""
    value = machine.registers.read(src) & 0xFF
    print(chr(value), end="", flush=True)


def yield_(machine: Machine, src: Register) -> None:
    """Hand control between the judge and a bot.

    The judge switches to the bot whose id is held in ``src``; a bot hands
    the registers back to the judge.
    """
    if machine.role.is_judge():
        bot_id = machine.registers.read(src)
        if bot_id >= machine.bots:
            raise ValueError(
                f"bot {bot_id} is not loaded ({machine.bots} bots available)"
            )
        machine.switch_context(Role(bot_id))
    else:
        machine.registers.switch_context(JUDGE)