# mb8

A small 8-bit virtual machine. The package holds the instruction set
(registers, flags, syscalls, opcodes), a 16-bit instruction encoder and
decoder, the memory and register model, and an interpreter that draws to a
64x32 monochrome display.

## Installing

```
pip install .
```

The display window uses `pygame`. To run the tests:

```
pip install .[test]
pytest
```

## Running a program

```
mb8 run program.bin
mb8 run judge.bin bot.bin
```

An image holds 4096 bytes of ROM followed by the data that is loaded into
general RAM; an image shorter than 4096 bytes is rejected with a
`ValueError`. If a file cannot be read, the command returns without running
anything. The optional second file is a bot image in the same layout, loaded
into the first bot slot.

The program runs in a 640x320 window (the 64x32 screen scaled ten times).
The window is redrawn after every `Draw` instruction and otherwise every 121
steps. It closes when the machine halts, when it meets an instruction it
cannot decode, when the program counter runs off the end of ROM, or when the
window is closed.

## Using the library

```python
from mb8.isa import Ldi, Add, Halt, Register
from mb8.encode import encode, encode_program
from mb8.decode import decode
from mb8.vm import VirtualMachine

program = [
    Ldi(dst=Register.R0, value=5),
    Ldi(dst=Register.R1, value=3),
    Add(dst=Register.R0, src=Register.R1),
    Halt(),
]
code = encode_program(program)
image = code.ljust(4096, b"\x00")

vm = VirtualMachine()
vm.load_mem(image)
vm.run()
print(vm.registers.read(Register.R0))  # 8

assert decode(encode(Halt())) == Halt()
```

The modules:

* `mb8.isa`: `Register`, `Flag`, `Syscall`, the opcode dataclasses (`Nop`,
  `Halt`, `Sys`, `Mov`, `Add`, `Sub`, `And`, `Or`, `Xor`, `Shr`, `Shl`, `Ldi`,
  `Jmp`, `Jz`, `Jnz`, `Jc`, `Jnc`, `Call`, `Ret`, `Push`, `Pop`, `LdiI`, `Ld`,
  `St`, `IncI`, `DecI`, `Draw`) and the size constants.
* `mb8.encode`: `encode`, `encode_register`, `encode_program`.
* `mb8.decode`: `decode` and `decode_register`, which return `None` for
  codes that name no instruction or register.
* `mb8.regions`, `mb8.memory`, `mb8.registers`, `mb8.role`: the memory
  regions, memory banks, register files and the judge/bot roles. Stack
  regions raise `StackOverflowError` and `StackUnderflowError`.
* `mb8.machine` and `mb8.vm`: `Machine` holds the state; `VirtualMachine`
  adds `load_mem`, `load_bot`, `execute`, `step` and `run`.
* `mb8.ops.alu`, `mb8.ops.flow`, `mb8.ops.memory`, `mb8.ops.system`: the
  instructions, as functions taking the machine.

`VirtualMachine.step` logs each instruction and the registers at debug level
through the `mb8.vm` logger.

## Memory layout

Each context (the judge and up to four bots) has its own registers and two
4096-byte banks:

* ROM: the program, read two bytes at a time, big-endian.
* RAM: the stack at 0-255, general memory at 256-3839, and the graphic buffer
  at 3840-4095 (64x32 pixels, one bit each, most significant bit first).

`Ld`, `St` and sprite data for `Draw` address general memory from its own
start. Arithmetic sets the zero, negative and carry flags in register `F`;
the conditional jumps `Jz`, `Jnz`, `Jc` and `Jnc` test them. Stack overflow
or underflow on `Call`, `Ret`, `Push` or `Pop` halts the machine.

## System calls

* `PUTC` writes the low byte of its register to standard output as a
  character.
* `YIELD` from the judge switches memory and registers to the bot whose id is
  in its register, raising `ValueError` if no such bot is loaded. From a bot
  it switches the registers back to the judge's.

## What it does not do

There is no assembler: programs are built from the opcode classes with
`encode_program`, or written as raw images. The machine takes no keyboard
input, `Draw` does not report sprite collisions, and the window shows only
the judge's graphic buffer.