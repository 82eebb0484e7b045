from pathlib import Path

import pytest

from mb8.cli import LIT_COLOR, UNLIT_COLOR, main, parse_args, render_frame, run_vm
from mb8.memory import MemoryContext


def test_parse_run_with_file_only():
    args = parse_args(["run", "game.bin"])
    assert args.command == "run"
    assert args.file == Path("game.bin")
    assert args.bot is None


def test_parse_run_with_bot():
    args = parse_args(["run", "game.bin", "bot.bin"])
    assert args.file == Path("game.bin")
    assert args.bot == Path("bot.bin")


def test_parse_requires_command():
    with pytest.raises(SystemExit):
        parse_args([])


def test_render_blank_frame():
    frame = render_frame(MemoryContext().graphic_buffer())
    assert len(frame) == 64 * 32
    assert set(frame) == {UNLIT_COLOR}


def test_render_lit_pixels():
    ctx = MemoryContext()
    gfx = ctx.graphic_buffer()
    gfx.write(0, 0x80)
    gfx.write(8, 0x01)
    frame = render_frame(gfx)
    assert frame[0] == LIT_COLOR
    assert frame[1] == UNLIT_COLOR
    assert frame[64 + 7] == LIT_COLOR
    assert frame.count(LIT_COLOR) == 2


def test_run_vm_missing_file_returns(tmp_path):
    assert run_vm(tmp_path / "missing.bin", None) is None


def test_run_vm_missing_bot_returns(tmp_path):
    image = tmp_path / "game.bin"
    image.write_bytes(bytes(4096))
    assert run_vm(image, tmp_path / "missing_bot.bin") is None


def test_run_vm_rejects_short_image(tmp_path):
    image = tmp_path / "short.bin"
    image.write_bytes(b"\x01\x00")
    with pytest.raises(ValueError):
        run_vm(image, None)


def test_main_with_missing_file(tmp_path):
    assert main(["run", str(tmp_path / "missing.bin")]) == 0