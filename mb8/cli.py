"""Command line front end: run an MB8 image in a window."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional, Sequence

from mb8.regions import GraphicBufferRegion
from mb8.vm import VirtualMachine

SCREEN_WIDTH = 64
SCREEN_HEIGHT = 32
SCALE = 10
LIT_COLOR = 0x006ABFC6
UNLIT_COLOR = 0x0050459B
FRAME_INTERVAL = 120


def parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    """Parse the command line."""
    parser = argparse.ArgumentParser(prog="mb8", description="MB8 VM")
    commands = parser.add_subparsers(dest="command", required=True)
    run = commands.add_parser("run", help="Run an executable file for the VM")
    run.add_argument("file", type=Path, help="Path to the executable file")
    run.add_argument("bot", type=Path, nargs="?", default=None, help="Path to the bot file")
    return parser.parse_args(argv)


def render_frame(gfx: GraphicBufferRegion) -> List[int]:
    """Return the screen as row-major 0xRRGGBB pixels."""
    return [
        LIT_COLOR if gfx.get_pixel(x, y) else UNLIT_COLOR
        for y in range(SCREEN_HEIGHT)
        for x in range(SCREEN_WIDTH)
    ]


def run_vm(file: Path, bot: Optional[Path]) -> None:
    """Load ``file`` (and optionally ``bot``) and run it in a window."""
    try:
        source = Path(file).read_bytes()
    except OSError:
        return
    vm = VirtualMachine()
    vm.load_mem(source)
    if bot is not None:
        try:
            bot_source = Path(bot).read_bytes()
        except OSError:
            return
        vm.load_bot(bot_source)

    import pygame

    pygame.init()
    try:
        try:
            screen = pygame.display.set_mode((SCREEN_WIDTH * SCALE, SCREEN_HEIGHT * SCALE))
        except pygame.error:
            return
        pygame.display.set_caption("MB8")
        surface = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))

        is_open = True
        steps = 0
        while not vm.halted and is_open:
            vm.step()

            steps += 1
            if not vm.redraw and steps <= FRAME_INTERVAL:
                continue
            steps = 0

            if any(event.type == pygame.QUIT for event in pygame.event.get()):
                is_open = False
                continue

            frame = render_frame(vm.mem.host().graphic_buffer())
            for index, color in enumerate(frame):
                y, x = divmod(index, SCREEN_WIDTH)
                surface.set_at((x, y), pygame.Color((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF))
            pygame.transform.scale(surface, screen.get_size(), screen)
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point of the ``mb8`` command."""
    args = parse_args(argv)
    if args.command == "run":
        run_vm(args.file, args.bot)
    return 0