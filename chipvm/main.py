import argparse
import logging
import os
import sys
from pathlib import Path

# No pygame welcome banner in the logs
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame

from chipvm.architecture import Architecture
from chipvm.display import Display
from chipvm.exceptions import ChipVMError, RomReadError

logger = logging.getLogger(__name__)

# Keyboard layout, row by row:
#
#   1 2 3 4        0 1 2 3
#   Q W E R   ->   4 5 6 7
#   A S D F        8 9 A B
#   Z X C V        C D E F
KEY_MAPPINGS = {
    pygame.K_1: 0x0,
    pygame.K_2: 0x1,
    pygame.K_3: 0x2,
    pygame.K_4: 0x3,
    pygame.K_q: 0x4,
    pygame.K_w: 0x5,
    pygame.K_e: 0x6,
    pygame.K_r: 0x7,
    pygame.K_a: 0x8,
    pygame.K_s: 0x9,
    pygame.K_d: 0xA,
    pygame.K_f: 0xB,
    pygame.K_z: 0xC,
    pygame.K_x: 0xD,
    pygame.K_c: 0xE,
    pygame.K_v: 0xF,
}

ROM_PATTERN = "*.ch8"
DEFAULT_ROM_DIR = "roms"


def find_roms(directory):
    """Every *.ch8 file under directory, sorted by path"""
    root = Path(directory)
    if not root.is_dir():
        return []
    return sorted(path for path in root.rglob(ROM_PATTERN) if path.is_file())


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="chipvm", description="CHIP-8 interpreter")
    parser.add_argument("rom", nargs="?", help="ROM file, or a directory to pick ROMs from")
    parser.add_argument("--rom-dir", default=DEFAULT_ROM_DIR,
                        help="directory searched for *.ch8 files (default: %(default)s)")
    parser.add_argument("--scale", type=int, default=Emulator.SCALE,
                        help="window pixels per CHIP-8 pixel (default: %(default)s)")
    parser.add_argument("--fps", type=int, default=Emulator.FPS,
                        help="frames, and instructions, per second (default: %(default)s)")
    parser.add_argument("--strict", action="store_true",
                        help="stop on unknown opcodes instead of skipping them")
    parser.add_argument("--debug-panel", action="store_true",
                        help="show registers, stack and disassembly beside the screen")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    args = parser.parse_args(argv)

    if args.scale < 1:
        parser.error("--scale must be at least 1")
    if args.fps < 1:
        parser.error("--fps must be at least 1")

    return args


def configure_logging(verbose=False):
    debug = verbose or int(os.getenv("DEBUG", 0) or 0) >= 1
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


class Emulator:
    """
    Window, input and frame loop around an Architecture.

    Every frame the keyboard state is copied onto the keypad and the
    interpreter gets exactly one UPDATE with the time the frame took.
    """

    SCALE = 10
    FPS = 60

    def __init__(self, roms, scale=SCALE, fps=FPS, strict=False, debug_panel=False):
        self.ROMS = list(roms)
        self.ROM_INDEX = 0
        self.SCALE = scale
        self.FPS = fps
        self.DEBUG_PANEL = debug_panel

        self.CPU = Architecture(strict=strict)
        self.DISPLAY = None
        self.RUNNING = False

    def LOAD(self, index):
        """
        Load ROMS[index]. A ROM that can't be read is logged and the
        current program keeps running.
        """
        index %= len(self.ROMS)
        rom = self.ROMS[index]

        try:
            self.CPU.LOAD_ROM(rom)
        except RomReadError as error:
            logger.error("%s", error)
            return False

        self.ROM_INDEX = index
        if self.DISPLAY is not None:
            self.DISPLAY.SET_CAPTION("chipvm - {}".format(Path(rom).name))
        return True

    def HANDLE_EVENT(self, event):
        if event.type == pygame.QUIT:
            self.RUNNING = False

        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.RUNNING = False
            elif event.key == pygame.K_PAGEDOWN:
                self.LOAD(self.ROM_INDEX + 1)
            elif event.key == pygame.K_PAGEUP:
                self.LOAD(self.ROM_INDEX - 1)
            elif event.key == pygame.K_F1:
                logger.info("State: %s", self.CPU.DUMP_STATE())
            elif event.key in KEY_MAPPINGS:
                self.CPU.keypad.SET(KEY_MAPPINGS[event.key], True)

        elif event.type == pygame.KEYUP:
            if event.key in KEY_MAPPINGS:
                self.CPU.keypad.SET(KEY_MAPPINGS[event.key], False)

    def FRAME(self, dt):
        try:
            self.CPU.UPDATE(dt)
        except ChipVMError as error:
            # The interpreter halts itself, leave the last frame on screen
            logger.error("%s", error)
            logger.error("State: %s", self.CPU.DUMP_STATE())

        self.DISPLAY.DRAW(self.CPU.screen)
        self.DISPLAY.DRAW_PANEL(self.CPU)
        self.DISPLAY.UPDATE()

    def MAIN(self):
        pygame.init()
        self.DISPLAY = Display(SCALE=self.SCALE, DEBUG_PANEL=self.DEBUG_PANEL)

        if not self.LOAD(self.ROM_INDEX):
            pygame.quit()
            return 1

        clock = pygame.time.Clock()
        self.RUNNING = True

        try:
            while self.RUNNING:
                dt = clock.tick(self.FPS) / 1000.0

                for event in pygame.event.get():
                    self.HANDLE_EVENT(event)

                self.FRAME(dt)
        finally:
            Display.DECONSTRUCTOR()
            pygame.quit()

        return 0


def main(argv=None):
    args = parse_args(argv)
    configure_logging(args.verbose)

    if args.rom and Path(args.rom).is_file():
        roms = [Path(args.rom)]
    else:
        roms = find_roms(args.rom or args.rom_dir)

    if not roms:
        logger.error("No ROM found in %s", args.rom or args.rom_dir)
        return 1

    logger.info("%d ROM(s) available", len(roms))

    emulator = Emulator(
        roms,
        scale=args.scale,
        fps=args.fps,
        strict=args.strict,
        debug_panel=args.debug_panel,
    )
    return emulator.MAIN()


if __name__ == "__main__":
    sys.exit(main())
