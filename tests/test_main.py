import os
import tempfile
import unittest
from pathlib import Path

import pygame

from chipvm.main import KEY_MAPPINGS, Emulator, find_roms, parse_args


class TestParseArgs(unittest.TestCase):
    def test_defaults(self):
        args = parse_args([])
        self.assertIsNone(args.rom)
        self.assertEqual(args.rom_dir, "roms")
        self.assertEqual(args.scale, 10)
        self.assertEqual(args.fps, 60)
        self.assertFalse(args.strict)
        self.assertFalse(args.debug_panel)
        self.assertFalse(args.verbose)

    def test_options(self):
        args = parse_args(["PONG.ch8", "--scale", "4", "--fps", "120", "--strict", "--debug-panel", "-v"])
        self.assertEqual(args.rom, "PONG.ch8")
        self.assertEqual(args.scale, 4)
        self.assertEqual(args.fps, 120)
        self.assertTrue(args.strict)
        self.assertTrue(args.debug_panel)
        self.assertTrue(args.verbose)

    def test_rejects_bad_scale(self):
        with self.assertRaises(SystemExit):
            parse_args(["--scale", "0"])


class TestFindRoms(unittest.TestCase):
    def test_recursive_and_sorted(self):
        with tempfile.TemporaryDirectory() as directory:
            root = Path(directory)
            (root / "games").mkdir()
            for name in ["games/TETRIS.ch8", "BLITZ.ch8", "readme.txt"]:
                (root / name).write_bytes(b"\x12\x00")

            roms = find_roms(directory)

        self.assertEqual([rom.relative_to(root).as_posix() for rom in roms], ["BLITZ.ch8", "games/TETRIS.ch8"])

    def test_missing_directory(self):
        self.assertEqual(find_roms("/nonexistent/roms"), [])


class TestKeyMappings(unittest.TestCase):
    def test_every_key_mapped_once(self):
        self.assertEqual(sorted(KEY_MAPPINGS.values()), list(range(16)))


class TestEmulator(unittest.TestCase):
    def setUp(self):
        self.directory = tempfile.TemporaryDirectory()
        self.rom = os.path.join(self.directory.name, "loop.ch8")
        with open(self.rom, "wb") as rom:
            rom.write(b"\x60\x07\x12\x02")

    def tearDown(self):
        self.directory.cleanup()

    def test_load_switches_rom(self):
        emulator = Emulator([self.rom, self.rom])
        self.assertTrue(emulator.LOAD(3))
        self.assertEqual(emulator.ROM_INDEX, 1)
        self.assertFalse(emulator.CPU.IS_HALTED())

    def test_unreadable_rom_keeps_current_program(self):
        emulator = Emulator([self.rom, "/nonexistent/rom.ch8"])
        emulator.LOAD(0)
        emulator.CPU.UPDATE(0)

        self.assertFalse(emulator.LOAD(1))
        self.assertEqual(emulator.ROM_INDEX, 0)
        self.assertEqual(emulator.CPU.GeneralRegisters[0], 7)

    def test_key_events_drive_the_keypad(self):
        emulator = Emulator([self.rom])
        emulator.HANDLE_EVENT(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_q))
        self.assertTrue(emulator.CPU.keypad.IS_PRESSED(0x4))
        emulator.HANDLE_EVENT(pygame.event.Event(pygame.KEYUP, key=pygame.K_q))
        self.assertFalse(emulator.CPU.keypad.IS_PRESSED(0x4))

    def test_escape_stops(self):
        emulator = Emulator([self.rom])
        emulator.RUNNING = True
        emulator.HANDLE_EVENT(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
        self.assertFalse(emulator.RUNNING)


if __name__ == "__main__":
    unittest.main()
