import os
import unittest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from chipvm.architecture import Architecture
from chipvm.display import Display
from chipvm.screen import Screen


def program(*words):
    return b"".join(word.to_bytes(2, "big") for word in words)


class TestDraw(unittest.TestCase):
    def setUp(self):
        self.display = Display(SCALE=2)
        self.screen = Screen()

    def tearDown(self):
        Display.DECONSTRUCTOR()

    def test_window_size(self):
        self.assertEqual(self.display.SURFACE.get_size(), (128, 64))

    def test_draw_clears_the_latch(self):
        self.assertTrue(self.display.DRAW(self.screen))
        self.assertFalse(self.screen.IS_DIRTY())
        self.assertFalse(self.display.DRAW(self.screen))

    def test_changed_screen_is_repainted(self):
        self.display.DRAW(self.screen)
        self.screen.SET_PIXEL(1, 0, True)
        self.assertTrue(self.display.DRAW(self.screen))

        surface = self.display.SURFACE
        self.assertNotEqual(surface.get_at((2, 0)), surface.get_at((0, 0)))
        self.assertEqual(surface.get_at((3, 1)), surface.get_at((2, 0)))

    def test_panel_is_off_by_default(self):
        self.display.DRAW_PANEL(Architecture())


class TestPanel(unittest.TestCase):
    def setUp(self):
        self.display = Display(SCALE=2, DEBUG_PANEL=True)
        self.cpu = Architecture()

    def tearDown(self):
        Display.DECONSTRUCTOR()

    def test_current_instruction_is_highlighted(self):
        self.cpu.LOAD_ROM_BYTES(program(0x6005, 0x1202))
        lines = self.display.PANEL_LINES(self.cpu)

        self.assertIn(("200: 6005  LD V0, 0x05", True), lines)
        self.assertIn(("202: 1202  JP 0x202", False), lines)
        self.display.DRAW_PANEL(self.cpu)

    def test_pressed_keys_are_shown(self):
        self.cpu.LOAD_ROM_BYTES(program(0x1200))
        self.cpu.keypad.SET(0xA, True)
        lines = [text for text, _ in self.display.PANEL_LINES(self.cpu)]
        self.assertIn("keys: . . . . . . . . . . A . . . . .", lines)

    def test_pc_past_the_code(self):
        self.cpu.LOAD_ROM_BYTES(program(0x1300))
        self.cpu.UPDATE(0)
        self.assertEqual(self.cpu.CpuRegisters['PC'], 0x300)

        lines = self.display.PANEL_LINES(self.cpu)
        self.assertFalse(any(highlight for _, highlight in lines))
        self.assertFalse(any(text.startswith("200:") for text, _ in lines))
        self.display.DRAW_PANEL(self.cpu)

    def test_no_rom_loaded(self):
        self.display.DRAW_PANEL(self.cpu)
        self.assertEqual(self.display.PANEL_LINES(self.cpu)[0], ("PC: 0x0200   I: 0x0000", False))


if __name__ == "__main__":
    unittest.main()
