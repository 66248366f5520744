import unittest

from chipvm.screen import Screen


class TestPixels(unittest.TestCase):
    def setUp(self):
        self.screen = Screen()

    def test_starts_blank_and_dirty(self):
        self.assertTrue(self.screen.IS_DIRTY())
        self.assertEqual(sum(self.screen.buffer), 0)
        self.assertEqual(len(self.screen.buffer), 64 * 32)

    def test_set_pixel_marks_dirty_even_without_change(self):
        self.screen.RESET_DIRTY()
        self.screen.SET_PIXEL(3, 4, False)
        self.assertTrue(self.screen.IS_DIRTY())

    def test_pixels_are_row_major(self):
        self.screen.SET_PIXEL(2, 1, True)
        self.assertEqual(self.screen.buffer[2 + 1 * 64], 1)
        self.assertTrue(self.screen.GET_PIXEL(2, 1))
        self.assertFalse(self.screen.GET_PIXEL(1, 2))

    def test_clear(self):
        self.screen.SET_PIXEL(10, 10, True)
        self.screen.RESET_DIRTY()
        self.screen.CLEAR()
        self.assertFalse(self.screen.GET_PIXEL(10, 10))
        self.assertTrue(self.screen.IS_DIRTY())

    def test_rows(self):
        self.screen.SET_PIXEL(63, 31, True)
        rows = list(self.screen.ROWS())
        self.assertEqual(len(rows), 32)
        self.assertEqual(rows[31][63], 1)


class TestDrawSprite(unittest.TestCase):
    def setUp(self):
        self.screen = Screen()

    def lit(self):
        return {(x, y) for y in range(Screen.HEIGHT) for x in range(Screen.WIDTH) if self.screen.GET_PIXEL(x, y)}

    def test_most_significant_bit_is_leftmost(self):
        self.screen.DRAW_SPRITE(5, 7, [0x80, 0x01])
        self.assertEqual(self.lit(), {(5, 7), (12, 8)})

    def test_wraps_horizontally(self):
        collision = self.screen.DRAW_SPRITE(Screen.WIDTH - 4, 0, [0xFF])
        self.assertFalse(collision)
        self.assertEqual(self.lit(), {(60, 0), (61, 0), (62, 0), (63, 0), (0, 0), (1, 0), (2, 0), (3, 0)})

    def test_wraps_vertically(self):
        self.screen.DRAW_SPRITE(0, Screen.HEIGHT - 1, [0x80, 0x80])
        self.assertEqual(self.lit(), {(0, 31), (0, 0)})

    def test_drawing_twice_erases_and_collides(self):
        self.assertFalse(self.screen.DRAW_SPRITE(8, 8, [0x3C, 0x42]))
        self.assertTrue(self.screen.DRAW_SPRITE(8, 8, [0x3C, 0x42]))
        self.assertEqual(self.lit(), set())

    def test_turning_pixels_on_is_not_a_collision(self):
        self.screen.DRAW_SPRITE(0, 0, [0xF0])
        self.assertFalse(self.screen.DRAW_SPRITE(0, 0, [0x0F]))
        self.assertEqual(self.lit(), {(x, 0) for x in range(8)})

    def test_clear_bits_leave_pixels_alone(self):
        self.screen.SET_PIXEL(1, 0, True)
        self.assertFalse(self.screen.DRAW_SPRITE(0, 0, [0x80]))
        self.assertTrue(self.screen.GET_PIXEL(1, 0))

    def test_partial_overlap_collides(self):
        self.screen.SET_PIXEL(1, 0, True)
        self.assertTrue(self.screen.DRAW_SPRITE(0, 0, [0xC0]))
        self.assertEqual(self.lit(), {(0, 0)})

    def test_empty_sprite(self):
        self.screen.RESET_DIRTY()
        self.assertFalse(self.screen.DRAW_SPRITE(0, 0, b""))
        self.assertFalse(self.screen.IS_DIRTY())


if __name__ == "__main__":
    unittest.main()
