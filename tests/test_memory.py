import unittest

from chipvm.exceptions import MemoryAccessError
from chipvm.memory import FONT_DATA, Memory


class TestMemory(unittest.TestCase):
    def setUp(self):
        self.memory = Memory()

    def test_size_and_font(self):
        self.assertEqual(len(self.memory), 4096)
        self.assertEqual(self.memory.READ_BLOCK(0, 80), FONT_DATA)
        self.assertEqual(sum(self.memory.bytes[80:]), 0)

    def test_font_address(self):
        self.assertEqual(Memory.FONT_ADDRESS(0x0), 0)
        self.assertEqual(Memory.FONT_ADDRESS(0xF), 75)
        self.assertEqual(self.memory.READ_BLOCK(Memory.FONT_ADDRESS(0x1), 5), bytes([0x20, 0x60, 0x20, 0x20, 0x70]))

    def test_read_word_is_big_endian(self):
        self.memory.WRITE_BLOCK(0x300, b"\x12\x34")
        self.assertEqual(self.memory.READ_WORD(0x300), 0x1234)

    def test_out_of_range(self):
        with self.assertRaises(MemoryAccessError):
            self.memory.READ(4096)
        with self.assertRaises(MemoryAccessError):
            self.memory.READ_WORD(0xFFF)
        with self.assertRaises(MemoryAccessError):
            self.memory.READ_BLOCK(0xFF0, 17)
        with self.assertRaises(MemoryAccessError):
            self.memory.WRITE_BLOCK(-1, b"\x00")

    def test_failed_block_write_changes_nothing(self):
        with self.assertRaises(MemoryAccessError) as context:
            self.memory.WRITE_BLOCK(0xFFE, b"\x01\x02\x03")
        self.assertEqual(context.exception.address, 0xFFE)
        self.assertEqual(context.exception.size, 3)
        self.assertEqual(self.memory.READ_BLOCK(0xFFE, 2), b"\x00\x00")

    def test_font_is_read_only(self):
        with self.assertRaises(MemoryAccessError):
            self.memory.WRITE_BLOCK(0x04F, b"\x00")
        with self.assertRaises(MemoryAccessError):
            self.memory.WRITE_BLOCK(0x040, bytes(32))
        self.memory.WRITE_BLOCK(0x050, b"\xaa")
        self.assertEqual(self.memory.READ(0x050), 0xAA)
        self.assertEqual(self.memory.READ_BLOCK(0, 80), FONT_DATA)

    def test_load_program(self):
        self.memory.LOAD_PROGRAM(b"\x60\x05\x12\x00")
        self.assertEqual(self.memory.GET_CODE_RANGE(), (0x200, 0x204))
        self.assertEqual(self.memory.READ_WORD(0x200), 0x6005)


if __name__ == "__main__":
    unittest.main()
