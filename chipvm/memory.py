from chipvm.exceptions import MemoryAccessError


# Hex digit glyphs 0-F, 5 bytes each, 4 pixels wide
FONT_DATA = bytes([
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80,  # F
])


class Memory(object):

    # The CHIP-8 had 4k (4096 bytes) of memory
    MAX_MEMORY = 4096

    FONT_START = 0x000
    FONT_GLYPH_SIZE = 5
    FONT_END = FONT_START + len(FONT_DATA)

    PROGRAM_START = 0x200
    MAX_PROGRAM_SIZE = MAX_MEMORY - PROGRAM_START

    def __init__(self):
        self.bytes = bytearray(self.MAX_MEMORY)
        self.CODE_LENGTH = 0

        # Glyphs are written once here and never again
        self.bytes[self.FONT_START:self.FONT_END] = FONT_DATA

    def __len__(self):
        return len(self.bytes)

    def CHECK_RANGE(self, address, size=1):
        """
        Raise MemoryAccessError unless [address, address + size) is addressable
        """
        if address < 0 or size < 0 or address + size > self.MAX_MEMORY:
            raise MemoryAccessError(address, size)

    def CHECK_WRITABLE(self, address, size=1):
        self.CHECK_RANGE(address, size)

        if size and address < self.FONT_END and address + size > self.FONT_START:
            raise MemoryAccessError(address, size, "font area is read only")

    def READ(self, address):
        self.CHECK_RANGE(address)
        return self.bytes[address]

    def READ_WORD(self, address):
        """
        Big-endian 16-bit read, used to fetch opcodes
        """
        self.CHECK_RANGE(address, 2)
        return (self.bytes[address] << 8) | self.bytes[address + 1]

    def READ_BLOCK(self, address, size):
        self.CHECK_RANGE(address, size)
        return bytes(self.bytes[address:address + size])

    def WRITE_BLOCK(self, address, data):
        # The whole range is checked up front so a failing store writes nothing
        self.CHECK_WRITABLE(address, len(data))
        self.bytes[address:address + len(data)] = data

    def LOAD_PROGRAM(self, program):
        """
        Copy program bytes in at PROGRAM_START and remember how long the code is.
        The caller checks the size against MAX_PROGRAM_SIZE.
        """
        self.WRITE_BLOCK(self.PROGRAM_START, program)
        self.CODE_LENGTH = len(program)

    def GET_CODE_RANGE(self):
        return self.PROGRAM_START, self.PROGRAM_START + self.CODE_LENGTH

    @classmethod
    def FONT_ADDRESS(cls, digit):
        """
        Address of the glyph for a hex digit. Values above 0xF are not masked
        and point past the font area.
        """
        return cls.FONT_START + digit * cls.FONT_GLYPH_SIZE
