from pygame import display, font, HWSURFACE, DOUBLEBUF, Color, draw

from chipvm.disassembler import DISASSEMBLE_RANGE
from chipvm.screen import Screen


class Display(object):
    """
    pygame window showing the interpreter's framebuffer, scaled up, with an
    optional debug panel on the right.
    """

    COLOR_DEPTH = 8

    PIXEL_OFF = Color(0, 0, 0, 255)
    PIXEL_ON = Color(255, 255, 255, 255)

    PANEL_WIDTH = 280
    PANEL_BACKGROUND = Color(30, 30, 30, 255)
    PANEL_TEXT = Color(200, 200, 200, 255)
    PANEL_HIGHLIGHT = Color(255, 210, 80, 255)
    FONT_SIZE = 18
    LINE_HEIGHT = 16

    # Disassembly lines shown around the program counter
    CODE_LINES = 12

    def __init__(self, SCALE=10, DEBUG_PANEL=False, CAPTION='chipvm'):

        self.SCALE = SCALE
        self.DEBUG_PANEL = DEBUG_PANEL
        self.WIDTH = Screen.WIDTH * SCALE
        self.HEIGHT = Screen.HEIGHT * SCALE

        #  Initialize a variable to hold the surface but don't use it
        self.SURFACE = None
        self.FONT = None

        self.INITIALIZE(CAPTION)

    def INITIALIZE(self, caption):

        # Initialize the display from pygame
        display.init()

        width = self.WIDTH + (self.PANEL_WIDTH if self.DEBUG_PANEL else 0)
        height = self.HEIGHT

        if self.DEBUG_PANEL:
            font.init()
            self.FONT = font.Font(None, self.FONT_SIZE)
            # Registers, stack and code need more room than a small screen gives
            height = max(height, self.LINE_HEIGHT * (14 + self.CODE_LINES))

        self.SURFACE = display.set_mode((width, height), HWSURFACE | DOUBLEBUF, self.COLOR_DEPTH)

        self.SET_CAPTION(caption)
        self.SURFACE.fill(self.PIXEL_OFF)
        self.UPDATE()

    def SET_CAPTION(self, caption):
        display.set_caption(caption)

    def DRAW(self, screen):
        """
        Repaint the framebuffer if it changed since the last call, then
        mark it as seen.
        """
        if not screen.IS_DIRTY():
            return False

        for y, row in enumerate(screen.ROWS()):
            for x, state in enumerate(row):
                color = self.PIXEL_ON if state else self.PIXEL_OFF
                draw.rect(self.SURFACE, color, (x * self.SCALE, y * self.SCALE, self.SCALE, self.SCALE))

        screen.RESET_DIRTY()
        return True

    def PANEL_LINES(self, cpu):
        """
        Registers, timer, keys, stack and the code around PC as
        (text, highlight) pairs, the current instruction highlighted
        """
        state = cpu.DUMP_STATE()
        lines = [
            ('PC: {:#06x}   I: {:#06x}'.format(state['pc'], state['i']), False),
            ('DT: {}   unknown ops: {}'.format(state['delay'], state['unknown_opcodes']), False),
        ]

        for row in range(0, 16, 4):
            lines.append(('   '.join('V{:X}: {:02X}'.format(i, state['v'][i]) for i in range(row, row + 4)), False))

        pressed = cpu.keypad.PRESSED()
        lines.append(('keys: ' + ' '.join('{:X}'.format(key) if down else '.' for key, down in enumerate(pressed)), False))
        lines.append(('stack (size: {}): {}'.format(
            len(state['stack']), ' '.join('{:03X}'.format(address) for address in state['stack'])), False))
        lines.append(('', False))

        start, end = cpu.GET_CODE_RANGE()
        first = max(start, state['pc'] - (self.CODE_LINES // 2) * 2)
        last = min(end, first + self.CODE_LINES * 2)

        for address, opcode, mnemonic in DISASSEMBLE_RANGE(cpu.memory, first, last):
            lines.append(('{:03X}: {:04X}  {}'.format(address, opcode, mnemonic), address == state['pc']))

        return lines

    def DRAW_PANEL(self, cpu):
        if not self.DEBUG_PANEL:
            return

        left = self.WIDTH
        self.SURFACE.fill(self.PANEL_BACKGROUND, (left, 0, self.PANEL_WIDTH, self.SURFACE.get_height()))

        for number, (text, highlight) in enumerate(self.PANEL_LINES(cpu)):
            color = self.PANEL_HIGHLIGHT if highlight else self.PANEL_TEXT
            rendered = self.FONT.render(text, True, color)
            self.SURFACE.blit(rendered, (left + 8, 4 + number * self.LINE_HEIGHT))

    def UPDATE(self):
        display.flip()

    @staticmethod
    def DECONSTRUCTOR():
        """
        Destroys the current window.
        """
        display.quit()
