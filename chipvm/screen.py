class Screen(object):
    """
    Monochrome 64 x 32 framebuffer, one byte (0 or 1) per pixel, row major.

    DIRTY is a single latch for the whole screen: any pixel write sets it and
    only the consumer clears it (RESET_DIRTY) once it has sampled the buffer.
    """

    WIDTH = 64
    HEIGHT = 32

    # Sprites are always 8 pixels wide, one byte per row
    SPRITE_WIDTH = 8

    def __init__(self):
        self.buffer = bytearray(self.WIDTH * self.HEIGHT)
        self.DIRTY = True

    def CLEAR(self):
        """
        Sets every pixel off and flags the screen as changed
        """
        self.buffer = bytearray(self.WIDTH * self.HEIGHT)
        self.DIRTY = True

    def SET_PIXEL(self, x, y, state):
        # Marks dirty even when the value doesn't change
        self.buffer[x + y * self.WIDTH] = 1 if state else 0
        self.DIRTY = True

    def GET_PIXEL(self, x, y):
        return self.buffer[x + y * self.WIDTH] == 1

    def IS_DIRTY(self):
        return self.DIRTY

    def RESET_DIRTY(self):
        self.DIRTY = False

    def DRAW_SPRITE(self, x, y, sprite):
        """
        XOR a sprite onto the screen at (x, y).

        Each byte of the sprite is one row, most significant bit on the left.
        Pixels that fall off the right or bottom edge wrap around to the other
        side. Only set sprite bits touch the screen; a set bit landing on a set
        pixel turns it off, which counts as a collision.

        Returns True if any pixel was turned off by this draw.
        """
        collision = False

        for y_layer, row in enumerate(sprite):

            y_coordinate = (y + y_layer) % self.HEIGHT

            for x_layer in range(self.SPRITE_WIDTH):

                if (row >> (7 - x_layer)) & 0x1 == 0:
                    continue

                x_coordinate = (x + x_layer) % self.WIDTH
                current_state = self.GET_PIXEL(x_coordinate, y_coordinate)

                if current_state:
                    collision = True

                self.SET_PIXEL(x_coordinate, y_coordinate, not current_state)

        return collision

    def ROWS(self):
        """
        Yields each row of the buffer as a bytes object, top to bottom
        """
        for y in range(self.HEIGHT):
            yield bytes(self.buffer[y * self.WIDTH:(y + 1) * self.WIDTH])
