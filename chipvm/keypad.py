import threading


class Keypad(object):
    """
    State of the 16 key hex keypad (keys 0x0 - 0xF).

    The front end writes key state from input events, the interpreter only
    reads it. Access goes through a lock so the two sides may run on
    different threads.
    """

    KEY_COUNT = 16

    def __init__(self):
        self.keys = [False] * self.KEY_COUNT
        self.lock = threading.Lock()

    def SET(self, index, down):
        with self.lock:
            self.keys[index] = bool(down)

    def IS_PRESSED(self, index):
        with self.lock:
            return self.keys[index]

    def GET_PRESSED_KEY(self):
        """
        Lowest numbered key that is currently down, or None
        """
        with self.lock:
            for index, down in enumerate(self.keys):
                if down:
                    return index
        return None

    def PRESSED(self):
        with self.lock:
            return tuple(self.keys)

    def RESET(self):
        with self.lock:
            self.keys = [False] * self.KEY_COUNT
