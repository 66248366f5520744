from chipvm.exceptions import StackOverflowError


class Stack(object):
    """
    Return addresses for CALL / RET. The original hardware had room for
    16 of them, deeper nesting raises StackOverflowError.
    """

    MAX_DEPTH = 16

    def __init__(self, depth=MAX_DEPTH):
        self.DEPTH = depth
        self.entries = []

    def __len__(self):
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def PUSH(self, address):
        if len(self.entries) >= self.DEPTH:
            raise StackOverflowError(self.DEPTH)
        self.entries.append(address & 0xFFFF)

    def POP(self):
        """
        Pop the most recent return address, None if the stack is empty
        """
        if not self.entries:
            return None
        return self.entries.pop()

    def CLEAR(self):
        self.entries = []
