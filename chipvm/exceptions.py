class ChipVMError(Exception):
    """
    Base class for everything the interpreter raises
    """


class RomReadError(ChipVMError):
    """
    Raised when a ROM file can't be read. The interpreter state is left
    exactly as it was before the load was attempted.
    """

    def __init__(self, path, cause):
        self.path = path
        self.cause = cause
        super().__init__("Can't read ROM '{}': {}".format(path, cause))


class RomTooLargeError(RomReadError):

    def __init__(self, path, size, limit):
        self.size = size
        self.limit = limit
        super().__init__(path, "{} bytes, at most {} fit in program memory".format(size, limit))


class MemoryAccessError(ChipVMError):
    """
    Raised for reads or writes outside of memory, and for stores into the
    font area.
    """

    def __init__(self, address, size=1, reason="out of range"):
        self.address = address
        self.size = size
        super().__init__("Memory access at {:#06x} ({} bytes): {}".format(address, size, reason))


class StackOverflowError(ChipVMError):

    def __init__(self, depth):
        self.depth = depth
        super().__init__("Stack overflow, more than {} nested calls".format(depth))


class UnknownOpCodeException(ChipVMError):
    """
    Raised for an opcode with no defined mapping when the interpreter runs in
    strict mode
    """

    def __init__(self, opcode):
        self.opcode = opcode
        super().__init__("Unknown opcode {:#06x}".format(opcode))
