from chipvm.architecture import Architecture
from chipvm.exceptions import (
    ChipVMError,
    MemoryAccessError,
    RomReadError,
    RomTooLargeError,
    StackOverflowError,
    UnknownOpCodeException,
)
from chipvm.keypad import Keypad
from chipvm.memory import Memory
from chipvm.screen import Screen
from chipvm.stack import Stack

__version__ = "0.1.0"
