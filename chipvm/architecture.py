import logging
from random import randint

from chipvm.exceptions import (
    ChipVMError,
    RomReadError,
    RomTooLargeError,
    UnknownOpCodeException,
)
from chipvm.keypad import Keypad
from chipvm.memory import Memory
from chipvm.screen import Screen
from chipvm.stack import Stack

logger = logging.getLogger(__name__)


class Architecture:
    # Constants:
    PROGRAM_COUNTER_START = Memory.PROGRAM_START
    TIMER_FREQUENCY = 60

    def __init__(self, strict=False, stack_depth=Stack.MAX_DEPTH):

        # Raise UnknownOpCodeException instead of skipping unknown opcodes
        self.STRICT = strict

        # The CHIP-8 had a series of registers as follows:
        #
        #   1 x 16-bit index register        (I)
        #   1 x 16-bit program counter       (PC)
        #   1 x 8-bit delay timer            (DT)
        #
        #   16 x 8-bit general registers     (V0 - VF)
        #
        # The sound timer is accepted by FX18 but never kept.

        self.GeneralRegisters = {register: 0 for register in range(16)}

        self.CpuRegisters = {
            'I' : 0,
            'PC': 0,
        }

        self.Timers = {
            'DT': 0,
        }

        # Seconds accumulated toward the next delay timer tick
        self.TOTAL_DT = 0.0

        # The Operations function by looking at the most significant nibble
        # (The first character after 0x), then the next 3 nibbles are used to define
        # The parameters of the operation (so 0x1333 = JMP 333)
        self.OperationLookupTable = {
            0x0: self.SYS,                         # 00E0 / 00EE               (CLEAR, RETURN)
            0x1: self.JMP_ADDR,                    # 1NNN - JUMP NNN           (JUMP TO ADDRESS)
            0x2: self.JMP_SBR,                     # 2NNN - CALL NNN           (JUMP TO SUBROUTINE)
            0x3: self.SKIP_REG_E_VAL,              # 3SNN - SKE  VS, NN        (SKIP IF VS == NN)
            0x4: self.SKIP_REG_NE_VAL,             # 4SNN - SKNE VS, NN        (SKIP IF VS != NN)
            0x5: self.SKIP_REG_E_REG,              # 5ST0 - SKE  VS, VT        (SKIP IF VS == VT)
            0x6: self.LD_VAL_REG,                  # 6SNN - LOAD VS, NN        (LOAD NN INTO VS)
            0x7: self.ADD_VAL_REG,                 # 7SNN - ADD  VS, NN        (ADD NN TO VS)
            0x8: self.ELI,                         # SUBFUNCTION DEFINED BELOW (Execute Logical Instruction)
            0x9: self.SKIP_REG_NE_REG,             # 9ST0 - SKNE VS, VT        (SKIP IF VS != VT)
            0xA: self.LD_I_VAL,                    # ANNN - LOAD I, NNN        (LOAD NNN INTO I)
            0xB: self.JMP_V0_VAL,                  # BNNN - JUMP [V0] + NNN    (JUMP TO [V0] + NNN)
            0xC: self.RND_REG,                     # CTNN - RAND VT, NN        (LOAD RANDOM NUMBER INTO VT AFTER AND WITH NN)
            0xD: self.DRAW,                        # DSTN - DRAW VS, VT, N     (DRAW AT VS, VT, N ROWS OF THE SPRITE IN I)
            0xE: self.KBRD,                        # SUBFUNCTION DEFINED BELOW (Keyboard Routine)
            0xF: self.MSC,                         # SUBFUNCTION DEFINED BELOW (Miscellaneous Routine)
        }

        #  As defined above, self.ELI get called when 0x8NNN is loaded into the CPU
        #  The last nibble is used to define the logical instruction
        self.ELILookup = {
            0x0: self.LD_REG_REG,                  # 8ST0 - LOAD VS, VT   (LOAD VT INTO VS)
            0x1: self.OR,                          # 8ST1 - OR   VS, VT   (LOGICAL 'OR' OF VS AND VT)
            0x2: self.AND,                         # 8ST2 - AND  VS, VT   (LOGICAL 'AND' OF VS AND VT)
            0x3: self.XOR,                         # 8ST3 - XOR  VS, VT   (LOGICAL 'XOR' OF VS AND VT)
            0x4: self.ADD_REG_REG,                 # 8ST4 - ADD  VS, VT   (ADD VT TO VS)
            0x5: self.SUB_REG_REG,                 # 8ST5 - SUB  VS, VT   (VS = VS - VT)
            0x6: self.R_SHFT_REG,                  # 8SN6 - SHR  VS       (RIGHT SHIFT VS)
            0x7: self.SUBN_REG_REG,                # 8ST7 - SUBN VS, VT   (VS = VT - VS)
            0xE: self.L_SHFT_REG,                  # 8SNE - SHL  VS       ( LEFT SHIFT VS)
        }

        #  As defined above, self.KBRD get called when 0xENNN is loaded into the CPU
        self.KBRDLookup = {
            0x9E: self.SKIP_KEY_PRESSED,           # ES9E - SKPR VS       (IF KEY IN VS IS PRESSED, SKIP LINE)
            0xA1: self.SKIP_KEY_NOT_PRESSED,       # ESA1 - SKUP VS       (IF KEY IN VS NOT PRESSED, SKIP LINE)
        }

        #  As defined above, self.MSC get called when 0xFNNN is loaded into the CPU
        #  The last two nibbles are used to define the logical instruction
        self.MSCLookup = {
            0x07: self.LD_DT_REG,                   # FT07 - LOAD VT, DT    (LOAD DT INTO VT)
            0x0A: self.WAIT_KEYPRESS,               # FT0A - KEYD VT        (WAIT FOR KEYPRESS, LOAD INTO VT)
            0x15: self.LD_REG_DT,                   # FS15 - LOAD DT, VS    (LOAD VS INTO DT)
            0x18: self.LD_REG_ST,                   # FS18 - LOAD ST, VS    (SOUND TIMER, IGNORED)
            0x1E: self.ADD_REG_I,                   # FS1E - ADD  I, VS     (ADD VS TO I)
            0x29: self.LD_I_REG,                    # FS29 - LOAD I, VS     (LOAD SPRITE IN VS INTO I)
            0x33: self.STR_BCD_MEM,                 # FS33 - BCD            (STORE BINARY CODED DECIMAL IN VS INTO MEMORY)
            0x55: self.STR_REG_MEM,                 # FS55 - STOR [I], VS   (STORE V0 to VX INTO MEMORY[I])
            0x65: self.LD_REG_MEM,                  # FS65 - LOAD VS, [I]   (LOAD V0 to VX FROM MEMORY[I])
        }

        # Settings the current operand
        self.CurrentOperand = 0

        # Whether CurrentOperand was read from memory at [PC]
        self.FETCHED = False

        # Opcodes seen with no defined mapping, skipped unless STRICT
        self.UNKNOWN_OPCODES = 0

        self.memory = Memory()
        self.screen = Screen()
        self.keypad = Keypad()
        self.stack = Stack(stack_depth)

        # Nothing runs until a ROM is loaded
        self.HALT = True
        self.ROM_NAME = None

        self.RESET()

    def LOAD_ROM(self, filename):
        """
        Load the ROM indicated by the filename into memory and start running it.

        The file is read completely before anything is reset, so a missing or
        oversized ROM raises RomReadError and leaves the current program as is.
        """
        try:
            with open(filename, 'rb') as rom_file:
                ROM = rom_file.read()
        except OSError as error:
            raise RomReadError(filename, error) from error

        self.LOAD_ROM_BYTES(ROM, name=filename)

    def LOAD_ROM_BYTES(self, ROM, name='<bytes>'):
        """
        Reset the machine and load ROM (a bytes-like object) at 0x200
        """
        if len(ROM) > Memory.MAX_PROGRAM_SIZE:
            raise RomTooLargeError(name, len(ROM), Memory.MAX_PROGRAM_SIZE)

        self.memory = Memory()
        self.RESET()

        self.memory.LOAD_PROGRAM(ROM)
        self.ROM_NAME = name
        self.HALT = False

        logger.info("Loaded %s (%d bytes)", name, len(ROM))

    def UPDATE(self, dt):
        """
        Advance the machine by one frame: dt seconds of timer time and
        a single instruction. Does nothing while halted.
        """
        if self.HALT:
            return

        self.UPDATE_TIMER(dt)
        self.EXECUTE()

    def UPDATE_TIMER(self, dt):
        """
        Decrement the delay timer once for every full 1/60th of a second
        that has passed, stopping at zero. Time only accumulates while the timer
        runs, and whatever is left over when it stops is kept for the next run.
        """
        if self.Timers['DT'] == 0:
            return

        self.TOTAL_DT += dt

        ticks = min(int(self.TOTAL_DT * self.TIMER_FREQUENCY), self.Timers['DT'])
        self.Timers['DT'] -= ticks
        self.TOTAL_DT -= ticks / self.TIMER_FREQUENCY

    def EXECUTE(self, OPERAND=None):
        """
        Execute the current instruction from the OPERAND parameter
        or the value at self.memory([PC])

        A ChipVMError raised by the instruction halts the machine before it
        propagates, leaving the state as it was when the error happened.
        """

        try:
            # Injected operands run without touching the program counter
            self.FETCHED = OPERAND is None

            if OPERAND is not None:
                self.CurrentOperand = OPERAND
            else:
                # Getting the big-endian word at index [PC]
                # Increment the Program Counter [PC] by 2 before running it,
                # jumps overwrite it afterwards
                self.CurrentOperand = self.memory.READ_WORD(self.CpuRegisters['PC'])
                self.CpuRegisters['PC'] += 2

            # The operation index being formatted for the lookup table
            OPERATION = (self.CurrentOperand & 0xF000) >> 12

            # Run the correct operation
            self.OperationLookupTable[OPERATION]()
        except ChipVMError as error:
            self.HALT = True
            logger.warning("Halted at PC %#06x: %s", self.CpuRegisters['PC'], error)
            raise

        # Return the operation we just ran
        return self.CurrentOperand

    def UNKNOWN(self):
        """
        Called for any opcode with no defined mapping
        """
        if self.STRICT:
            raise UnknownOpCodeException(self.CurrentOperand)

        self.UNKNOWN_OPCODES += 1
        logger.debug("Skipping unknown opcode %#06x", self.CurrentOperand)

    def ELI(self):
        """
        Defining the ELI Operation from the Lookup Table
        """

        # Formatting operation for lookup table
        OPERATION = self.CurrentOperand & 0x000F

        self.ELILookup.get(OPERATION, self.UNKNOWN)()

    def KBRD(self):
        """
        Runs the correct keyboard routine based on CurrentOperand
        """

        # Formatting operation for lookup table (last 2 nibbles)
        OPERATION = self.CurrentOperand & 0x00FF

        self.KBRDLookup.get(OPERATION, self.UNKNOWN)()

    def MSC(self):
        """
        Will execute the subroutines defined in self.MSCLookup
        """

        # Formatting operation for lookup table
        OPERATION = self.CurrentOperand & 0x00FF

        self.MSCLookup.get(OPERATION, self.UNKNOWN)()

    def SYS(self):
        """
        System OP Codes. Only two are defined:
            00E0 - Clear the display
            00EE - Return from subroutine

        Every other 0NNN (machine code routines) is unknown.
        """

        if self.CurrentOperand == 0x00E0:
            self.screen.CLEAR()
        elif self.CurrentOperand == 0x00EE:
            self.RETURN()
        else:
            self.UNKNOWN()

    def RETURN(self):
        """
        Called by 00EE instruction

        Return from subroutine. Pop the last return address off the stack
        into the program counter, nothing happens if the stack is empty.
        """
        address = self.stack.POP()
        if address is not None:
            self.CpuRegisters['PC'] = address

    def JMP_ADDR(self):
        """
        Jump instruction to address

        0x1NNN = JUMP TO NNN
        """

        self.CpuRegisters['PC'] = self.CurrentOperand & 0x0FFF

    def JMP_SBR(self):
        """
        Jump instruction to subroutine. Save the current program counter on the stack,
        then jump to the last 3 nibbles of the CurrentOperand

        0x2NNN - CALL NNN Subroutine
        """

        self.stack.PUSH(self.CpuRegisters['PC'])
        self.CpuRegisters['PC'] = self.CurrentOperand & 0x0FFF

    def SKIP_REG_E_VAL(self):
        """
        Triggered by 0x3SNN = SKIP IF REGISTER VS == NN
        """

        # Pull value for register out
        register = (self.CurrentOperand & 0x0F00) >> 8

        if self.GeneralRegisters[register] == self.CurrentOperand & 0x00FF:
            self.CpuRegisters['PC'] += 2

    def SKIP_REG_NE_VAL(self):
        """
        Triggered by 0x4SNN = SKIP IF REGISTER VS != NN
        """

        # Pull value for register out
        register = (self.CurrentOperand & 0x0F00) >> 8

        if self.GeneralRegisters[register] != self.CurrentOperand & 0x00FF:
            self.CpuRegisters['PC'] += 2

    def SKIP_REG_E_REG(self):
        """
        Triggered by 0x5ST0 = SKIP IF REGISTER VS == VT
        """

        if self.CurrentOperand & 0x000F != 0:
            return self.UNKNOWN()

        register1 = (self.CurrentOperand & 0x0F00) >> 8
        register2 = (self.CurrentOperand & 0x00F0) >> 4

        if self.GeneralRegisters[register1] == self.GeneralRegisters[register2]:
            self.CpuRegisters['PC'] += 2

    def SKIP_REG_NE_REG(self):
        """
        Triggered by 0x9ST0 = SKIP IF REGISTER VS != VT
        """

        if self.CurrentOperand & 0x000F != 0:
            return self.UNKNOWN()

        register1 = (self.CurrentOperand & 0x0F00) >> 8
        register2 = (self.CurrentOperand & 0x00F0) >> 4

        if self.GeneralRegisters[register1] != self.GeneralRegisters[register2]:
            self.CpuRegisters['PC'] += 2

    def LD_VAL_REG(self):
        """
        Triggered by 0x6SNN = LOAD NN into VS
        """

        value = self.CurrentOperand & 0x00FF
        register = (self.CurrentOperand & 0x0F00) >> 8

        self.GeneralRegisters[register] = value

    def ADD_VAL_REG(self):
        """
        Triggered by 0x7SNN = VS = [VS] + NN
        Wraps around on overflow, VF is left alone
        """

        value = self.CurrentOperand & 0x00FF
        register = (self.CurrentOperand & 0x0F00) >> 8

        self.GeneralRegisters[register] = (self.GeneralRegisters[register] + value) & 0xFF

    def LD_REG_REG(self):
        """
        PART OF ELI: Triggered by 0x8ST0 = VS = [VT]
        """

        register1 = (self.CurrentOperand & 0x0F00) >> 8
        register2 = (self.CurrentOperand & 0x00F0) >> 4
        self.GeneralRegisters[register1] = self.GeneralRegisters[register2]

    def ADD_REG_REG(self):
        """
        PART OF ELI: Triggered by 0x8ST4 = VS = VS + [VT]
        If carry is generated, we need to set the carry flag in VF (hardcoded)
        """

        register1 = (self.CurrentOperand & 0x0F00) >> 8
        register2 = (self.CurrentOperand & 0x00F0) >> 4

        added_value = self.GeneralRegisters[register1] + self.GeneralRegisters[register2]

        # Flag first, so the result wins when VS is VF
        self.GeneralRegisters[0xF] = 1 if added_value > 0xFF else 0
        self.GeneralRegisters[register1] = added_value & 0xFF

    def SUB_REG_REG(self):
        """
        PART OF ELI: Triggered by 0x8ST5 = VS = [VS] - [VT]

        Need to set the carry flag in VF (hardcoded) if a borrow is not generated
        """
        register1 = (self.CurrentOperand & 0x0F00) >> 8
        register2 = (self.CurrentOperand & 0x00F0) >> 4

        value1 = self.GeneralRegisters[register1]
        value2 = self.GeneralRegisters[register2]

        self.GeneralRegisters[0xF] = 1 if value1 >= value2 else 0
        self.GeneralRegisters[register1] = (value1 - value2) & 0xFF

    def SUBN_REG_REG(self):
        """
        PART OF ELI: Triggered by 0x8ST7 = VS = [VT] - [VS]

        Need to set the carry flag in VF (hardcoded) if a borrow is not generated
        """
        register1 = (self.CurrentOperand & 0x0F00) >> 8
        register2 = (self.CurrentOperand & 0x00F0) >> 4

        value1 = self.GeneralRegisters[register1]
        value2 = self.GeneralRegisters[register2]

        self.GeneralRegisters[0xF] = 1 if value2 >= value1 else 0
        self.GeneralRegisters[register1] = (value2 - value1) & 0xFF

    def OR(self):
        """
        PART OF ELI: Triggered by 0x8ST1 = VS = VS | VT
        """

        register1 = (self.CurrentOperand & 0x0F00) >> 8
        register2 = (self.CurrentOperand & 0x00F0) >> 4

        self.GeneralRegisters[register1] |= self.GeneralRegisters[register2]

    def AND(self):
        """
        PART OF ELI: Triggered by 0x8ST2 = VS = VS & VT
        """

        register1 = (self.CurrentOperand & 0x0F00) >> 8
        register2 = (self.CurrentOperand & 0x00F0) >> 4

        self.GeneralRegisters[register1] &= self.GeneralRegisters[register2]

    def XOR(self):
        """
        PART OF ELI: Triggered by 0x8ST3 = VS = VS ^ VT
        """

        register1 = (self.CurrentOperand & 0x0F00) >> 8
        register2 = (self.CurrentOperand & 0x00F0) >> 4

        self.GeneralRegisters[register1] ^= self.GeneralRegisters[register2]

    def R_SHFT_REG(self):
        """
        PART OF ELI: Triggered by 0x8S06 = VS = VS >> 1 and VF = VS & 0x1 (bit 0 before the shift)
        """

        register = (self.CurrentOperand & 0x0F00) >> 8
        value = self.GeneralRegisters[register]

        self.GeneralRegisters[0xF] = value & 0x1
        self.GeneralRegisters[register] = value >> 1

    def L_SHFT_REG(self):
        """
        PART OF ELI: Triggered by 0x8S0E = VS = VS << 1 and VF = VS >> 7 (bit 7 before the shift)
        """

        register = (self.CurrentOperand & 0x0F00) >> 8
        value = self.GeneralRegisters[register]

        self.GeneralRegisters[0xF] = (value & 0x80) >> 7
        self.GeneralRegisters[register] = (value << 1) & 0xFF

    def LD_I_VAL(self):
        """
        Triggered by 0xANNN = LOAD NNN into I
        """

        self.CpuRegisters['I'] = self.CurrentOperand & 0x0FFF

    def JMP_V0_VAL(self):
        """
        Triggered by 0xBNNN = JUMP to [V0] + NNN
        """

        self.CpuRegisters['PC'] = self.GeneralRegisters[0x0] + (self.CurrentOperand & 0x0FFF)

    def RND_REG(self):
        """
        Triggered by 0xCSNN = Generate a random number, AND it with NN and save in VS
        Random number must be between 0 and 255
        """

        value = self.CurrentOperand & 0x00FF
        register = (self.CurrentOperand & 0x0F00) >> 8

        self.GeneralRegisters[register] = value & randint(0, 255)

    def SKIP_KEY_PRESSED(self):
        """
        PART OF KBRD - Triggered by 0xES9E = SKIP IF KEY IN VS IS PRESSED
        Only the low nibble of VS names a key
        """

        register = (self.CurrentOperand & 0x0F00) >> 8

        if self.keypad.IS_PRESSED(self.GeneralRegisters[register] & 0xF):
            self.CpuRegisters['PC'] += 2

    def SKIP_KEY_NOT_PRESSED(self):
        """
        PART OF KBRD - Triggered by 0xESA1 = SKIP IF KEY IN VS IS NOT PRESSED
        """

        register = (self.CurrentOperand & 0x0F00) >> 8

        if not self.keypad.IS_PRESSED(self.GeneralRegisters[register] & 0xF):
            self.CpuRegisters['PC'] += 2

    def LD_DT_REG(self):
        """
        PART OF MSC - Triggered by 0xFS07 = LOAD DT INTO VS
        """

        register = (self.CurrentOperand & 0x0F00) >> 8

        self.GeneralRegisters[register] = self.Timers['DT']

    def WAIT_KEYPRESS(self):
        """
        PART OF MSC - Triggerd by 0xFS0A = WAIT FOR KEYPRESS, STORE KEYPRESS INTO VS

        Doesn't block: with no key down the program counter is moved back onto
        this instruction so it runs again on the next update. An operand passed
        straight to EXECUTE never moved the counter, so it is left alone.
        """

        register = (self.CurrentOperand & 0x0F00) >> 8

        key_pressed = self.keypad.GET_PRESSED_KEY()

        if key_pressed is None:
            if self.FETCHED:
                self.CpuRegisters['PC'] -= 2
        else:
            self.GeneralRegisters[register] = key_pressed

    def LD_REG_DT(self):
        """
        PART OF MSC - Triggered by 0xFS15 = LOAD VS INTO DT
        """

        register = (self.CurrentOperand & 0x0F00) >> 8

        self.Timers['DT'] = self.GeneralRegisters[register]

    def LD_REG_ST(self):
        """
        PART OF MSC - Triggered by 0xFS18 = LOAD VS INTO ST
        There is no sound, so the value goes nowhere
        """

    def LD_I_REG(self):
        """
        PART OF MSC - Triggered by 0xFS29 = LOAD SPRITE ADDRESS OF DIGIT VS INTO I
        All font glyphs are 5 bytes long, so the location of the glyph is digit*5
        """

        register = (self.CurrentOperand & 0x0F00) >> 8

        self.CpuRegisters['I'] = Memory.FONT_ADDRESS(self.GeneralRegisters[register])

    def ADD_REG_I(self):
        """
        PART OF MSC - Triggered by 0xFT1E = I = [VT] + [I]
        """

        register = (self.CurrentOperand & 0x0F00) >> 8

        self.CpuRegisters['I'] = (self.CpuRegisters['I'] + self.GeneralRegisters[register]) & 0xFFFF

    def STR_BCD_MEM(self):
        """
        PART OF MSC - Triggered by 0xFT33 = TAKE Value in VT and place as follow into memory:

            N*10^2 = self.memory[i]
            N*10^1 = self.memory[i+1]
            N*10^0 = self.memory[i+2]

        """

        register = (self.CurrentOperand & 0x0F00) >> 8
        value = self.GeneralRegisters[register]

        self.memory.WRITE_BLOCK(self.CpuRegisters['I'], bytes([value // 100, (value // 10) % 10, value % 10]))

    def STR_REG_MEM(self):
        """
        PART OF MSC - Triggered by 0xFT55 = STORE V0-VT INTO MEMORY AT [I], THEN I = I + T + 1
        """

        register = (self.CurrentOperand & 0x0F00) >> 8

        values = bytes(self.GeneralRegisters[i] for i in range(register + 1))
        self.memory.WRITE_BLOCK(self.CpuRegisters['I'], values)

        self.CpuRegisters['I'] = (self.CpuRegisters['I'] + register + 1) & 0xFFFF

    def LD_REG_MEM(self):
        """
        PART OF MSC - Triggered by 0xFT65 = LOAD V0-VT FROM MEMORY AT [I], THEN I = I + T + 1
        """

        register = (self.CurrentOperand & 0x0F00) >> 8

        values = self.memory.READ_BLOCK(self.CpuRegisters['I'], register + 1)
        for i, value in enumerate(values):
            self.GeneralRegisters[i] = value

        self.CpuRegisters['I'] = (self.CpuRegisters['I'] + register + 1) & 0xFFFF

    def DRAW(self):
        """
        The draw method for actually drawing output to the screen
        Triggered by DSTN - DRAW VS, VT, N

        Works by checking what sprite is saved in the index register ([I])
        at the x and y coordinates, where x = [VS], y = [VT].

        The drawing works by XORing the individual pixels and wrapping if we go off page
        The N value is used to define the height of the sprite and the width is
        hardcoded to be 8-bits

        Since the index register points to memory, say the memory looks like this:

        self.memory[0]:     0 1 1 1 1 1 0 0
        self.memory[1]:     0 1 0 0 0 0 0 0
        self.memory[2]:     0 1 0 0 0 0 0 0
        self.memory[3]:     0 1 1 1 1 1 0 0
        self.memory[4]:     0 1 0 0 0 0 0 0
        self.memory[5]:     0 1 0 0 0 0 0 0
        self.memory[6]:     0 1 1 1 1 1 0 0

        where the 1's form the shape of an E, then having the index point to self.memory[0]
        and N as 7 would tell the emulator to draw the E by iterating from 0-6 in the memory

        VF is set to 1 if any pixel was switched off, 0 otherwise
        """

        register_x = (self.CurrentOperand & 0x0F00) >> 8
        register_y = (self.CurrentOperand & 0x00F0) >> 4

        x = self.GeneralRegisters[register_x]
        y = self.GeneralRegisters[register_y]

        height = self.CurrentOperand & 0x000F

        sprite = self.memory.READ_BLOCK(self.CpuRegisters['I'], height)

        collision = self.screen.DRAW_SPRITE(x, y, sprite)
        self.GeneralRegisters[0xF] = 1 if collision else 0

    def RESET(self):
        """
        Blanks out registers, stack, screen, keypad and timer and puts the PC
        back at the start of the program
        """
        for i in range(16):
            self.GeneralRegisters[i] = 0

        self.CpuRegisters['PC'] = self.PROGRAM_COUNTER_START
        self.CpuRegisters['I'] = 0

        self.Timers['DT'] = 0
        self.TOTAL_DT = 0.0

        self.stack.CLEAR()
        self.screen.CLEAR()
        self.keypad.RESET()

        self.CurrentOperand = 0
        self.UNKNOWN_OPCODES = 0
        self.HALT = True

    def IS_HALTED(self):
        return self.HALT

    def GET_CODE_RANGE(self):
        """
        Returns (start, end) of the loaded program, for the debug view
        """
        return self.memory.GET_CODE_RANGE()

    # Debug functions
    def DUMP_STATE(self):
        """
        Snapshot of the registers, timer and stack
        """
        return {
            'rom': self.ROM_NAME,
            'halted': self.HALT,
            'pc': self.CpuRegisters['PC'],
            'i': self.CpuRegisters['I'],
            'v': [self.GeneralRegisters[i] for i in range(16)],
            'delay': self.Timers['DT'],
            'stack': list(self.stack),
            'unknown_opcodes': self.UNKNOWN_OPCODES,
        }
