"""
Opcode to mnemonic translation for the debug view.

Mnemonics follow the usual CHIP-8 assembler names (CLS, RET, JP, CALL, SE,
SNE, LD, ADD, OR, AND, XOR, SUB, SHR, SUBN, SHL, RND, DRW, SKP, SKNP).
Words with no defined meaning come out as DW 0xNNNN.
"""

ELI_MNEMONICS = {
    0x0: 'LD',
    0x1: 'OR',
    0x2: 'AND',
    0x3: 'XOR',
    0x4: 'ADD',
    0x5: 'SUB',
    0x7: 'SUBN',
}

MSC_FORMATS = {
    0x07: 'LD V{x:X}, DT',
    0x0A: 'LD V{x:X}, K',
    0x15: 'LD DT, V{x:X}',
    0x18: 'LD ST, V{x:X}',
    0x1E: 'ADD I, V{x:X}',
    0x29: 'LD F, V{x:X}',
    0x33: 'LD B, V{x:X}',
    0x55: 'LD [I], V{x:X}',
    0x65: 'LD V{x:X}, [I]',
}


def DISASSEMBLE(opcode):
    """
    Returns the mnemonic for a single 16-bit opcode
    """
    operation = (opcode & 0xF000) >> 12
    x = (opcode & 0x0F00) >> 8
    y = (opcode & 0x00F0) >> 4
    n = opcode & 0x000F
    nn = opcode & 0x00FF
    nnn = opcode & 0x0FFF

    if opcode == 0x00E0:
        return 'CLS'
    if opcode == 0x00EE:
        return 'RET'
    if operation == 0x1:
        return 'JP {:#05x}'.format(nnn)
    if operation == 0x2:
        return 'CALL {:#05x}'.format(nnn)
    if operation == 0x3:
        return 'SE V{:X}, {:#04x}'.format(x, nn)
    if operation == 0x4:
        return 'SNE V{:X}, {:#04x}'.format(x, nn)
    if operation == 0x5 and n == 0:
        return 'SE V{:X}, V{:X}'.format(x, y)
    if operation == 0x6:
        return 'LD V{:X}, {:#04x}'.format(x, nn)
    if operation == 0x7:
        return 'ADD V{:X}, {:#04x}'.format(x, nn)
    if operation == 0x8:
        if n in ELI_MNEMONICS:
            return '{} V{:X}, V{:X}'.format(ELI_MNEMONICS[n], x, y)
        if n == 0x6:
            return 'SHR V{:X}'.format(x)
        if n == 0xE:
            return 'SHL V{:X}'.format(x)
    if operation == 0x9 and n == 0:
        return 'SNE V{:X}, V{:X}'.format(x, y)
    if operation == 0xA:
        return 'LD I, {:#05x}'.format(nnn)
    if operation == 0xB:
        return 'JP V0, {:#05x}'.format(nnn)
    if operation == 0xC:
        return 'RND V{:X}, {:#04x}'.format(x, nn)
    if operation == 0xD:
        return 'DRW V{:X}, V{:X}, {}'.format(x, y, n)
    if operation == 0xE and nn == 0x9E:
        return 'SKP V{:X}'.format(x)
    if operation == 0xE and nn == 0xA1:
        return 'SKNP V{:X}'.format(x)
    if operation == 0xF and nn in MSC_FORMATS:
        return MSC_FORMATS[nn].format(x=x)

    return 'DW {:#06x}'.format(opcode)


def DISASSEMBLE_RANGE(memory, start, end):
    """
    Yields (address, opcode, mnemonic) for every word in [start, end).

    A trailing odd byte is yielded as a DB line with the byte as the opcode.
    """
    address = start
    while address + 1 < end:
        opcode = memory.READ_WORD(address)
        yield address, opcode, DISASSEMBLE(opcode)
        address += 2

    if address < end:
        value = memory.READ(address)
        yield address, value, 'DB {:#04x}'.format(value)
