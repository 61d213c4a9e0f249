from enum import IntEnum


class CFBEntryType(IntEnum):
    EMPTY        = 0x00
    USER_STORAGE = 0x01
    USER_STREAM  = 0x02
    LOCK_BYTES   = 0x03  # unknown
    PROPERTY     = 0x04  # unknown
    ROOT_STORAGE = 0x05


class CFBNodeColor(IntEnum):
    '''The entries of a storage form a red-black tree'''
    RED   = 0x00
    BLACK = 0x01


class CFBByteOrder(IntEnum):
    '''First byte of the byte order identifier'''
    LITTLE_ENDIAN = 0xfe
    BIG_ENDIAN    = 0xff
