'''
Decoding of the integers and UUIDs stored into a compound file.

The integers are decoded byte by byte so that any width is supported
(the header mixes 2 and 4 bytes fields, the struct module would need
a format for each of them).

The UUIDs follow the Microsoft on-disk layout that is mixed-endian: the
first three components (4, 2 and 2 bytes) are little-endian and the last
two (2 and 6 bytes) are big-endian, see
<https://en.wikipedia.org/wiki/Universally_unique_identifier#Encoding>.
This is true whatever byte order the file declares.
'''
from .meta import Endianess


UUID_SIZE = 16

# (start, end, little endian) for each component of the UUID
UUID_COMPONENTS = (
    (0,  4,  True),
    (4,  6,  True),
    (6,  8,  True),
    (8,  10, False),
    (10, 16, False),
)


def decode_unsigned(data: bytes, little_endian: bool) -> int:
    if len(data) == 0:
        raise ValueError('cannot decode an empty sequence of bytes')

    ordered = reversed(data) if little_endian else data

    value = 0
    for byte in ordered:
        value = (value << 8) | byte

    return value


def decode_unsigned_with(data: bytes, endianess: Endianess) -> int:
    return decode_unsigned(data, little_endian=endianess == Endianess.LITTLE_ENDIAN)


def decode_uuid(data: bytes) -> str:
    if len(data) != UUID_SIZE:
        raise ValueError(f'an UUID must be {UUID_SIZE} bytes long, got {len(data)}')

    components = [decode_unsigned(data[start:end], little_endian) for start, end, little_endian in UUID_COMPONENTS]

    return '%08x-%04x-%04x-%04x-%012x' % tuple(components)
