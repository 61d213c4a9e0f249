'''
Structural checks that a source is a compound file: these are the only
ones done, no checksum nor sector count is cross-validated.
'''
from .cfb.enum import CFBEntryType


FILE_IDENTIFIER = b'\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1'
# used by the beta 2 files (late '92)
FILE_IDENTIFIER_BETA = b'\x0e\x11\xfc\x0d\xd0\xcf\x11\xe0'

VALID_FILE_IDENTIFIERS = (
    FILE_IDENTIFIER,
    FILE_IDENTIFIER_BETA,
)


def validate_file_identifier(data: bytes) -> bool:
    return bytes(data) in VALID_FILE_IDENTIFIERS


def validate_root_entry_type(data) -> bool:
    '''Accept the type as an integer or as the 1-byte field.'''
    if isinstance(data, int):
        value = data
    elif len(data) == 1:
        value = data[0]
    else:
        return False

    return value == CFBEntryType.ROOT_STORAGE
