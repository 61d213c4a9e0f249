'''
# Compound File Binary

Container format (also known as OLE2 or structured storage) used by the
legacy Microsoft Office documents: a single file that contains a filesystem
made of storages and streams.

The file starts with a 512 bytes header, what follows is divided in sectors
whose size is declared into the header itself; the directory is a sequence
of 128 bytes entries and the first of them is the root storage, the one that
carries the CLSID of the application that created the document.

Reference: <https://learn.microsoft.com/en-us/openspecs/windows_protocols/ms-cfb/>.
'''
from ..meta import Region
from ..fields import FieldSpec
from .enum import (
    CFBEntryType,
    CFBNodeColor,
    CFBByteOrder,
)


class CFBHeader(Region):
    SIZE = 512
    NAME = 'header'

    file_identifier          = FieldSpec(0, 8)
    file_uuid                = FieldSpec(8, 16)
    revision_number          = FieldSpec(24, 2)
    version_number           = FieldSpec(26, 2)
    byte_order               = FieldSpec(28, 2)    # FE FF for little endian
    sector_size              = FieldSpec(30, 2)    # as power of two
    short_sector_size        = FieldSpec(32, 2)    # as power of two
    reserved                 = FieldSpec(34, 10)
    total_sectors            = FieldSpec(44, 4)    # sectors used by the sector allocation table
    first_sector_id          = FieldSpec(48, 4)    # first sector of the directory stream
    reserved1                = FieldSpec(52, 4)
    min_standard_stream_size = FieldSpec(56, 4)
    first_short_sector_id    = FieldSpec(60, 4)
    total_short_sectors      = FieldSpec(64, 4)
    first_master_sector_id   = FieldSpec(68, 4)
    total_master_sectors     = FieldSpec(72, 4)
    master_allocation_table  = FieldSpec(76, 436)  # first 109 sector ids of the MSAT


class CFBDirectoryEntry(Region):
    '''The left/right/root ids are -1 (0xffffffff) when missing.'''
    SIZE = 128
    NAME = 'root'

    entry_name             = FieldSpec(0, 64)   # UTF-16 null terminated
    entry_name_length      = FieldSpec(64, 2)   # in bytes, terminator included
    type                   = FieldSpec(66, 1)
    node_color             = FieldSpec(67, 1)
    left_child_id          = FieldSpec(68, 4)
    right_child_id         = FieldSpec(72, 4)
    root_id                = FieldSpec(76, 4)
    clsid                  = FieldSpec(80, 16)
    user_flags             = FieldSpec(96, 4)
    creation_timestamp     = FieldSpec(100, 8)
    modification_timestamp = FieldSpec(108, 8)
    first_sector_id        = FieldSpec(116, 4)
    stream_size            = FieldSpec(120, 4)
    reserved               = FieldSpec(124, 4)
