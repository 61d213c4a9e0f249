"""
Core module: the reader of a compound file.

Only the header and the root directory entry are read, that is enough
to tell what application created the document and so its MIME type.
"""
import logging
from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType

from .cfb import CFBHeader, CFBDirectoryEntry
from .cfb.enum import CFBByteOrder, CFBEntryType
from .codec import decode_unsigned, decode_unsigned_with, decode_uuid
from .exceptions import (
    OleMimeException,
    SourceUnreadableException,
    InvalidFileIdentifierException,
    InvalidRootDirectoryTypeException,
)
from .meta import Endianess
from .mime import MIME_TYPES, resolve_mime_type
from .sectors import sector_offset, sector_size
from .streams import Stream
from .validators import validate_file_identifier, validate_root_entry_type


class ReaderPhase(Enum):
    '''Enum to state the actual phase of the reader.

    There is no failed phase: a failure is signalled by the OleMimeException
    raised from the constructor, whose "phase" attribute is the last phase
    reached before failing.'''
    UNOPENED         = 0
    HEADER_READ      = auto()
    HEADER_VALIDATED = auto()
    ROOT_SECTOR_READ = auto()
    ROOT_VALIDATED   = auto()
    READY            = auto()


@dataclass(frozen=True)
class CompoundFileInfo:
    file_identifier: bytes
    filename: str
    file_uuid: str
    revision_number: int
    version_number: int
    little_endian: bool
    root_entry_type: int
    root_entry_name: str
    sector_size: int
    clsid: str
    mime_type: str


class CompoundFile(object):
    """
    A compound file whose header and root directory entry have been
    read and validated.

    The constructor accepts a path, raw bytes or a seekable binary file
    object; a path is opened and closed before the constructor returns, so
    no file descriptor is kept alive by the instance.

    Construction is all or nothing: if any step fails an OleMimeException
    is raised and no instance is returned. The regions are read only once,
    by the constructor.
    """

    def __init__(self, source, name=None, mime_types=MIME_TYPES):
        self.logger = logging.getLogger(__name__)
        self._phase = ReaderPhase.UNOPENED
        self._mime_types = MappingProxyType(dict(mime_types))
        self._header = None
        self._root = None
        self._root_offset = None
        self.filename = name

        try:
            with Stream(source, name=name) as stream:
                self.filename = stream.name
                self.logger.debug('unpacking \'%s\' from %s' % (self.__class__.__name__, stream))
                self._header, self._root, self._root_offset = self._unpack(stream)
        except OleMimeException as e:
            e.phase = self._phase
            self.logger.warning('failed to read compound file %s after %s: %s' % (
                self.filename, self._phase.name, e))
            raise

        self._set_phase(ReaderPhase.READY)

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, self.filename)

    @classmethod
    def from_bytes(cls, data, name=None, **kwargs):
        return cls(bytes(data), name=name, **kwargs)

    @property
    def phase(self):
        return self._phase

    def _set_phase(self, phase):
        self.logger.debug('%s -> %s' % (self._phase.name, phase.name))
        self._phase = phase

    def _unpack(self, stream):
        '''Walk the reader through its phases: header, root sector, root validated.

        Nothing is stored on the instance here, the caller assigns the
        regions only when all the checks have passed.'''
        header = stream.read_at(0, CFBHeader.SIZE, chain=[CFBHeader.NAME])
        self._set_phase(ReaderPhase.HEADER_READ)

        file_identifier = CFBHeader.extract(header, 'file_identifier')
        if not validate_file_identifier(file_identifier):
            raise InvalidFileIdentifierException(
                chain=[CFBHeader.NAME, 'file_identifier'],
                message=f'invalid file identifier {file_identifier.hex()}, not a compound file')
        self._set_phase(ReaderPhase.HEADER_VALIDATED)

        little_endian = CFBHeader.extract(header, 'byte_order')[0] == CFBByteOrder.LITTLE_ENDIAN
        sector_id = decode_unsigned(CFBHeader.extract(header, 'first_sector_id'), little_endian)
        exponent = decode_unsigned(CFBHeader.extract(header, 'sector_size'), little_endian)
        self.logger.debug('root directory at sector %d, sector size 2**%d' % (sector_id, exponent))

        try:
            root_offset = sector_offset(sector_id, exponent)
        except OverflowError as e:
            raise SourceUnreadableException(
                chain=[CFBDirectoryEntry.NAME], message=str(e)) from e

        self.logger.debug('root directory entry at offset 0x%x' % root_offset)
        root = stream.read_at(root_offset, CFBDirectoryEntry.SIZE, chain=[CFBDirectoryEntry.NAME])
        self._set_phase(ReaderPhase.ROOT_SECTOR_READ)

        entry_type = CFBDirectoryEntry.extract(root, 'type')
        if not validate_root_entry_type(entry_type):
            raise InvalidRootDirectoryTypeException(
                chain=[CFBDirectoryEntry.NAME, 'type'],
                message=f'invalid type 0x{entry_type.hex()} found while validating root directory, not a compound file')
        self._set_phase(ReaderPhase.ROOT_VALIDATED)

        return header, root, root_offset

    def get_header_field(self, name) -> bytes:
        return CFBHeader.extract(self._header, name)

    def get_root_field(self, name) -> bytes:
        return CFBDirectoryEntry.extract(self._root, name)

    def get_header_value(self, name) -> int:
        '''The field decoded as unsigned integer using the byte order of the file.'''
        return decode_unsigned_with(self.get_header_field(name), self.endianess)

    def get_root_value(self, name) -> int:
        return decode_unsigned_with(self.get_root_field(name), self.endianess)

    def is_little_endian(self) -> bool:
        return self.get_header_field('byte_order')[0] == CFBByteOrder.LITTLE_ENDIAN

    @property
    def endianess(self):
        return Endianess.LITTLE_ENDIAN if self.is_little_endian() else Endianess.BIG_ENDIAN

    @property
    def root_sector_offset(self):
        return self._root_offset

    def get_clsid(self) -> str:
        # the UUID layout is fixed, the byte order of the file doesn't apply
        return decode_uuid(self.get_root_field('clsid'))

    def get_mime_type(self) -> str:
        return resolve_mime_type(self.get_clsid(), table=self._mime_types)

    def get_root_entry_name(self) -> str:
        length = self.get_root_value('entry_name_length')
        raw = self.get_root_field('entry_name')[:length]
        return raw.decode('utf-16-le', errors='replace').rstrip('\x00')

    def describe(self) -> CompoundFileInfo:
        root_type = self.get_root_field('type')[0]

        return CompoundFileInfo(
            file_identifier=self.get_header_field('file_identifier'),
            filename=self.filename,
            file_uuid=decode_uuid(self.get_header_field('file_uuid')),
            revision_number=self.get_header_value('revision_number'),
            version_number=self.get_header_value('version_number'),
            little_endian=self.is_little_endian(),
            root_entry_type=CFBEntryType(root_type),
            root_entry_name=self.get_root_entry_name(),
            sector_size=sector_size(self.get_header_value('sector_size')),
            clsid=self.get_clsid(),
            mime_type=self.get_mime_type(),
        )


def identify(source, **kwargs) -> str:
    '''Return the MIME type of the compound file at "source".'''
    return CompoundFile(source, **kwargs).get_mime_type()
