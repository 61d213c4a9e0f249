import io
import logging
import os

from .exceptions import (
    SourceUnreadableException,
    TruncatedRegionException,
)


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around path/bytes/file object to
    uniform its properties: we need only to read a given number of bytes
    at a given offset.

    The underlying object is closed on exit only if it was opened here, a
    file object passed by the caller is left untouched.'''
    def __init__(self, obj, name=None):
        '''Here we normalize the object in order to be accessed as a normal file object'''
        if isinstance(obj, os.PathLike):
            obj = os.fspath(obj)

        self._type = type(obj)
        self._owned = False
        self.obj = obj
        self.name = name

        init_method_name = 'init_%s' % self.obj.__class__.__name__

        init_method = getattr(self, init_method_name, self.init_fileobj)

        init_method()

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, self.name)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def init_str(self):
        '''We think this is a path'''
        logger.debug('opening path \'%s\'' % self.obj)
        path = self.obj
        self.name = self.name or path
        try:
            self.obj = open(path, 'rb')
        except OSError as e:
            raise SourceUnreadableException(chain=[], message=f'cannot open \'{path}\': {e}') from e
        self._owned = True

    def init_bytes(self):
        '''We think these are raw bytes'''
        self.name = self.name or '<bytes>'
        self.obj = io.BytesIO(self.obj)
        self._owned = True

    init_bytearray = init_bytes
    init_memoryview = init_bytes

    def init_fileobj(self):
        if not (hasattr(self.obj, 'read') and hasattr(self.obj, 'seek')):
            raise SourceUnreadableException(
                chain=[], message='\'%s\' is the wrong kind of source to use' % self._type.__name__)

        self.name = self.name or getattr(self.obj, 'name', None) or '<%s>' % self._type.__name__

    def close(self):
        if self._owned and not self.obj.closed:
            logger.debug('closing %s' % self.name)
            self.obj.close()

    def read_at(self, offset, size, chain=None):
        '''Read exactly "size" bytes starting from "offset".

        A short read means the source is smaller than the region asked.'''
        chain = chain or []
        try:
            self.obj.seek(offset)
            data = self.obj.read(size)
        except (OSError, OverflowError, ValueError) as e:
            raise SourceUnreadableException(
                chain=chain, message=f'failed to read {size} bytes at offset {offset} from {self.name}: {e}') from e

        if data is None or len(data) != size:
            raise TruncatedRegionException(
                chain=chain,
                message=f'unable to read {size} bytes at offset {offset} from {self.name}, '
                        f'file may be corrupted or not a compound file')

        return bytes(data)
