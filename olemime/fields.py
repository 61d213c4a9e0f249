"""
A FieldSpec is the position of a named field inside a fixed-size region:
nothing more than an offset and a length, both expressed in bytes.
"""
from .meta import FieldBase


class FieldSpec(FieldBase):
    """Immutable (offset, length) couple; the name is assigned when the
    spec is attached to a Region."""

    def __init__(self, offset, length):
        if not isinstance(offset, int) or offset < 0:
            raise ValueError(f'offset must be a non-negative integer, got {offset!r}')
        if not isinstance(length, int) or length <= 0:
            raise ValueError(f'length must be a positive integer, got {length!r}')

        self._offset = offset
        self._length = length
        self._name = None

    def __repr__(self):
        return '<%s(%s, offset=%d, length=%d)>' % (
            self.__class__.__name__,
            self._name,
            self._offset,
            self._length,
        )

    def __eq__(self, other):
        if not isinstance(other, FieldSpec):
            return NotImplemented
        return (self._offset, self._length) == (other._offset, other._length)

    def __hash__(self):
        return hash((self._offset, self._length))

    name   = property(fget=lambda self: self._name)
    offset = property(fget=lambda self: self._offset)
    length = property(fget=lambda self: self._length)

    @property
    def end(self):
        return self._offset + self._length

    def slice(self, buffer) -> bytes:
        if self.end > len(buffer):
            raise IndexError(f'field {self._name} [{self._offset}:{self.end}] out of a buffer of {len(buffer)} bytes')

        return bytes(buffer[self._offset:self.end])
