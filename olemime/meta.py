import copy
import logging
from enum import Enum, auto

from .exceptions import UnknownFieldException


class Endianess(Enum):
    LITTLE_ENDIAN = auto()
    BIG_ENDIAN    = auto()


class FieldBase(object):

    def contribute_to_region(self, cls, name):
        if name in cls._meta.specs:
            raise AttributeError(f'field {name} is already present in class {cls.__name__}')

        instance = copy.copy(self)
        instance._name = name
        cls._meta.specs[name] = instance
        setattr(cls, name, instance)


class Meta(object):
    """Class containing metadata about the region"""

    def __init__(self):
        self.fields = []
        self.specs = {}


class MetaRegion(type):
    '''Collects the FieldSpec declared in the class body into a closed schema.

    The bounds of each field are checked against the SIZE of the region
    when the class is created, so a broken layout fails at import time
    and slicing a buffer of the right size can never go out of range.'''

    def __new__(cls, names, bases, attrs):
        module = attrs.pop('__module__')
        classcell = attrs.pop('__classcell__', None)

        new_attrs = {
            '__module__': module,
        }
        if classcell is not None:
            new_attrs['__classcell__'] = classcell
        new_cls = super(MetaRegion, cls).__new__(cls, names, bases, new_attrs)

        new_cls._meta = Meta()

        # handle inheritance
        parents = [_ for _ in bases if isinstance(_, MetaRegion)]
        for parent in parents:
            for obj_name in parent._meta.fields:
                new_cls._meta.fields.append(obj_name)
                new_cls._meta.specs[obj_name] = parent._meta.specs[obj_name]
                setattr(new_cls, obj_name, parent._meta.specs[obj_name])

        cls.logger = logging.getLogger(__name__)

        for obj_name, obj in attrs.items():
            new_cls.add_to_class(obj_name, obj)

        new_cls.check_bounds()

        return new_cls

    def add_to_class(cls, name, value):
        if hasattr(value, 'contribute_to_region'):
            cls.logger.debug('contribute_to_region() found for field \'%s\'' % name)
            cls._meta.fields.append(name)
            value.contribute_to_region(cls, name)
        else:
            setattr(cls, name, value)

    def check_bounds(cls):
        size = getattr(cls, 'SIZE', None)
        if size is None:
            return

        for name in cls._meta.fields:
            spec = cls._meta.specs[name]
            if spec.end > size:
                raise ValueError(
                    f'field \'{name}\' of {cls.__name__} ends at {spec.end} '
                    f'that is past the region size of {size} bytes')


class Region(metaclass=MetaRegion):
    '''A fixed-size area of a file described by a closed set of named fields.

    Subclasses declare SIZE and a FieldSpec for each field, e.g.

        class Simple(Region):
            SIZE = 8
            magic  = FieldSpec(0, 4)
            length = FieldSpec(4, 4)
    '''
    SIZE = None
    NAME = 'region'

    @classmethod
    def get_field(cls, name):
        try:
            return cls._meta.specs[name]
        except KeyError:
            raise UnknownFieldException(
                chain=[cls.NAME, name],
                message=f'{cls.__name__} has no field named \'{name}\'') from None

    @classmethod
    def get_ordered_fields_name(cls):
        return list(cls._meta.fields)

    @classmethod
    def get_fields(cls):
        '''It returns a list of couples (name, spec) for each field.'''
        return [(_, cls._meta.specs[_]) for _ in cls._meta.fields]

    @classmethod
    def layout(cls):
        return {name: (spec.offset, spec.length) for name, spec in cls.get_fields()}

    @classmethod
    def extract(cls, buffer, name):
        '''Return the raw bytes of the field named "name" from a buffer
        containing the whole region.'''
        spec = cls.get_field(name)

        if len(buffer) != cls.SIZE:
            raise ValueError(f'{cls.__name__} needs a buffer of {cls.SIZE} bytes, got {len(buffer)}')

        return spec.slice(buffer)
