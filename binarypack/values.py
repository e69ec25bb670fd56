"""
Typed values.

The packer doesn't guess: each data token accepts only one kind of value and
there is no conversion between them, so that a float never lands in an
integer slot by accident. Native python values are wrapped in the obvious way

    bool  -> Bool
    int   -> Int64 (if it fits into 64 bits)
    float -> Float64
    str   -> String

a 32 bits float must be indicated explicitly with Float32.
"""
import math
import struct

from .enum import Kind
from .tokens import Token


INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


class Value(object):
    """Base class to subclass from"""
    kind = None

    def __init__(self, value):
        self.value = self.normalize(value)

    @classmethod
    def normalize(cls, value):
        return value

    def _key(self):
        return self.value

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented

        return self._key() == other._key()

    def __hash__(self):
        return hash((self.__class__.__name__, self._key()))

    def __repr__(self):
        return '<%s(%r)>' % (self.__class__.__name__, self.value)

    def __str__(self):
        return str(self.value)


class Bool(Value):
    kind = Kind.BOOL

    @classmethod
    def normalize(cls, value):
        if not isinstance(value, bool):
            raise TypeError(f'{cls.__name__} needs a bool, not {value.__class__.__name__}')

        return value


class Int64(Value):
    kind = Kind.INT64

    @classmethod
    def normalize(cls, value):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f'{cls.__name__} needs an int, not {value.__class__.__name__}')

        if not INT64_MIN <= value <= INT64_MAX:
            raise ValueError(f'{value} does not fit into a signed 64 bits integer')

        return value

    def __repr__(self):
        return '<%s(%d)>' % (self.__class__.__name__, self.value)


class _Float(Value):
    _format = None

    def _key(self):
        # compare the representation so that NaN is equal to itself
        return struct.pack(self._format, self.value)


class Float32(_Float):
    """The value is stored rounded to the nearest binary32."""
    kind = Kind.FLOAT32
    _format = '<f'

    @classmethod
    def normalize(cls, value):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f'{cls.__name__} needs a float, not {value.__class__.__name__}')

        value = float(value)
        if math.isinf(value) or math.isnan(value):
            return value

        try:
            return struct.unpack(cls._format, struct.pack(cls._format, value))[0]
        except OverflowError:
            raise ValueError(f'{value} is out of range for a 32 bits float')


class Float64(_Float):
    kind = Kind.FLOAT64
    _format = '<d'

    @classmethod
    def normalize(cls, value):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f'{cls.__name__} needs a float, not {value.__class__.__name__}')

        return float(value)


class String(Value):
    kind = Kind.STRING

    @classmethod
    def normalize(cls, value):
        if not isinstance(value, str):
            raise TypeError(f'{cls.__name__} needs a str, not {value.__class__.__name__}')

        return value


_kind2class = {_.kind: _ for _ in (Bool, Int64, Float32, Float64, String)}


def wrap(value):
    '''Return the typed value corresponding to "value" or None if there is none.'''
    if isinstance(value, Value):
        return value

    # bool is a subclass of int
    if isinstance(value, bool):
        return Bool(value)

    if isinstance(value, int):
        return Int64(value) if INT64_MIN <= value <= INT64_MAX else None

    if isinstance(value, float):
        return Float64(value)

    if isinstance(value, str):
        return String(value)

    return None


def class_for(kind: Kind):
    return _kind2class[kind]


_true = ('1', 'true', 'yes', 'y', 'on')
_false = ('0', 'false', 'no', 'n', 'off')


def from_text(token: Token, text: str) -> Value:
    """Convert the textual representation of a value in the kind the token
    expects, it's useful when the values come from the command line."""
    kind = token.kind

    if kind is None:
        raise ValueError(f"token '{token.text}' doesn't take a value")

    if kind == Kind.BOOL:
        if text.lower() in _true:
            return Bool(True)
        if text.lower() in _false:
            return Bool(False)

        raise ValueError(f"'{text}' is not a boolean")

    if kind == Kind.INT64:
        return Int64(int(text, 0))

    if kind == Kind.STRING:
        return String(text)

    return class_for(kind)(float(text))
