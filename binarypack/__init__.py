"""
# Binarypack: values to bytes and back.

A format is a list of tokens, each one describing a slot of fixed size,
similar to the ones used by the struct module

    >>> from binarypack import pack, unpack, calcsize
    >>> calcsize(['I', 'I', 'I', '4s'])
    16
    >>> pack(['!', 'I', '4s'], [1, 'DUMP'])
    b'\\x00\\x00\\x00\\x01PMUD'

Three operations are defined

 1. calcsize(): the number of bytes the format describes, endianess
    markers don't count.

 2. pack(): encode the values into bytes, the values must be of the kind
    each token expects (see binarypack.values) and there must be at least
    one for each data token.

 3. unpack(): decode the bytes into typed values, one for each data token.

Note that in big endian a string is written with its characters in
reverse order and the padding in front, this is not the usual byte order
swap but it's what is found on the wire so it's kept as it is.
"""
from .core import BinaryPack
from .enum import Endianess, Kind, TokenType
from .exceptions import (
    BinaryPackException,
    BufferTooShort,
    FormatTooLong,
    TypeMismatch,
    UnknownToken,
)
from .header import Header
from .streams import Stream
from .tokens import Token, parse_format, parse_token, split_format
from .values import Bool, Float32, Float64, Int64, String, Value


_default = BinaryPack()

pack = _default.pack
unpack = _default.unpack
calcsize = _default.calcsize
