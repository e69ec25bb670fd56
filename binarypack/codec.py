"""
Encoding and decoding of the single slots.

Every function takes the byte order explicitly: the packer is the one
tracking it while walking the format.
"""
import logging
import struct

from bitstring import Bits

from .enum import Endianess


logger = logging.getLogger(__name__)


def _struct_format(fmt: str, endianess: Endianess) -> str:
    return '%s%s' % ('<' if endianess == Endianess.LITTLE_ENDIAN else '>', fmt)


def encode_integer(value: int, size: int, endianess: Endianess) -> bytes:
    '''Two's complement of value truncated to the lowest "size" bytes.'''
    bits = Bits(int=value, length=64)[-size * 8:]
    raw = bits.bytes

    return raw if endianess == Endianess.BIG_ENDIAN else raw[::-1]


def decode_integer(raw: bytes, endianess: Endianess) -> int:
    '''Sign extend the bytes into a python int.'''
    if endianess == Endianess.LITTLE_ENDIAN:
        raw = raw[::-1]

    return Bits(raw).int


def encode_bool(value: bool, endianess: Endianess) -> bytes:
    return encode_integer(1 if value else 0, 1, endianess)


def decode_bool(raw: bytes, endianess: Endianess) -> bool:
    return decode_integer(raw, endianess) > 0


_size2float = {
    4: 'f',
    8: 'd',
}


def encode_float(value: float, size: int, endianess: Endianess) -> bytes:
    return struct.pack(_struct_format(_size2float[size], endianess), value)


def decode_float(raw: bytes, endianess: Endianess) -> float:
    return struct.unpack(_struct_format(_size2float[len(raw)], endianess), raw)[0]


def _reverse(raw: bytes, encoding: str) -> bytes:
    '''Reverse the order of the characters, not of the bytes.

    Bytes that don't decode (a multibyte character cut by the truncation)
    are kept as they are, so the length doesn't change.'''
    return raw.decode(encoding, 'surrogateescape')[::-1].encode(encoding, 'surrogateescape')


def encode_string(value: str, size: int, endianess: Endianess, encoding: str = 'utf-8') -> bytes:
    """The string is cut to "size" bytes or padded with zeros to reach it.

    In big endian the padding goes in front and the characters are reversed,
    so that "DUMP" packed as "5s" becomes b'\\x00PMUD'.
    """
    raw = value.encode(encoding)
    if len(raw) > size:
        logger.debug(f'string {value!r} truncated to {size} bytes')
        raw = raw[:size]

    padding = b'\x00' * (size - len(raw))

    if endianess == Endianess.BIG_ENDIAN:
        return padding + _reverse(raw, encoding)

    return raw + padding


def decode_string(raw: bytes, endianess: Endianess, encoding: str = 'utf-8', errors: str = 'replace') -> str:
    value = raw.decode(encoding, errors)

    if endianess == Endianess.BIG_ENDIAN:
        value = value[::-1]

    return value.rstrip('\x00')
