"""
Core module: packing and unpacking of values following a format.

"""
import logging
from typing import Iterator, List, Sequence, Tuple

from . import codec
from .enum import Endianess, Kind
from .exceptions import BufferTooShort, FormatTooLong, TypeMismatch
from .streams import Stream
from .tokens import Format, Token, count_values, iter_tokens
from .values import Value, class_for, wrap


class BinaryPack(object):
    """
    Converts between a list of values and their binary representation,
    the layout is described by a format (see binarypack.tokens).

    The instance holds only its configuration, the byte order changed by
    the markers lives for the duration of a single call, so the same
    instance can be used from different threads.

        >>> bp = BinaryPack()
        >>> bp.pack(['>', 'H', '4s'], [2300, 'DUMP'])
        b'\\x08\\xfcPMUD'
    """

    def __init__(self, endianess=Endianess.LITTLE_ENDIAN, encoding='utf-8', errors='replace'):
        self.logger = logging.getLogger(__name__)
        self.endianess = endianess
        self.encoding = encoding
        self.errors = errors

    def __repr__(self):
        return '<%s(%s,%s)>' % (self.__class__.__name__, self.endianess.name, self.encoding)

    def _walk(self, format: Format) -> Iterator[Tuple[Token, Endianess]]:
        '''Yield the data tokens together with the byte order in effect for each of them.'''
        endianess = self.endianess
        for token in iter_tokens(format):
            if token.is_marker:
                self.logger.debug('switching to %s' % token.endianess.name)
                endianess = token.endianess
                continue

            yield token, endianess

    def calcsize(self, format: Format) -> int:
        '''Return the size of the data corresponding to the given format.'''
        return sum(token.size for token in iter_tokens(format))

    def _check(self, token: Token, value) -> Value:
        typed = wrap(value)
        if typed is None or typed.kind != token.kind:
            raise TypeMismatch(token.text, f'{token.kind.value}, {token.size} bytes', value)

        return typed

    def _encode(self, token: Token, value, endianess: Endianess) -> bytes:
        kind = token.kind

        if kind == Kind.BOOL:
            return codec.encode_bool(value, endianess)
        if kind == Kind.INT64:
            return codec.encode_integer(value, token.size, endianess)
        if kind == Kind.STRING:
            return codec.encode_string(value, token.size, endianess, self.encoding)

        return codec.encode_float(value, token.size, endianess)

    def _decode(self, token: Token, raw: bytes, endianess: Endianess) -> Value:
        kind = token.kind

        if kind == Kind.BOOL:
            value = codec.decode_bool(raw, endianess)
        elif kind == Kind.INT64:
            value = codec.decode_integer(raw, endianess)
        elif kind == Kind.STRING:
            value = codec.decode_string(raw, endianess, self.encoding, self.errors)
        else:
            value = codec.decode_float(raw, endianess)

        return class_for(kind)(value)

    def pack(self, format: Format, values: Sequence) -> bytes:
        '''Return the bytes containing the values packed according to the given format.

        The values must match the kind required by each token exactly, the values
        exceeding the format are ignored.'''
        values = list(values)
        expected = count_values(format)

        if expected > len(values):
            raise FormatTooLong(expected, len(values))

        result = []
        for index, (token, endianess) in enumerate(self._walk(format)):
            value = self._check(token, values[index])
            self.logger.debug('packing %r as \'%s\'' % (value, token.text))
            result.append(self._encode(token, value.value, endianess))

        return b''.join(result)

    def unpack(self, format: Format, data: bytes, offset: int = 0) -> List[Value]:
        '''Unpack the data (presumably packed by pack()) according to the given format.

        The data must contain at least calcsize(format) bytes starting from offset,
        what remains after is ignored.'''
        if not 0 <= offset <= len(data):
            raise ValueError(f'offset must be non-negative and at most {len(data)}, not {offset}')

        expected = self.calcsize(format)
        available = len(data) - offset

        if expected > available:
            raise BufferTooShort(expected, available)

        result = []
        for token, endianess in self._walk(format):
            raw = bytes(data[offset:offset + token.size])
            offset += token.size

            value = self._decode(token, raw, endianess)
            self.logger.debug('unpacked %r from \'%s\'' % (value, token.text))
            result.append(value)

        return result

    def read(self, format: Format, stream) -> List[Value]:
        '''Read from the stream exactly the bytes the format needs and unpack them.'''
        wrapped = stream if isinstance(stream, Stream) else Stream(stream)
        try:
            data = wrapped.read(self.calcsize(format))
        finally:
            if wrapped is not stream:
                wrapped.close()

        return self.unpack(format, data)

    def write(self, format: Format, values: Sequence, stream) -> int:
        '''Pack the values and write them into the stream, returns the number of bytes written.

        A path is created (or truncated) and closed when done.'''
        if isinstance(stream, (bytes, bytearray)):
            raise ValueError('cannot write into bytes, use a Stream or a file object')

        data = self.pack(format, values)

        wrapped = stream if isinstance(stream, Stream) else Stream(stream, flags='w')
        try:
            wrapped.write(data)
        finally:
            if wrapped is not stream:
                wrapped.close()

        return len(data)
