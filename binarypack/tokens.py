"""
The format mini-language.

A format is a sequence of tokens, each one describing a slot of fixed width
in the packed data or switching the byte order for the tokens that follow it

    <       little endian (the default)
    >, !    big endian
    ?       boolean, 1 byte
    h, H    integer, 2 bytes
    i, I, l, L  integer, 4 bytes
    q, Q    integer, 8 bytes
    f       float, 4 bytes
    d       float, 8 bytes
    Ns      string, N bytes

the upper case variants are only a different spelling: every integer is
unpacked as signed.
"""
import logging
import re
from typing import Iterator, List, NamedTuple, Optional, Sequence, Union

from .enum import Endianess, Kind, TokenType
from .exceptions import UnknownToken


logger = logging.getLogger(__name__)


class Token(NamedTuple):
    text: str
    type: TokenType
    size: int
    endianess: Optional[Endianess] = None

    @property
    def kind(self) -> Optional[Kind]:
        return self.type.kind

    @property
    def is_marker(self) -> bool:
        return self.type == TokenType.ENDIANESS


MARKERS = {
    '<': Endianess.LITTLE_ENDIAN,
    '>': Endianess.BIG_ENDIAN,
    '!': Endianess.BIG_ENDIAN,
}

_char2type = {
    '?': (TokenType.BOOL, 1),
    'h': (TokenType.INT16, 2),
    'H': (TokenType.INT16, 2),
    'i': (TokenType.INT32, 4),
    'I': (TokenType.INT32, 4),
    'l': (TokenType.INT32, 4),
    'L': (TokenType.INT32, 4),
    'q': (TokenType.INT64, 8),
    'Q': (TokenType.INT64, 8),
    'f': (TokenType.FLOAT32, 4),
    'd': (TokenType.FLOAT64, 8),
}

# the tokens made of a single character, built once
_single = {_: Token(_, TokenType.ENDIANESS, 0, endianess) for _, endianess in MARKERS.items()}
_single.update({_: Token(_, _type, size) for _, (_type, size) in _char2type.items()})

_DIGITS = '0123456789'
_length_re = re.compile(r'[+-]?[0-9]+')

Format = Union[str, Sequence[Union[str, Token]]]


def _string_length(text: str) -> int:
    prefix = text.rstrip('s')
    if not _length_re.fullmatch(prefix):
        logger.warning(f"malformed length in string token '{text}', using 0")
        return 0

    length = int(prefix)
    if length < 0:
        logger.warning(f"negative length in string token '{text}', using 0")
        return 0

    return length


def parse_token(text: str) -> Token:
    '''Classify a single token string.

    Any token containing an "s" is a fixed length string: the trailing "s"
    are stripped and what remains is the length, if it's not a number the
    length is zero.'''
    if not isinstance(text, str):
        raise UnknownToken(text)

    if text in _single:
        return _single[text]

    if 's' in text:
        return Token(text, TokenType.FIXED_STRING, _string_length(text))

    raise UnknownToken(text)


def split_format(text: str) -> List[str]:
    '''Split a compact format like "!2I h 4s" into the list of its tokens.

    A count before "s" is the length of the string, before any other
    character it repeats it. Characters that are not part of the grammar
    are returned as they are, it's parse_token() that refuses them.'''
    tokens = []
    position = 0
    length = len(text)

    while position < length:
        if text[position].isspace():
            position += 1
            continue

        count_start = position
        while position < length and text[position] in _DIGITS:
            position += 1

        count = text[count_start:position]

        if position == length:
            raise UnknownToken(count)

        char = text[position]
        position += 1

        if char == 's':
            tokens.append(f'{count}s')
        elif char in MARKERS and count:
            raise UnknownToken(f'{count}{char}')
        else:
            tokens.extend([char] * (int(count) if count else 1))

    return tokens


def _as_list(format: Format) -> Sequence[Union[str, Token]]:
    if isinstance(format, str):
        return split_format(format)

    return format


def parse_format(format: Format) -> List[Token]:
    return list(iter_tokens(format))


def count_values(format: Format) -> int:
    '''Number of values the format consumes, i.e. the tokens that are not
    endianess markers. The tokens are not validated.'''
    count = 0
    for token in _as_list(format):
        text = token.text if isinstance(token, Token) else token
        if text not in MARKERS:
            count += 1

    return count


def iter_tokens(format: Format) -> Iterator[Token]:
    '''Parse the tokens one at a time, so that an error in the middle of the
    format is raised only when the walk gets there.'''
    for token in _as_list(format):
        yield token if isinstance(token, Token) else parse_token(token)
