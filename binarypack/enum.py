from enum import Enum, auto


class Endianess(Enum):
    '''Byte order used for the tokens following a marker'''
    LITTLE_ENDIAN = auto()
    BIG_ENDIAN    = auto()


class Kind(Enum):
    '''The kind of value a data token accepts and produces'''
    BOOL    = 'bool'
    INT64   = 'int64'
    FLOAT32 = 'float32'
    FLOAT64 = 'float64'
    STRING  = 'string'


class TokenType(Enum):
    ENDIANESS    = auto()
    BOOL         = auto()
    INT16        = auto()
    INT32        = auto()
    INT64        = auto()
    FLOAT32      = auto()
    FLOAT64      = auto()
    FIXED_STRING = auto()

    @property
    def kind(self):
        return _type2kind.get(self)


_type2kind = {
    TokenType.BOOL:         Kind.BOOL,
    TokenType.INT16:        Kind.INT64,
    TokenType.INT32:        Kind.INT64,
    TokenType.INT64:        Kind.INT64,
    TokenType.FLOAT32:      Kind.FLOAT32,
    TokenType.FLOAT64:      Kind.FLOAT64,
    TokenType.FIXED_STRING: Kind.STRING,
}
