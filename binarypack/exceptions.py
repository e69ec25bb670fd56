class BinaryPackException(Exception):
    '''Base class to extend in order to throw exception in binarypack.

    Subclasses build their message from the attributes they are given, so
    the caller can inspect what went wrong without parsing strings.
    '''

    def __init__(self, message):
        self.message = message
        super().__init__(message)


class FormatTooLong(BinaryPackException):
    '''The format asks for more values than the ones passed.'''

    def __init__(self, expected, supplied):
        self.expected = expected
        self.supplied = supplied
        super().__init__(
            f'format is longer than values to pack ({expected} tokens, {supplied} values)')


class TypeMismatch(BinaryPackException):

    def __init__(self, token, expected, value):
        self.token = token
        self.expected = expected
        self.value = value
        super().__init__(
            f"type of passed value {value!r} doesn't match to expected '{token}' ({expected})")


class UnknownToken(BinaryPackException):

    def __init__(self, token):
        self.token = token
        super().__init__(f"unexpected format token: '{token}'")


class BufferTooShort(BinaryPackException):
    '''The data is smaller than the size the format describes.'''

    def __init__(self, expected, available):
        self.expected = expected
        self.available = available
        super().__init__(
            f'expected size {expected} is bigger than actual size of message ({available})')
