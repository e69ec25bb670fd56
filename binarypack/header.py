'''
Header of a message: a thin layer over BinaryPack so that the protocol
code doesn't need to know about the packer it's using.
'''
from typing import List, Sequence

from .core import BinaryPack
from .tokens import Format
from .values import Value


class Header(object):

    def __init__(self, packer: BinaryPack = None):
        self.bp = packer if packer is not None else BinaryPack()

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.bp!r})>'

    def pack(self, format: Format, headers: Sequence) -> bytes:
        return self.bp.pack(format, headers)

    def unpack(self, format: Format, header: bytes) -> List[Value]:
        return self.bp.unpack(format, header)

    def size(self, format: Format) -> int:
        return self.bp.calcsize(format)
