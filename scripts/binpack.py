#!/usr/bin/env python3
'''
Pack/unpack values from the command line.

The format is in the compact form, e.g. '!2I h 4s'.
'''
import sys
import os
import logging

from binarypack import BinaryPack, BinaryPackException
from binarypack.tokens import parse_format
from binarypack.values import from_text


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)
logger = logging.getLogger(__name__)


def usage(progname):
    print(f'''usage: {progname} calcsize <format>
       {progname} pack <format> <value>...
       {progname} unpack <format> <path>

For example

 $ {progname} pack '!2I 4s' 1 2 DUMP
 0000000100000002504d5544

packs two big endian integers and a string.''')
    sys.exit(1)


def do_calcsize(bp, fmt):
    print(bp.calcsize(fmt))


def do_pack(bp, fmt, texts):
    data_tokens = [_ for _ in parse_format(fmt) if not _.is_marker]

    if len(texts) < len(data_tokens):
        usage(sys.argv[0])

    values = [from_text(token, text) for token, text in zip(data_tokens, texts)]

    print(bp.pack(fmt, values).hex())


def do_unpack(bp, fmt, path):
    for value in bp.read(fmt, path):
        print(repr(value))


if __name__ == '__main__':
    if len(sys.argv) < 3:
        usage(sys.argv[0])

    command = sys.argv[1]
    fmt = sys.argv[2]

    bp = BinaryPack()

    try:
        if command == 'calcsize':
            do_calcsize(bp, fmt)
        elif command == 'pack':
            do_pack(bp, fmt, sys.argv[3:])
        elif command == 'unpack' and len(sys.argv) > 3:
            do_unpack(bp, fmt, sys.argv[3])
        else:
            usage(sys.argv[0])
    except (BinaryPackException, ValueError, OSError) as e:
        logger.error(e)
        sys.exit(2)
