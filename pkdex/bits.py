"""Bit and word access into a save buffer.

Flags are packed least significant bit first: bit `b` of a region starting at
byte `off` lives in byte ``off + b // 8`` under mask ``1 << (b % 8)``.
"""

import struct


def get_bit(buf, off, bit):
    return (buf[off + bit // 8] >> (bit % 8)) & 1 == 1

def set_bit(buf, off, bit, value=True):
    """Sets or clears a single bit, leaving the rest of its byte alone."""
    pos = off + bit // 8
    mask = 1 << (bit % 8)
    if value:
        buf[pos] |= mask
    else:
        buf[pos] &= ~mask & 0xFF

def read_u16(buf, off):
    return struct.unpack_from('<H', buf, off)[0]

def write_u16(buf, off, value):
    struct.pack_into('<H', buf, off, value)
