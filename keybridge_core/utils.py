"""
keybridge_core.utils
--------------------
Integer codec shared by every converter.

The native side stores numeric key fields as big-endian unsigned byte
strings, the library side as Python ints whose byte export is minimal
two's-complement. These helpers move a single field between the two
without changing its value:

- to_big_integer(): unsigned bytes -> int (never negative)
- to_fixed_bytes(): int -> minimal unsigned bytes, optionally padded
- to_signed_bytes(): int -> library-style signed bytes (sign byte kept)
- strip_sign_byte(): drop a leading 0x00 that only carries the sign
"""

from __future__ import annotations
from typing import Optional



def to_big_integer(data: Optional[bytes]) -> int:
    if not data:
        return 0
    return int.from_bytes(data, "big", signed=False)


def to_signed_bytes(value: int) -> bytes:
    # Same length rule as the library's two's-complement export:
    # one extra byte whenever the top bit of the magnitude is set.
    size = (value.bit_length() >> 3) + 1
    return value.to_bytes(size, "big", signed=True)


def strip_sign_byte(data: bytes) -> bytes:
    if len(data) > 1 and data[0] == 0 and data[1] & 0x80:
        return data[1:]
    return data


def to_fixed_bytes(value: int, size: Optional[int] = None) -> bytes:
    """
    Minimal big-endian unsigned encoding of a non-negative integer.

    Starts from the library's signed export and drops its sign byte.
    Zero encodes to b"". When size is given the result is left-padded
    with zero bytes to exactly that width; the consuming structure owns
    the width, this function only refuses values that cannot fit.
    """
    if value < 0:
        raise ValueError("Bad negative uint.")
    data = strip_sign_byte(to_signed_bytes(value)) if value else b""
    if size is None:
        return data
    if len(data) > size:
        raise ValueError(f"uint needs {len(data)} bytes, field holds {size}.")
    return data.rjust(size, b"\0")
