"""Step floating-point values to their next representable neighbour.

The grid sweep advances its axes with these helpers instead of a fixed
increment. Both work on the IEEE-754 bit pattern rather than on arithmetic,
since platforms that flush subnormals to zero would otherwise collapse the
smallest magnitudes.
"""

from __future__ import annotations

import math
import struct

_DOUBLE_SIGN_MASK = 0x7FFF_FFFF_FFFF_FFFF
_SINGLE_SIGN_MASK = 0x7FFF_FFFF
# Smallest positive subnormal in both encodings.
_TINY_BITS = 0x1


def _next_upper_bits(bits: int, sign_mask: int) -> int:
    magnitude = bits & sign_mask
    if magnitude == 0:
        return _TINY_BITS
    if bits == magnitude:
        return bits + 1
    return bits - 1


def next_upper(value: float) -> float:
    """Return the smallest double strictly greater than ``value``.

    NaN and positive infinity are returned unchanged. Both zeros step to the
    smallest positive subnormal, and negative values step toward zero.
    """
    if math.isnan(value) or value == math.inf:
        return value
    (bits,) = struct.unpack("<Q", struct.pack("<d", value))
    (result,) = struct.unpack("<d", struct.pack("<Q", _next_upper_bits(bits, _DOUBLE_SIGN_MASK)))
    return result


def next_upper_single(value: float) -> float:
    """Single-precision counterpart of :func:`next_upper`.

    ``value`` is rounded to the nearest single-precision float first; the
    result is exactly representable in single precision. Finite values outside
    the single-precision range raise ``OverflowError`` from :mod:`struct`.
    """
    if math.isnan(value) or value == math.inf:
        return value
    (bits,) = struct.unpack("<I", struct.pack("<f", value))
    (result,) = struct.unpack("<f", struct.pack("<I", _next_upper_bits(bits, _SINGLE_SIGN_MASK)))
    return result


def round_single(value: float) -> float:
    """Round ``value`` to the nearest single-precision float."""
    (result,) = struct.unpack("<f", struct.pack("<f", value))
    return result
