"""Hash functions over the bit layout of 32-bit IEEE 754 floats."""

from __future__ import annotations

import struct

_MANTISSA_BITS = 23
_MANTISSA_MASK = (1 << _MANTISSA_BITS) - 1
_EXPONENT_MASK = 0xFF


def _check_modulus(modulus: int) -> None:
    if modulus <= 0:
        raise ValueError("modulus must be positive")


def _bits(number: float) -> int:
    return struct.unpack("<I", struct.pack("<f", number))[0]


def float_bits(number: float, modulus: int) -> int:
    """Hash by the raw 32-bit pattern of ``number``."""
    _check_modulus(modulus)
    return _bits(number) % modulus


def exponent(number: float, modulus: int) -> int:
    """Hash by the 8-bit biased exponent field."""
    _check_modulus(modulus)
    return ((_bits(number) >> _MANTISSA_BITS) & _EXPONENT_MASK) % modulus


def mantissa(number: float, modulus: int) -> int:
    """Hash by the 23-bit mantissa field."""
    _check_modulus(modulus)
    return (_bits(number) & _MANTISSA_MASK) % modulus


def multiply_hash(number: float, modulus: int) -> int:
    """Hash by the product of the mantissa and exponent hashes."""
    return (mantissa(number, modulus) * exponent(number, modulus)) % modulus