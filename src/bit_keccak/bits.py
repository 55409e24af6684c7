# Copyright (c) 2023-2024, Andrey Dubovik <andrei@dubovik.eu>

"""Elementary Boolean operations over fixed-size bit vectors.

A bit vector is a NumPy array of dtype uint8 whose elements are 0 or 1. The
last axis of a multidimensional array is treated as a lane, i.e. rotations act
along it. Byte conversions use little-endian bit order within each byte, which
is the order Keccak assigns to message bytes.
"""

# Load standard packages
from functools import reduce
from typing import Any

# Load external packages
import numpy as np
import numpy.typing as ntp

# Load local packages
from .errors import MalformedLength, NonBooleanBits

# Define types
Array = ntp.NDArray[np.uint8]


def xor(*vs: Array) -> Array:
    """Compute the bitwise XOR of one or more bit arrays."""
    if not vs:
        raise MalformedLength('xor needs at least one operand')
    return reduce(np.bitwise_xor, vs[1:], vs[0].copy())


def and_(a: Array, b: Array) -> Array:
    """Compute the bitwise AND of two bit arrays."""
    return a & b


def not_(a: Array) -> Array:
    """Complement a bit array."""
    return a ^ 1


def rotl(v: Array, n: int) -> Array:
    """Rotate lanes (the last axis) left by n positions."""
    w = v.shape[-1]
    z, = np.indices((w,))
    return v[..., (z - n)%w]


def is_boolean(a: Array) -> bool:
    """Check that every element of an array is either 0 or 1."""
    return bool(np.all((a == 0) | (a == 1)))


def check_bits(bits: Any) -> Array:
    """Validate a caller-supplied bit sequence, return a private uint8 copy."""
    a = np.asarray(bits)
    if a.ndim != 1:
        raise MalformedLength(f'bit sequence must be one-dimensional, got shape {a.shape}')
    if a.size and not (np.issubdtype(a.dtype, np.integer) or a.dtype == np.bool_):
        raise NonBooleanBits(f'bit sequence must be integer-valued, got {a.dtype}')
    if not is_boolean(a):
        raise NonBooleanBits('bit sequence contains values other than 0 and 1')
    return a.astype(np.uint8)


def bytes_to_bits(data: bytes) -> Array:
    """Unpack bytes into bits, least significant bit of each byte first."""
    return np.unpackbits(np.frombuffer(data, dtype=np.uint8), bitorder='little')


def bits_to_bytes(bits: Array) -> bytes:
    """Pack bits into bytes, least significant bit of each byte first."""
    if len(bits)%8 != 0:
        raise MalformedLength(f'cannot pack {len(bits)} bits into whole bytes')
    return np.packbits(np.asarray(bits, dtype=np.uint8), bitorder='little').tobytes()


def bits_to_hex(bits: Array) -> str:
    """Format a bit sequence as a hex string."""
    return bits_to_bytes(bits).hex()
