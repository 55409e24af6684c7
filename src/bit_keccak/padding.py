# Copyright (c) 2023-2024, Andrey Dubovik <andrei@dubovik.eu>

"""Multi-rate 10*1 padding for the Ethereum flavour of Keccak."""

# Load external packages
import numpy as np

# Load local packages
from .bits import Array
from .errors import MalformedLength

# Define Keccak-256 constants
RATE = 1088


def pad_length(m: int) -> int:
    """Compute the number of padding bits for an m-bit message."""
    if m < 0 or m%8 != 0:
        raise MalformedLength(f'message length must be a whole number of bytes, got {m} bits')
    z = (RATE - m%RATE + RATE - 2)%RATE
    return z + 2


def pad(msg: Array) -> Array:
    """Apply 10*1 padding."""
    m = len(msg)
    p = np.zeros(m + pad_length(m), dtype=np.uint8)
    p[:m] = msg
    p[m] = 1
    p[-1] = 1
    return p
