# Copyright (c) 2023-2024, Andrey Dubovik <andrei@dubovik.eu>

"""Bit-level Keccak-256 built from fixed-size, branch-free stages."""

from .errors import (
    InputTooLong,
    KeccakError,
    MalformedLength,
    NonBooleanBits,
    UnsupportedOutputLength,
)
from .keccak import DIGEST_SIZE, Keccak256, keccak, keccak256, keccak_hex

__all__ = [
    'DIGEST_SIZE',
    'InputTooLong',
    'Keccak256',
    'KeccakError',
    'MalformedLength',
    'NonBooleanBits',
    'UnsupportedOutputLength',
    'keccak',
    'keccak256',
    'keccak_hex',
]
