# Copyright (c) 2023-2024, Andrey Dubovik <andrei@dubovik.eu>

"""Keccak-256 as used by Ethereum, over fixed-size bit vectors."""

# Load standard packages
from dataclasses import dataclass
from typing import Any

# Load local packages
from .bits import Array, bits_to_bytes, bits_to_hex, bytes_to_bits, check_bits
from .errors import InputTooLong, MalformedLength, UnsupportedOutputLength
from .padding import RATE, pad, pad_length
from .sponge import absorb_all, squeeze

# Define Keccak-256 constants
DIGEST_SIZE = 256
DEFAULT_MAX_INPUT_BITS = 65536


@dataclass(frozen=True)
class Keccak256:
    """A Keccak hasher whose input and output sizes are fixed on construction.

    The maximum input length is a configuration ceiling rather than a property
    of the sponge, raise it when longer messages are expected.
    """

    input_bits: int
    output_bits: int = DIGEST_SIZE
    max_input_bits: int = DEFAULT_MAX_INPUT_BITS
    verbose: bool = False

    def __post_init__(self) -> None:
        if self.input_bits < 0 or self.input_bits%8 != 0:
            raise MalformedLength(f'input length must be a whole number of bytes, got {self.input_bits} bits')
        if self.input_bits > self.max_input_bits:
            raise InputTooLong(f'input length {self.input_bits} exceeds the limit of {self.max_input_bits} bits')
        if not 0 < self.output_bits <= RATE:
            raise UnsupportedOutputLength(f'output length must be within 1..{RATE} bits, got {self.output_bits}')

    @property
    def padded_bits(self) -> int:
        return self.input_bits + pad_length(self.input_bits)

    @property
    def blocks(self) -> int:
        return self.padded_bits//RATE

    def __call__(self, bits: Any) -> Array:
        """Hash a bit sequence of exactly input_bits bits."""
        msg = check_bits(bits)
        if len(msg) != self.input_bits:
            raise MalformedLength(f'expected {self.input_bits} input bits, got {len(msg)}')
        s = absorb_all(pad(msg), self.verbose)
        return squeeze(s, self.output_bits)

    def digest(self, data: bytes) -> bytes:
        """Hash a byte string, return the digest as bytes."""
        return bits_to_bytes(self(bytes_to_bits(data)))

    def hexdigest(self, data: bytes) -> str:
        """Hash a byte string, return the digest as a hex string."""
        return bits_to_hex(self(bytes_to_bits(data)))


def keccak256(bits: Any, output_bits: int = DIGEST_SIZE) -> Array:
    """Hash a bit sequence of any byte-aligned length."""
    msg = check_bits(bits)
    n = len(msg)
    return Keccak256(n, output_bits, max_input_bits=n)(msg)


def keccak(msg: bytes) -> bytes:
    """Compute a Keccak message digest."""
    return bits_to_bytes(keccak256(bytes_to_bits(msg)))


def keccak_hex(msg: bytes) -> str:
    """Compute a Keccak message digest as a hex string."""
    return keccak(msg).hex()
