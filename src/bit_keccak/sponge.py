# Copyright (c) 2023-2024, Andrey Dubovik <andrei@dubovik.eu>

"""The absorb and squeeze phases of the Keccak-256 sponge."""

# Load external packages
import numpy as np

# Load local packages
from .bits import Array, xor
from .errors import MalformedLength, UnsupportedOutputLength
from .padding import RATE
from .permutation import STATE_SIZE, keccak_f

# Define Keccak-256 constants
CAPACITY = STATE_SIZE - RATE


def empty_state() -> Array:
    """Allocate the all-zero state that every sponge starts from."""
    return np.zeros(STATE_SIZE, dtype=np.uint8)


def absorb(s: Array, block: Array) -> Array:
    """XOR a block into the rate portion of the state, then permute."""
    if s.shape != (STATE_SIZE,):
        raise MalformedLength(f'state must hold {STATE_SIZE} bits, got shape {s.shape}')
    if block.shape != (RATE,):
        raise MalformedLength(f'block must hold {RATE} bits, got shape {block.shape}')
    p = np.concatenate((block, np.zeros(CAPACITY, dtype=np.uint8)))
    return keccak_f(xor(s, p))


def split_blocks(msg: Array) -> Array:
    """Cut a padded message into a (blocks, RATE) array."""
    if len(msg) == 0 or len(msg)%RATE != 0:
        raise MalformedLength(f'padded message must be a positive multiple of {RATE} bits, got {len(msg)}')
    return msg.reshape(-1, RATE)


def absorb_all(msg: Array, verbose: bool = False) -> Array:
    """Absorb a padded message block by block, return the final state."""
    blocks = split_blocks(msg)
    s = empty_state()
    for i, block in enumerate(blocks):
        if verbose:
            print(f"Absorbing block {i + 1}/{len(blocks)}")
        s = absorb(s, block)
    return s


def squeeze(s: Array, n: int) -> Array:
    """Extract the first n bits of the state."""
    if not 0 <= n <= RATE:
        raise UnsupportedOutputLength(f'output length must be within 0..{RATE} bits, got {n}')
    return s[:n].copy()
