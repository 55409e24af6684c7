# Copyright (c) 2023-2024, Andrey Dubovik <andrei@dubovik.eu>

"""The Keccak-f[1600] permutation over a bit-level state.

The flat state holds lane (x, y) at bits (5*y + x)*WIDTH onwards. The steps
below work on a (5, 5, WIDTH) view indexed as [x, y, z] and return fresh
arrays, their arguments are never modified.
"""

# Load standard packages
import math

# Load external packages
import numpy as np
import numpy.typing as ntp

# Load local packages
from .bits import Array, and_, not_, rotl, xor
from .errors import MalformedLength

# Define Keccak-f[1600] constants
STATE_SIZE = 1600
WIDTH = STATE_SIZE//25
LOG_WIDTH = int(math.log2(WIDTH))
ROUNDS = 12 + 2*LOG_WIDTH


def rc(t: int) -> int:
    """Compute the output bit of the round constant LFSR at step t."""
    r = [1,0,0,0,0,0,0,0]
    for _ in range(t%255):
        r = [0] + r
        r[0] ^= r[8]
        r[4] ^= r[8]
        r[5] ^= r[8]
        r[6] ^= r[8]
        r = r[:8]
    return r[0]


def rotation_offsets() -> ntp.NDArray[np.int64]:
    """Tabulate rho offsets, indexed by [x, y]."""
    offsets = np.zeros((5, 5), dtype=np.int64)
    x, y = 1, 0
    for t in range(24):
        offsets[x,y] = (t + 1)*(t + 2)//2%WIDTH
        x, y = y, (2*x + 3*y)%5
    return offsets


def round_constants() -> Array:
    """Tabulate iota constants as a (ROUNDS, WIDTH) bit array."""
    constants = np.zeros((ROUNDS, WIDTH), dtype=np.uint8)
    for i in range(ROUNDS):
        for j in range(LOG_WIDTH + 1):
            constants[i,2**j-1] = rc(j + 7*i)
    return constants


ROTATION_OFFSETS = rotation_offsets()
ROUND_CONSTANTS = round_constants()
ROTATION_OFFSETS.flags.writeable = False
ROUND_CONSTANTS.flags.writeable = False


def round_constant(i: int) -> int:
    """Get the constant of round i as an integer, bit z having weight 2**z."""
    return sum(int(b) << z for z, b in enumerate(ROUND_CONSTANTS[i]))


def to_lanes(s: Array) -> Array:
    """Reshape a flat state into a [x, y, z] view."""
    return s.reshape(5, 5, WIDTH).swapaxes(0, 1)


def from_lanes(a: Array) -> Array:
    """Flatten a [x, y, z] array into a state."""
    return a.swapaxes(0, 1).reshape(-1)


def theta(a: Array) -> Array:
    c = xor(*(a[:,y,:] for y in range(5)))
    x, = np.indices((5,))
    d = xor(c[(x-1)%5], rotl(c[(x+1)%5], 1))
    return xor(a, d[:,None,:])


def rho(a: Array) -> Array:
    out = np.empty_like(a)
    for x in range(5):
        for y in range(5):
            out[x,y] = rotl(a[x,y], ROTATION_OFFSETS[x,y])
    return out


def pi(a: Array) -> Array:
    # Lane (x, y) moves to (y, 2x + 3y)
    x, y = np.indices((5, 5))
    return a[(x+3*y)%5,x]


def rho_pi(a: Array) -> Array:
    """Rotate every lane by its fixed offset, then relocate the lanes."""
    return pi(rho(a))


def chi(a: Array) -> Array:
    """Apply the only non-linear step, row by row."""
    x, = np.indices((5,))
    return xor(a[x], and_(not_(a[(x+1)%5]), a[(x+2)%5]))


def iota(a: Array, i: int) -> Array:
    """Inject the round constant into lane (0, 0)."""
    a = a.copy()
    a[0,0] ^= ROUND_CONSTANTS[i]
    return a


def keccak_round(a: Array, i: int) -> Array:
    """Compute round i of Keccak-f[1600] on a [x, y, z] array."""
    return iota(chi(rho_pi(theta(a))), i)


def keccak_f(s: Array) -> Array:
    """Compute a Keccak permutation."""
    if s.shape != (STATE_SIZE,):
        raise MalformedLength(f'state must hold {STATE_SIZE} bits, got shape {s.shape}')
    a = to_lanes(s)
    for i in range(ROUNDS):
        a = keccak_round(a, i)
    return from_lanes(a)
