import numpy as np
import pytest

from bit_keccak.bits import (
    and_, bits_to_bytes, bits_to_hex, bytes_to_bits, check_bits,
    is_boolean, not_, rotl, xor,
)
from bit_keccak.errors import MalformedLength, NonBooleanBits


def test_gates():
    a = np.array([0, 0, 1, 1], dtype=np.uint8)
    b = np.array([0, 1, 0, 1], dtype=np.uint8)
    assert list(xor(a, b)) == [0, 1, 1, 0]
    assert list(and_(a, b)) == [0, 0, 0, 1]
    assert list(not_(a)) == [1, 1, 0, 0]
    assert list(xor(a, b, b)) == list(a)


def test_xor_does_not_alias():
    a = np.array([1, 0], dtype=np.uint8)
    out = xor(a)
    out[0] = 0
    assert a[0] == 1


def test_rotl():
    v = np.zeros(64, dtype=np.uint8)
    v[63] = 1
    assert np.flatnonzero(rotl(v, 1)).tolist() == [0]
    assert np.flatnonzero(rotl(v, 64)).tolist() == [63]
    lanes = np.zeros((2, 8), dtype=np.uint8)
    lanes[:, 2] = 1
    assert np.flatnonzero(rotl(lanes, 3)[1]).tolist() == [5]


def test_byte_order_is_little_endian():
    bits = bytes_to_bits(b'\x01\x80')
    assert bits.tolist() == [1, 0, 0, 0, 0, 0, 0, 0] + [0]*7 + [1]
    assert bits_to_bytes(bits) == b'\x01\x80'
    assert bits_to_hex(bits) == '0180'


def test_bits_to_bytes_rejects_partial_bytes():
    with pytest.raises(MalformedLength):
        bits_to_bytes(np.zeros(9, dtype=np.uint8))


def test_check_bits():
    assert is_boolean(np.array([0, 1, 1]))
    assert not is_boolean(np.array([0, 2]))
    a = check_bits([1, 0, True])
    assert a.dtype == np.uint8 and a.tolist() == [1, 0, 1]
    assert check_bits([]).size == 0
    with pytest.raises(NonBooleanBits):
        check_bits([0, 1, 2])
    with pytest.raises(NonBooleanBits):
        check_bits([0.5, 1.0])
    with pytest.raises(MalformedLength):
        check_bits(np.zeros((2, 8)))


def test_xor_needs_an_operand():
    with pytest.raises(MalformedLength):
        xor()
