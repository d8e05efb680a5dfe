"""Tests for BitArray."""

import pytest

from bf_triple.bit_array import BitArray


def test_new_array_is_empty():
    bits = BitArray(101)
    assert bits.capacity == 101
    assert len(bits) == 101
    assert len(bits.bits) == 13
    assert bits.count() == 0
    assert not any(bits.test(i) for i in range(101))


def test_set_and_test():
    bits = BitArray(101)
    bits.set(0)
    bits.set(42)
    bits.set(100)
    assert bits.test(0)
    assert bits.test(42)
    assert bits.test(100)
    assert not bits.test(41)
    assert bits.count() == 3
    assert list(bits.set_indices()) == [0, 42, 100]


def test_indices_are_reduced_modulo_capacity():
    bits = BitArray(101)
    bits.set(101 + 5)
    assert bits.test(5)
    assert bits.test(5 + 101 * 1000)
    bits.set(-1)
    assert bits.test(100)
    bits.set(2**64 + 7)
    assert bits.test((2**64 + 7) % 101)


def test_setting_twice_is_idempotent():
    bits = BitArray(16)
    bits.set(3)
    before = bytes(bits.bits)
    bits.set(3)
    assert bytes(bits.bits) == before
    assert bits.count() == 1


def test_fingerprint_tracks_contents():
    a = BitArray(64)
    b = BitArray(64)
    assert a.fingerprint() == b.fingerprint()
    a.set(10)
    assert a.fingerprint() != b.fingerprint()
    b.set(10)
    assert a.fingerprint() == b.fingerprint()


@pytest.mark.parametrize("capacity", [0, -8])
def test_invalid_capacity(capacity):
    with pytest.raises(ValueError):
        BitArray(capacity)
