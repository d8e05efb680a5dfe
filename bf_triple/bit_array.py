"""Fixed-capacity bit array packed into a ``bytearray``."""
from __future__ import annotations

from typing import Iterator

import xxhash


class BitArray:
    """Monotonic bitset: bits can be set and tested, never cleared.

    Every index is reduced modulo the capacity before use, so callers may pass
    raw hash values.
    """

    __slots__ = ("_capacity", "_bits")

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")

        self._capacity = capacity
        self._bits = bytearray((capacity + 7) // 8)

    @property
    def capacity(self) -> int:
        return self._capacity

    def set(self, index: int) -> None:
        """Mark bit ``index mod capacity``."""
        bit_index = index % self._capacity
        self._bits[bit_index >> 3] |= 1 << (bit_index & 7)

    def test(self, index: int) -> bool:
        """Return whether bit ``index mod capacity`` is set."""
        bit_index = index % self._capacity
        return bool(self._bits[bit_index >> 3] & (1 << (bit_index & 7)))

    def count(self) -> int:
        """Number of set bits."""
        return sum(bin(byte).count("1") for byte in self._bits)

    def set_indices(self) -> Iterator[int]:
        """Yield the positions of set bits in ascending order."""
        for byte_index, byte in enumerate(self._bits):
            if not byte:
                continue
            base = byte_index << 3
            for offset in range(8):
                if byte & (1 << offset):
                    yield base + offset

    def fingerprint(self) -> str:
        """xxHash64 hex digest of the packed storage.

        Two arrays of equal capacity have the same fingerprint exactly when
        they hold the same set bits.
        """
        return xxhash.xxh64(bytes(self._bits)).hexdigest()

    @property
    def bits(self) -> bytearray:
        """Expose the underlying storage for inspection."""
        return self._bits

    def __len__(self) -> int:
        return self._capacity
