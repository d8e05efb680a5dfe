"""Bloom filter built from three independent string hashes.

Each item maps to three bit positions: the polynomial rolling hash, DJB2 and
SDBM, each reduced modulo the polynomial modulus ``m`` and then modulo the bit
array capacity. An item is reported as possibly present only when all three
bits are set, so inserted items are never missed while unrelated items can
occasionally collide on all three positions (a false positive).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from . import config
from .bit_array import BitArray
from .hashes import djb2, polynomial_hash, sdbm


HASH_NAMES = ("Polynomial Rolling", "DJB2", "SDBM")


@dataclass
class ScanReport:
    """Outcome of testing a batch of candidate strings against the filter."""

    results: List[Tuple[str, bool]] = field(default_factory=list)
    matched: List[str] = field(default_factory=list)
    unmatched: List[str] = field(default_factory=list)

    def record(self, item: str, hit: bool) -> None:
        self.results.append((item, hit))
        if hit:
            self.matched.append(item)
        else:
            self.unmatched.append(item)

    @property
    def positives(self) -> int:
        return len(self.matched)

    @property
    def negatives(self) -> int:
        return len(self.unmatched)

    @property
    def total(self) -> int:
        return len(self.results)


class BloomFilter:
    """Fixed-size Bloom filter with polynomial, DJB2 and SDBM hashing."""

    num_hashes = len(HASH_NAMES)

    def __init__(
        self,
        capacity: int = config.BIT_ARRAY_SIZE,
        *,
        p: int = config.POLY_BASE,
        m: int = config.POLY_MODULUS,
    ) -> None:
        """Initialize an empty filter.

        Args:
            capacity: Number of bits in the filter.
            p: Base of the polynomial rolling hash.
            m: Modulus applied to every hash before indexing.

        Raises:
            ValueError: If any argument is not positive.
        """
        if p <= 0:
            raise ValueError("p must be positive")
        if m <= 0:
            raise ValueError("m must be positive")

        self.p = p
        self.m = m
        self.count = 0
        self._bits = BitArray(capacity)

    @classmethod
    def from_items(
        cls, items: Iterable[str], capacity: int = config.BIT_ARRAY_SIZE, **params: int
    ) -> BloomFilter:
        """Build a filter and insert every item of ``items``."""
        bloom = cls(capacity, **params)
        bloom.update(items)
        return bloom

    def indices(self, item: str) -> Tuple[int, int, int]:
        """Return the three bit positions ``item`` maps to."""
        capacity = self._bits.capacity
        return (
            polynomial_hash(item, self.p, self.m) % capacity,
            djb2(item) % self.m % capacity,
            sdbm(item) % self.m % capacity,
        )

    def add(self, item: str) -> None:
        """Insert ``item`` into the filter."""
        for bit_index in self.indices(item):
            self._bits.set(bit_index)
        self.count += 1

    def update(self, items: Iterable[str]) -> int:
        """Insert all ``items`` in order and return how many were added."""
        added = 0
        for item in items:
            self.add(item)
            added += 1
        return added

    def contains(self, item: str) -> bool:
        """Return True if ``item`` may be present, False if definitely absent."""
        for bit_index in self.indices(item):
            if not self._bits.test(bit_index):
                return False
        return True

    def __contains__(self, item: str) -> bool:
        return self.contains(item)

    def scan(self, items: Iterable[str]) -> ScanReport:
        """Test every item of ``items`` without modifying the filter."""
        report = ScanReport()
        for item in items:
            report.record(item, self.contains(item))
        return report

    @property
    def capacity(self) -> int:
        return self._bits.capacity

    @property
    def bits_set(self) -> int:
        return self._bits.count()

    @property
    def fill_ratio(self) -> float:
        return self.bits_set / self.capacity

    def estimated_false_positive_rate(self) -> float:
        """Chance that a fresh item finds all of its bits already set."""
        return self.fill_ratio ** self.num_hashes

    def fingerprint(self) -> str:
        return self._bits.fingerprint()

    @property
    def bit_array(self) -> BitArray:
        """Expose the underlying bit array (primarily for inspection)."""
        return self._bits
