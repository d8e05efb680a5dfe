"""String hash functions driving the triple-hash Bloom filter.

Three classic hashes with unrelated mathematical bases, so that their
collisions are uncorrelated:

* **Polynomial rolling hash**: the string read as digits of a base-``p``
  number, reduced modulo a large prime ``m``.
* **DJB2** (Dan Bernstein, comp.lang.c): ``h * 33 + c`` from seed 5381.
* **SDBM** (from the sdbm ndbm clone): ``h * 65599 + c`` written with shifts.

DJB2 and SDBM accumulate in a 64-bit unsigned word and wrap on overflow; the
wraparound is part of the algorithm, so every step is masked to 64 bits.
Input text is encoded as UTF-8 and each byte is used as a signed 8-bit
character code, which keeps non-ASCII input deterministic.
"""
from __future__ import annotations

from typing import Iterator, Union

from . import config


MASK64 = (1 << 64) - 1

DJB2_SEED = 5381

StrOrBytes = Union[str, bytes]


def encode(s: StrOrBytes) -> bytes:
    """Return the bytes ``s`` is hashed over.

    Surrogate escapes produced when decoding a file map back to the original
    bytes; any other lone surrogate is encoded as-is.
    """
    if not isinstance(s, str):
        return s
    try:
        return s.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        return s.encode("utf-8", "surrogatepass")


def char_codes(s: StrOrBytes) -> Iterator[int]:
    """Yield the signed 8-bit character codes of ``s``."""

    for byte in encode(s):
        yield byte - 256 if byte >= 0x80 else byte


def polynomial_hash(
    s: StrOrBytes, p: int = config.POLY_BASE, m: int = config.POLY_MODULUS
) -> int:
    """Return ``sum((s[i] - 'a' + 1) * p**i) mod m``, a value in ``[0, m)``.

    The running power of ``p`` is kept reduced modulo ``m``.
    """
    offset = ord("a") - 1
    h = 0
    p_pow = 1
    for c in char_codes(s):
        h = ((h + (c - offset) * p_pow) & MASK64) % m
        p_pow = (p_pow * p) % m
    return h


def djb2(s: StrOrBytes) -> int:
    """DJB2 over a wrapping 64-bit accumulator."""
    h = DJB2_SEED
    for c in char_codes(s):
        h = ((h << 5) + h + c) & MASK64  # h * 33 + c
    return h


def sdbm(s: StrOrBytes) -> int:
    """SDBM over a wrapping 64-bit accumulator."""
    h = 0
    for c in char_codes(s):
        h = (c + (h << 6) + (h << 16) - h) & MASK64  # h * 65599 + c
    return h
