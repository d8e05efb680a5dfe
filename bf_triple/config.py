"""Filter and runtime settings.

Every value can be overridden through the environment; the defaults match the
sizes the filter was tuned for (a ~1M-bit array and a 1e9+9 prime modulus).
"""
from __future__ import annotations

import os


BIT_ARRAY_SIZE = int(os.getenv("BF_TRIPLE_BITS", "1000001"))

# Polynomial rolling hash parameters
POLY_BASE = int(os.getenv("BF_TRIPLE_POLY_BASE", "31"))
POLY_MODULUS = int(os.getenv("BF_TRIPLE_POLY_MODULUS", "1000000009"))

KNOWN_BAD_PATH = os.getenv("BF_TRIPLE_KNOWN_BAD", "malicious.csv")

LOG_LEVEL = os.getenv("BF_TRIPLE_LOG_LEVEL", "WARNING").upper()
