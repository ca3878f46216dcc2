# ==================================================
# perfect_hash_table/buckets.py
# ==================================================
from __future__ import annotations
from typing import Sequence

from .const import LEVEL1_A, LEVEL1_B, PRIME
from .hashing import HashParams, str_hash, universal_hash

# Held constant for every build: bucketing is reproducible across runs, at
# the cost of the expected-load bound a randomly drawn level-1 pair gives.
LEVEL1_PARAMS = HashParams(LEVEL1_A, LEVEL1_B)


def bucket_of(key: bytes, m: int, params: HashParams = LEVEL1_PARAMS,
              p: int = PRIME) -> int:
    return universal_hash(params.a, params.b, p, m, str_hash(key, p))


def assign_buckets(keys: Sequence[bytes], params: HashParams = LEVEL1_PARAMS,
                   p: int = PRIME) -> list[list[bytes]]:
    """Split `keys` into m = len(keys) buckets by their level-1 hash."""
    m = len(keys)
    buckets: list[list[bytes]] = [[] for _ in range(m)]
    for key in keys:
        buckets[bucket_of(key, m, params, p)].append(key)
    return buckets
