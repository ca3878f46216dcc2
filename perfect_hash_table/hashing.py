# ==================================================
# perfect_hash_table/hashing.py
# ==================================================
from __future__ import annotations
from typing import NamedTuple

import numpy as np

from .const import BASE, PRIME


class HashParams(NamedTuple):
    a: int
    b: int


# -- key normalisation -----------------------------------------------------

def to_key(key: str | bytes) -> bytes:
    """Return `key` as bytes; str is UTF-8 encoded."""
    if isinstance(key, bytes):
        return key
    if isinstance(key, (bytearray, memoryview)):
        return bytes(key)
    if isinstance(key, str):
        try:
            return key.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise ValueError(f"key {key!r} is not UTF-8 encodable") from exc
    raise TypeError(f"key must be bytes or str, not {type(key).__name__}")

# -- primitives ------------------------------------------------------------

def str_hash(key: bytes, mod: int = PRIME) -> int:
    """Polynomial hash of `key`, reduced mod `mod` after every byte."""
    h = 0
    for c in key:
        h = (h * BASE + c) % mod
    return h


def universal_hash(a: int, b: int, p: int, m: int, x: int) -> int:
    # ((a·x + b) mod p) mod m
    return ((a * x + b) % p) % m


def universal_hash_array(params: HashParams, p: int, m: int,
                         xs: np.ndarray) -> np.ndarray:
    """Vectorised `universal_hash` over pre-hashed keys.

    `xs` must already be reduced mod `p`; with p < 2**31 the product a·x
    stays inside int64.
    """
    return ((params.a * xs + params.b) % p) % m


def random_params(rng, p: int = PRIME) -> HashParams:
    """Draw a ∈ [1, p-1], b ∈ [0, p-1] from a numpy-style Generator."""
    a = int(rng.integers(1, p))
    b = int(rng.integers(0, p))
    return HashParams(a, b)
