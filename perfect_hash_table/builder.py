# ==================================================
# perfect_hash_table/builder.py
# ==================================================
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from .const import MAX_TRIALS, PRIME
from .hashing import (HashParams, random_params, str_hash, universal_hash,
                      universal_hash_array)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class SecondLevelTable:
    """Collision-free k² slot table for one level-1 bucket.

    `occupied` is the source of truth for a slot being in use; `slots[i]` is
    None whenever `occupied[i]` is False, so b"" can be stored like any key.
    """

    params: HashParams
    size: int
    slots: tuple[Optional[bytes], ...]
    occupied: np.ndarray
    trials: int = 0
    prime: int = PRIME

    def slot_of(self, x: int) -> int:
        return universal_hash(self.params.a, self.params.b, self.prime,
                              self.size, x)

    def holds(self, key: bytes, x: int) -> bool:
        """True iff `key` (whose `str_hash` is `x`) sits in its slot."""
        if not self.size:
            return False
        i = self.slot_of(x)
        return bool(self.occupied[i]) and self.slots[i] == key

    def members(self) -> dict[int, bytes]:
        return {int(i): self.slots[i] for i in np.flatnonzero(self.occupied)}


def empty_table(p: int = PRIME) -> SecondLevelTable:
    occupied = np.zeros(0, dtype=bool)
    occupied.setflags(write=False)
    return SecondLevelTable(HashParams(1, 0), 0, (), occupied, 0, p)


def build_bucket_table(keys: Sequence[bytes], rng,
                       max_trials: int = MAX_TRIALS,
                       p: int = PRIME) -> Optional[SecondLevelTable]:
    """Search for a collision-free (a, b) mapping `keys` into k² slots.

    Every trial draws fresh parameters from `rng`; the first trial that puts
    each key in its own slot is committed. Returns None once `max_trials`
    draws have all collided.
    """
    k = len(keys)
    if k == 0:
        return empty_table(p)

    size = k * k
    xs = np.fromiter((str_hash(key, p) for key in keys), dtype=np.int64,
                     count=k)

    for trial in range(1, max_trials + 1):
        params = random_params(rng, p)
        idx = universal_hash_array(params, p, size, xs)

        occupied = np.zeros(size, dtype=bool)
        occupied[idx] = True
        if np.count_nonzero(occupied) != k:
            continue

        slots: list[Optional[bytes]] = [None] * size
        for key, i in zip(keys, idx.tolist()):
            slots[i] = key
        occupied.setflags(write=False)
        logger.debug("bucket of %d keys: a=%d b=%d after %d trial(s)",
                     k, params.a, params.b, trial)
        return SecondLevelTable(params, size, tuple(slots), occupied, trial, p)

    return None
