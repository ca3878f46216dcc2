# ==================================================
# perfect_hash_table/table.py
# ==================================================
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

import numpy as np

from .buckets import LEVEL1_PARAMS, assign_buckets, bucket_of
from .builder import SecondLevelTable, build_bucket_table
from .const import MAX_TRIALS, PRIME
from .errors import ConstructionExhausted, InvalidInput
from .hashing import HashParams, str_hash, to_key

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BucketInfo:
    """Debug snapshot of one bucket; layout may change between builds."""
    index: int
    params: HashParams
    size: int
    trials: int
    slots: dict[int, bytes]


class PerfectHashTable:
    """Static two-level (FKS) perfect hash set over byte-string keys.

    Build once with `build()`, then query with `contains()` / `in`. Each
    instance owns its random generator, so independent tables can be built
    on separate threads.
    """
    def __init__(self, keys: Optional[Iterable[str | bytes]] = None, *,
                 seed: Optional[int] = None,
                 rng: Optional[np.random.Generator] = None,
                 max_trials: int = MAX_TRIALS):
        if max_trials < 0:
            raise ValueError("max_trials must be >= 0")
        self.rng        = rng if rng is not None else np.random.default_rng(seed)
        self.max_trials = max_trials
        self.prime      = PRIME

        self._m      = 0
        self._count  = 0
        self._tables: list[SecondLevelTable] = []

        if keys is not None:
            self.build(keys)

    @classmethod
    def from_keys(cls, keys: Iterable[str | bytes], **kw) -> "PerfectHashTable":
        return cls(keys, **kw)

    # ------------------------------------------------------------------
    def build(self, keys: Iterable[str | bytes]) -> None:
        """(Re)build the table from `keys`.

        Raises InvalidInput on a duplicate key and ConstructionExhausted when
        some bucket runs out of trials. Nothing is published unless every
        bucket succeeds, so a failed build leaves the previous contents intact.
        """
        keys = self._unique_keys(keys)
        m = len(keys)
        logger.info("building perfect hash table for %d keys", m)

        tables: list[SecondLevelTable] = []
        for i, bucket in enumerate(assign_buckets(keys, LEVEL1_PARAMS, self.prime)):
            table = build_bucket_table(bucket, self.rng, self.max_trials, self.prime)
            if table is None:
                logger.warning("bucket %d (%d keys) exhausted %d trials",
                               i, len(bucket), self.max_trials)
                raise ConstructionExhausted(i, len(bucket), self.max_trials)
            tables.append(table)

        self._tables = tables
        self._m      = m
        self._count  = m
        logger.info("built %d buckets, %d slots, %d trials",
                    m, sum(t.size for t in tables), sum(t.trials for t in tables))

    @staticmethod
    def _unique_keys(keys: Iterable[str | bytes]) -> list[bytes]:
        seen: set[bytes] = set()
        out: list[bytes] = []
        for raw in keys:
            key = to_key(raw)
            if key in seen:
                raise InvalidInput(key)
            seen.add(key)
            out.append(key)
        return out

    # ------------------------------------------------------------------
    def contains(self, key) -> bool:
        if not self._m:
            return False
        try:
            key = to_key(key)
        except (TypeError, ValueError):
            return False
        x = str_hash(key, self.prime)
        table = self._tables[bucket_of(key, self._m, LEVEL1_PARAMS, self.prime)]
        return table.holds(key, x)

    __contains__ = contains

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[bytes]:
        for table in self._tables:
            yield from table.members().values()

    @property
    def bucket_count(self) -> int:
        return self._m

    # ------------------------------------------------------------------
    def inspect(self) -> list[BucketInfo]:
        """Per-bucket params, size and occupied slots for non-empty buckets."""
        return [BucketInfo(i, t.params, t.size, t.trials, t.members())
                for i, t in enumerate(self._tables) if t.size]
