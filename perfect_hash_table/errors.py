# ==================================================
# perfect_hash_table/errors.py
# ==================================================


class PerfectHashError(Exception):
    """Base class for everything this package raises."""


class BuildError(PerfectHashError, ValueError):
    """A key set could not be turned into a perfect hash table."""


class InvalidInput(BuildError):
    def __init__(self, key: bytes):
        super().__init__(f"duplicate key {key!r}")
        self.key = key


class ConstructionExhausted(BuildError):
    def __init__(self, bucket: int, key_count: int, max_trials: int):
        super().__init__(
            f"bucket {bucket} ({key_count} keys): no collision-free "
            f"hash found in {max_trials} trials")
        self.bucket = bucket
        self.key_count = key_count
        self.max_trials = max_trials
