# ==================================================
# perfect_hash_table/__init__.py
# ==================================================
from .table import BucketInfo, PerfectHashTable
from .builder import SecondLevelTable, build_bucket_table
from .errors import BuildError, ConstructionExhausted, InvalidInput, PerfectHashError
__all__ = ["PerfectHashTable", "BucketInfo", "SecondLevelTable",
           "build_bucket_table", "PerfectHashError", "BuildError",
           "InvalidInput", "ConstructionExhausted"]
