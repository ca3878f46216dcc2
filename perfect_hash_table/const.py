# ==================================================
# perfect_hash_table/const.py
# ==================================================
import os

PRIME = 10000019          # large prime shared by both hash levels
BASE = 257                # polynomial base for the byte-string hash
LEVEL1_A = 31             # fixed level-1 parameters (reproducible bucketing)
LEVEL1_B = 17
MAX_TRIALS = int(os.getenv("PHT_MAX_TRIALS", "1000"))   # per-bucket retry budget
