# ==================================================
# examples/build_table.py
# ==================================================
import argparse, logging
from perfect_hash_table import PerfectHashTable

WORDS = ["apple", "banana", "grape", "kiwi", "lemon",
         "mango", "orange", "peach", "plum", "watermelon"]

def main():
    p = argparse.ArgumentParser()
    p.add_argument("words", nargs="*", default=WORDS, help="keys to build from")
    p.add_argument("--probe", action="append", default=None,
                   help="key to look up (repeatable)")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("-v", "--verbose", action="store_true")
    args = p.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    table = PerfectHashTable(args.words, seed=args.seed)
    for probe in args.probe or ["kiwi", "papaya"]:
        print(f"contains({probe!r}) = {table.contains(probe)}")

if __name__ == "__main__":
    main()
