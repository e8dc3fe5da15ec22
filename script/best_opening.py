"""
Rank opening guesses by expected information against a whole dictionary.

The solvers play a fixed first word (wordlebot.config.DEFAULT_OPENING) instead
of scoring the full pool every game. This recomputes that choice offline.
Scoring is O(R^2) in the dictionary size, so expect minutes for ~10k words;
--workers spreads it across processes.

Usage:
    python -m script.best_opening --dictionary data/dictionary.txt --top 10 --workers 8
"""

import argparse

from tqdm import tqdm

from wordlebot.datasets import load_dictionary
from wordlebot.engine import CandidatePool
from wordlebot.solvers.entropy import rank


def main():
    ap = argparse.ArgumentParser(description="Rank first guesses by expected information.")
    ap.add_argument("--dictionary", default="data/dictionary.txt", help="frequency dictionary")
    ap.add_argument("--top", type=int, default=10, help="how many words to print")
    ap.add_argument("--workers", type=int, default=1, help="scoring processes")
    ap.add_argument("--batch", type=int, default=500, help="guesses scored per progress step")
    args = ap.parse_args()

    dictionary = load_dictionary(args.dictionary)
    pool = CandidatePool(dictionary.entries)
    guesses = pool.words()

    scored = []
    for i in tqdm(range(0, len(guesses), args.batch), ncols=80, desc="Scoring", unit="batch"):
        scored += rank(guesses[i:i + args.batch], pool, workers=args.workers)

    # best first; equal scores keep dictionary (alphabetical) order
    scored.sort(key=lambda item: -item[0])
    for H, word in scored[: args.top]:
        print(f"{word}  {H:.4f} bits")


if __name__ == "__main__":
    main()
