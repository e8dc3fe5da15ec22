# apps/cli/run.py
"""
CLI entry point for running wordlebot over an answer list.

This script:
  1) Validates the dictionary/answers pair (prints counts + SHA, answers ⊆ dictionary).
  2) Loads both once and instantiates a fresh solver per game.
  3) Plays each answer, printing "Guessed <answer> in <n>" to stdout or
     "failed to guess <answer>" to stderr, with optional live progress.
  4) Optionally writes a CSV of per-game results plus a JSON manifest.

Usage:
    python -m apps.cli.run --solver expected_information --max 100
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from tqdm import tqdm

from wordlebot.config import (
    DEFAULT_ANSWERS_PATH, DEFAULT_DICTIONARY_PATH, DEFAULT_MAX_TURNS, DEFAULT_OPENING,
)
from wordlebot.datasets import load_answers, load_dictionary, pretty_summary, validate_dataset
from wordlebot.engine import WordleError
from wordlebot.harness import iter_batch, write_csv, write_manifest
from wordlebot.harness.io import git_commit_or_unknown, timestamp_id
from wordlebot.solvers import get_solver_ids

log = logging.getLogger(__name__)


def _opening(value: str):
    """'none' disables the precomputed first guess."""
    return None if value.lower() == "none" else value.lower()


def _non_negative(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {n}")
    return n


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING if verbosity <= 0 else logging.INFO if verbosity == 1 else logging.DEBUG
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def build_parser() -> argparse.ArgumentParser:
    solver_ids = get_solver_ids()
    ap = argparse.ArgumentParser(description="wordlebot: play Wordle over an answer list")
    ap.add_argument("--solver", default="expected_information", choices=solver_ids,
                    help="guess selection strategy")
    ap.add_argument("--max", type=_non_negative, help="play at most this many answers (from the top)")
    ap.add_argument("--dictionary", default=DEFAULT_DICTIONARY_PATH,
                    help="frequency dictionary, one '<word> <count>' per line")
    ap.add_argument("--answers", default=DEFAULT_ANSWERS_PATH,
                    help="whitespace-separated answers, one game each")
    ap.add_argument("--max-turns", type=int, default=DEFAULT_MAX_TURNS,
                    help="turn budget per game")
    ap.add_argument("--opening", type=_opening, default=DEFAULT_OPENING,
                    help="fixed first guess ('none' to compute it every game)")
    ap.add_argument("--workers", type=int, default=1, help="games played in parallel")
    ap.add_argument("--guess-workers", type=int, default=1,
                    help="processes scoring candidate guesses (expected_information only)")
    ap.add_argument("--outdir", help="write run_<timestamp>.csv and a manifest here")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("-v", "--verbose", action="count", default=0,
                    help="-v for INFO logs, -vv for DEBUG")
    return ap


def main(argv=None) -> int:
    """
    Parse CLI args, validate datasets, play the games, and write optional outputs.
    """
    args = build_parser().parse_args(argv)
    _setup_logging(args.verbose)

    if args.workers > 1 and args.guess_workers > 1:
        print("--workers and --guess-workers cannot both be > 1", file=sys.stderr)
        return 2
    if args.guess_workers > 1 and args.solver != "expected_information":
        print("--guess-workers only applies to expected_information", file=sys.stderr)
        return 2

    # 1) Validate and summarize (counts, SHAs, subset check)
    rep = validate_dataset(args.dictionary, args.answers)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        log.warning("dataset: %s", issue)

    # 2) Load once; any malformed line is fatal
    try:
        dictionary = load_dictionary(args.dictionary)
        answers = load_answers(args.answers)
    except (OSError, WordleError) as e:
        print(f"cannot load dataset: {e}", file=sys.stderr)
        return 1

    cases = answers[: args.max] if args.max is not None else answers
    total = len(cases)

    options = {}
    if args.guess_workers > 1:
        options["workers"] = args.guess_workers

    # 3) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    games = iter_batch(
        args.solver, cases,
        dictionary=dictionary,
        max_turns=args.max_turns,
        opening=args.opening,
        workers=args.workers,
        **options,
    )
    if mode == "bar":
        games = tqdm(games, total=total, ncols=80, desc="Playing", unit="game")

    # 4) Play with live progress
    results = []
    start = time.time()
    last_print = 0.0
    for idx, r in enumerate(games, 1):
        results.append(r)
        if r.success:
            print(f"Guessed {r.answer} in {r.guesses}")
        else:
            print(f"failed to guess {r.answer}", file=sys.stderr)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s\n"
                )
                sys.stderr.flush()
                last_print = now

    won = [r for r in results if r.success]
    mean = sum(r.guesses for r in won) / len(won) if won else 0.0
    print(f"Solved {len(won)}/{len(results)} | mean guesses {mean:.3f}")

    # 5) Optional outputs (CSV + manifest)
    if args.outdir:
        run_id = timestamp_id()
        outdir = Path(args.outdir)
        outdir.mkdir(parents=True, exist_ok=True)

        csv_path = outdir / f"run_{run_id}.csv"
        manifest_path = outdir / f"run_{run_id}_manifest.json"

        write_csv(results, str(csv_path), max_turns=args.max_turns)
        manifest = {
            "run_id": run_id,
            "git_commit": git_commit_or_unknown(),
            "config": vars(args),
            "dataset": rep,
            "num_games": len(results),
            "num_won": len(won),
            "mean_guesses": mean,
            "solver_id": args.solver,
        }
        write_manifest(manifest, str(manifest_path))

        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
