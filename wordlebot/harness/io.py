"""
I/O utilities for batch runs.

Responsibilities:
- write_csv:      flatten per-game results into a tidy CSV (one row per game).
- write_manifest: dump a JSON manifest with config, dataset report and metadata.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Patterns are prefixed with an apostrophe to keep Excel from interpreting
  strings like "-GYY-" as formulas (which would display as #NAME?).
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable
import csv
import json
import subprocess
import datetime as dt

from wordlebot.engine import mask_to_str
from .core import GameResult


def _excel_safe_pattern(patt: str) -> str:
    """
    Prefix with an apostrophe so spreadsheet apps treat it as text.
    Example: "-GYY-" -> "'-GYY-"
    """
    return "'" + patt if patt else patt


def write_csv(results: Iterable[GameResult], path: str, max_turns: int) -> str:
    """
    Serialize a batch of game results to CSV.

    Schema (columns):
      solver, answer, success, guesses, time_ms,
      guess_1, patt_1, ..., guess_<max_turns>, patt_<max_turns>

    The winning guess is never scored, so it shows up with pattern GGGGG.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["solver", "answer", "success", "guesses", "time_ms"]
    for i in range(1, max_turns + 1):
        fields += [f"guess_{i}", f"patt_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "solver": r.solver_id,
                "answer": r.answer,
                "success": r.success,
                "guesses": r.guesses,
                "time_ms": round(float(r.time_ms), 3),
            }

            turns = [(g.word, mask_to_str(g.mask)) for g in r.history]
            if r.success:
                turns.append((r.answer, "G" * len(r.answer)))
            for i in range(1, max_turns + 1):
                if i <= len(turns):
                    g, patt = turns[i - 1]
                    row[f"guess_{i}"] = g
                    row[f"patt_{i}"] = _excel_safe_pattern(patt)
                else:
                    row[f"guess_{i}"] = ""
                    row[f"patt_{i}"] = ""

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dataset validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (solver, paths, max_turns, opening, workers)
      - dataset: output of datasets.validate_dataset(...)
      - num_games, num_won, mean_guesses
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
