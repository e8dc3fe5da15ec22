"""
Dataset validator for wordlebot.

What this module does:
- Validate the pair of input files: the frequency dictionary (`<word> <count>`
  per line) and the answer list (whitespace-separated words).
- Count valid, invalid and duplicate entries; compute SHA-256 of the raw files.
- Check that every answer is a legal guess (answers ⊆ dictionary).
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Unlike load_dictionary(), which stops at the first bad line, this walks the whole
file so a broken dataset can be fixed in one go.

Typical use:
    from wordlebot.datasets import validate_dataset, pretty_summary
    rep = validate_dataset("data/dictionary.txt", "data/answers.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Optional, Tuple
import hashlib

from wordlebot.engine.errors import InvalidWordLength
from wordlebot.engine.feedback import as_word


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID entries
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words
    invalid_lines: int   # number of invalid entries encountered


@dataclass
class ValidationReport:
    """Top-level validation result for the (dictionary, answers) pair."""
    dictionary: FileReport
    answers: FileReport
    answers_subset_dictionary: bool
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _as_word(tok: str) -> Optional[str]:
    """Same normalization the loaders apply; None where they would raise."""
    try:
        return as_word(tok)
    except InvalidWordLength:
        return None


def _dictionary_word(line: str) -> Optional[str]:
    """Return the word of a well-formed `<word> <count>` line, else None."""
    word, sep, count = line.strip().partition(" ")
    w = _as_word(word) if sep else None
    if w is None:
        return None
    try:
        if int(count.strip()) < 0:
            return None
    except ValueError:
        return None
    return w


def _check_dictionary(path: Path) -> Tuple[List[str], int]:
    """Return (valid_words, invalid_count); blank lines are skipped, not counted."""
    valid: List[str] = []
    invalid = 0
    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            if not raw.strip():
                continue
            w = _dictionary_word(raw)
            if w is None:
                invalid += 1
            else:
                valid.append(w)
    return valid, invalid


def _check_answers(path: Path) -> Tuple[List[str], int]:
    valid: List[str] = []
    invalid = 0
    for tok in path.read_text(encoding="utf-8").split():
        w = _as_word(tok)
        if w is not None:
            valid.append(w)
        else:
            invalid += 1
    return valid, invalid


def _file_report(path: Path, words: List[str], invalid: int) -> FileReport:
    return FileReport(
        path=str(path),
        exists=True,
        count=len(words),
        sha256=_sha256_file(path),
        unique_count=len(set(words)),
        invalid_lines=invalid,
    )


# -----------------------------
# Public API
# -----------------------------

def validate_dataset(dictionary_path: str, answers_path: str) -> Dict:
    """
    Validate the dictionary/answers pair.

    Returns
    -------
    Dict
        JSON-serializable dict (see ValidationReport) with counts, SHA-256,
        invalid/duplicate diagnostics, the answers ⊆ dictionary check, a strict
        `passed` flag and a list of `issues`.
    """
    issues: List[str] = []

    dict_p = Path(dictionary_path)
    ans_p = Path(answers_path)

    if not dict_p.exists() or not ans_p.exists():
        if not dict_p.exists():
            issues.append(f"dictionary file not found: {dictionary_path}")
        if not ans_p.exists():
            issues.append(f"answers file not found: {answers_path}")
        rep = ValidationReport(
            dictionary=FileReport(dictionary_path, dict_p.exists(), 0, "", 0, 0),
            answers=FileReport(answers_path, ans_p.exists(), 0, "", 0, 0),
            answers_subset_dictionary=False,
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    dict_words, dict_invalid = _check_dictionary(dict_p)
    answers, ans_invalid = _check_answers(ans_p)
    dict_report = _file_report(dict_p, dict_words, dict_invalid)
    ans_report = _file_report(ans_p, answers, ans_invalid)

    missing = sorted(set(answers) - set(dict_words))
    subset_ok = not missing
    if not subset_ok:
        # a handful of examples is enough to debug
        issues.append(f"answers not subset of dictionary (e.g., {missing[:5]})")

    if dict_report.count == 0:
        issues.append("dictionary contains 0 valid entries")
    if ans_report.count == 0:
        issues.append("answers file contains 0 valid words")

    if dict_invalid:
        issues.append(f"dictionary has {dict_invalid} invalid line(s)")
    if ans_invalid:
        issues.append(f"answers has {ans_invalid} invalid word(s)")

    if dict_report.count != dict_report.unique_count:
        issues.append("dictionary contains duplicate words")

    passed = (
            subset_ok
            and dict_invalid == 0
            and ans_invalid == 0
            and dict_report.count > 0
            and ans_report.count > 0
    )

    rep = ValidationReport(
        dictionary=dict_report,
        answers=ans_report,
        answers_subset_dictionary=subset_ok,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact, human-friendly one-liner for the console.

    Example:
        dictionary=12947 (uniq=12947, sha=abc123...) | answers=2315 (uniq=2315, sha=def456...) | answers⊆dictionary=True | OK
    """
    d = report["dictionary"]
    a = report["answers"]
    status = "OK" if report["passed"] else "FAIL"
    d_sha = (d.get("sha256") or "")[:12]
    a_sha = (a.get("sha256") or "")[:12]
    return (
        f"dictionary={d['count']} (uniq={d['unique_count']}, sha={d_sha}) "
        f"| answers={a['count']} (uniq={a['unique_count']}, sha={a_sha}) "
        f"| answers⊆dictionary={report['answers_subset_dictionary']} | {status}"
    )
