from __future__ import annotations

from typing import Callable, Dict, Optional, Protocol, runtime_checkable

from wordlebot.engine import CandidatePool, EmptyCandidatePool, History, Word


@runtime_checkable
class Guesser(Protocol):
    """Anything that can pick the next word given the game so far."""
    id: str

    def guess(self, history: History) -> Word:
        ...


# Factories take (dictionary, **options) and return a fresh Guesser for one game.
SolverFactory = Callable[..., Guesser]

# ---- Global solver registry ----
REGISTRY: Dict[str, SolverFactory] = {}


def register(cls):
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


def opening_move(history: History, opening: Optional[Word]) -> Optional[Word]:
    """The precomputed first guess, or None once the game is under way (or if disabled)."""
    if not history and opening is not None:
        return opening
    return None


def apply_feedback(pool: CandidatePool, history: History, applied: int) -> int:
    """
    Narrow `pool` by the history entries it has not seen yet.

    Normally that is just the newest guess. Returns the new count of applied
    entries for the caller to keep.
    """
    for prior in history[applied:]:
        pool.narrow(prior)
    return len(history)


def require_total(pool: CandidatePool) -> int:
    """Total weight of a non-empty pool; an empty pool is a hard error."""
    total = pool.total_weight()
    if not len(pool) or total <= 0:
        raise EmptyCandidatePool("no candidate is consistent with the feedback so far")
    return total

