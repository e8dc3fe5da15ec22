from __future__ import annotations
from typing import List
from .base import Guesser, REGISTRY, register

from . import naive  # noqa: F401
from . import entropy  # noqa: F401


def create_solver(solver_id: str, dictionary, **options) -> Guesser:
    """
    Factory: build a fresh solver for one game by id.

    `options` are passed to the solver (e.g. opening=None, workers=4).
    """
    try:
        cls = REGISTRY[solver_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown solver id: {solver_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(dictionary, **options)


def get_solver_ids() -> List[str]:
    """
    Return all registered solver ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
