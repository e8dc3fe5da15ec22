"""
Game orchestration.

- play:      run one game (one hidden answer) with one solver.
- run_batch: run many games, one fresh solver per answer, optionally across
             worker processes.

A game moves InProgress(1) -> InProgress(2) -> ... and ends in Won(turn) or
Lost(turns). The turn budget is a parameter (Wordle uses 6, which is the
default). A guess outside the dictionary is a solver bug: IllegalGuess is
raised and the game is abandoned.

These functions are UI-agnostic so they can be reused by the CLI, a notebook
or the offline scripts without changes.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from multiprocessing import Pool
from typing import Dict, Iterator, List, Optional, Sequence, Union

from wordlebot.config import DEFAULT_MAX_TURNS, DEFAULT_OPENING
from wordlebot.engine import Guess, Word, compute, require_legal
from wordlebot.solvers import Guesser, create_solver

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class InProgress:
    turn: int


@dataclass(frozen=True)
class Won:
    turn: int


@dataclass(frozen=True)
class Lost:
    turns: int


GameState = Union[InProgress, Won, Lost]


@dataclass
class GameResult:
    answer: Word
    state: GameState
    history: List[Guess] = field(default_factory=list)
    time_ms: float = 0.0
    solver_id: str = "?"

    @property
    def success(self) -> bool:
        return isinstance(self.state, Won)

    @property
    def guesses(self) -> int:
        """Turns used: the winning turn, or the whole budget on a loss."""
        return self.state.turn if isinstance(self.state, Won) else self.state.turns


def _check_turns(max_turns: int) -> None:
    if max_turns < 1:
        raise ValueError(f"max_turns must be at least 1; got {max_turns}")


def play(
        answer: Word,
        solver: Guesser,
        *,
        dictionary,
        max_turns: int = DEFAULT_MAX_TURNS,
) -> GameResult:
    """
    Run one game until the solver finds `answer` or `max_turns` guesses miss.

    The winning guess is not scored. Every other guess must be in `dictionary`
    (IllegalGuess otherwise); its feedback is appended to the history the
    solver sees next turn.
    """
    _check_turns(max_turns)

    history: List[Guess] = []
    state: GameState = InProgress(1)
    t0 = time.perf_counter()

    while isinstance(state, InProgress):
        turn = state.turn
        guess = solver.guess(tuple(history))

        if guess == answer:
            state = Won(turn)
            break

        require_legal(guess, dictionary.words)
        history.append(Guess(guess, compute(answer, guess)))
        log.debug("%s turn %d: %s", answer, turn, history[-1])

        state = InProgress(turn + 1) if turn < max_turns else Lost(turn)

    return GameResult(
        answer=answer,
        state=state,
        history=history,
        time_ms=(time.perf_counter() - t0) * 1000.0,
        solver_id=getattr(solver, "id", "?"),
    )


# ---- batch runs ----

def _play_fresh(answer: Word, solver_id: str, dictionary, max_turns: int, options: Dict) -> GameResult:
    solver = create_solver(solver_id, dictionary, **options)
    return play(answer, solver, dictionary=dictionary, max_turns=max_turns)


# Game settings of a pool worker process, installed once by _init_worker.
_WORKER: Dict = {}


def _init_worker(solver_id: str, dictionary, max_turns: int, options: Dict) -> None:
    _WORKER.update(solver_id=solver_id, dictionary=dictionary, max_turns=max_turns,
                   options=options)


def _play_in_worker(answer: Word) -> GameResult:
    return _play_fresh(answer, **_WORKER)


def iter_batch(
        solver_id: str,
        answers: Sequence[Word],
        *,
        dictionary,
        max_turns: int = DEFAULT_MAX_TURNS,
        opening: Optional[Word] = DEFAULT_OPENING,
        workers: int = 1,
        limit: Optional[int] = None,
        **options,
) -> Iterator[GameResult]:
    """
    Yield one GameResult per answer, in answer order.

    `limit` keeps only the first K answers. With workers > 1 games run in a
    process pool; the dictionary is shipped to each worker once.
    """
    _check_turns(max_turns)
    if limit is not None and limit < 0:
        raise ValueError(f"limit must be non-negative; got {limit}")
    cases = list(answers if limit is None else answers[:limit])
    options = dict(options, opening=opening)
    log.info("running %d games with %s (max_turns=%d, workers=%d)",
             len(cases), solver_id, max_turns, workers)

    if workers <= 1:
        for ans in cases:
            yield _play_fresh(ans, solver_id, dictionary, max_turns, options)
        return

    with Pool(processes=workers, initializer=_init_worker,
              initargs=(solver_id, dictionary, max_turns, options)) as procs:
        yield from procs.imap(_play_in_worker, cases)


def run_batch(solver_id: str, answers: Sequence[Word], **kwargs) -> List[GameResult]:
    """Collect iter_batch() into a list; takes the same keyword arguments."""
    return list(iter_batch(solver_id, answers, **kwargs))
