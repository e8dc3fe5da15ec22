from .core import play, iter_batch, run_batch, GameResult, InProgress, Won, Lost
from .io import write_csv, write_manifest

__all__ = [
    "play", "iter_batch", "run_batch", "GameResult", "InProgress", "Won", "Lost",
    "write_csv", "write_manifest",
]
