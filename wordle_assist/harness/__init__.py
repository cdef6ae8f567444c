from .core import WORDLE_MAX_TURNS, run_case, run_batch
from .io import write_csv, write_manifest

__all__ = ["WORDLE_MAX_TURNS", "run_case", "run_batch", "write_csv", "write_manifest"]
