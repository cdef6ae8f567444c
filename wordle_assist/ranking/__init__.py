from .orchestrator import (
    DIRECT_GUESS_LIMIT, LISTING_LIMIT, TOP_N, RoundReport, Suggestion,
    default_worker_count, rank_guesses, rank_round,
)

__all__ = [
    "DIRECT_GUESS_LIMIT", "LISTING_LIMIT", "TOP_N", "RoundReport", "Suggestion",
    "default_worker_count", "rank_guesses", "rank_round",
]
