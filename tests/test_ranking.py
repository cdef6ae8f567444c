import pytest
from wordle_assist.engine import (
    ConstraintState, EmptyPoolError, apply_feedback, expected_information_gain,
    filter_candidates, score_guess,
)
from wordle_assist.ranking import (
    DIRECT_GUESS_LIMIT, TOP_N, Suggestion, default_worker_count, rank_guesses, rank_round,
)
from wordle_assist.ranking.orchestrator import interleave

WORDS = ["apple", "angle", "ankle", "cable", "crane", "raise", "stare", "trace",
         "slate", "table", "eagle", "maple", "moody", "pique", "fjord", "buxom"]


def test_interleave_assigns_index_mod_workers():
    assert interleave(list("abcdefg"), 3) == [["a", "d", "g"], ["b", "e"], ["c", "f"]]
    assert interleave(["x", "y"], 5) == [["x"], ["y"]]
    assert interleave([], 4) == []


def test_rank_returns_top_n_sorted_descending():
    out = rank_guesses(WORDS, ConstraintState(), WORDS, workers=3)
    assert len(out) == TOP_N
    scores = [s.score for s in out]
    assert scores == sorted(scores, reverse=True)
    assert all(isinstance(s, Suggestion) for s in out)


def test_rank_scores_match_engine():
    out = rank_guesses(WORDS, ConstraintState(), WORDS, workers=2, top_n=len(WORDS))
    for s in out:
        assert s.score == expected_information_gain(s.word, ConstraintState(), WORDS)


def test_rank_fewer_words_than_top_n_not_padded():
    guessable = WORDS[:4]
    out = rank_guesses(guessable, ConstraintState(), WORDS, workers=8)
    assert len(out) == 4
    assert sorted(s.word for s in out) == sorted(guessable)


def test_rank_best_is_the_true_maximum():
    out = rank_guesses(WORDS, ConstraintState(), WORDS, workers=4, top_n=1)
    best = max(expected_information_gain(w, ConstraintState(), WORDS) for w in WORDS)
    assert out[0].score == best


@pytest.mark.parametrize("workers", [2, 3, 7, 32])
def test_worker_count_does_not_change_results(workers):
    state = apply_feedback(ConstraintState(), "moody", score_guess("moody", "table"))
    pool = filter_candidates(WORDS, state)
    one = rank_guesses(WORDS, state, pool, workers=1, top_n=len(WORDS))
    many = rank_guesses(WORDS, state, pool, workers=workers, top_n=len(WORDS))
    assert sorted(one) == sorted(many)


def test_process_executor_matches_threads():
    threads = rank_guesses(WORDS, ConstraintState(), WORDS, workers=2, top_n=len(WORDS))
    procs = rank_guesses(WORDS, ConstraintState(), WORDS, workers=2, top_n=len(WORDS),
                         executor="process")
    assert sorted(threads) == sorted(procs)


def test_rank_rejects_bad_arguments():
    with pytest.raises(ValueError):
        rank_guesses(WORDS, ConstraintState(), WORDS, workers=0)
    with pytest.raises(ValueError):
        rank_guesses(WORDS, ConstraintState(), WORDS, workers=2, executor="gpu")
    with pytest.raises(ValueError):
        rank_guesses([], ConstraintState(), WORDS, workers=2, executor="gpu")


@pytest.mark.parametrize("top_n", [0, -1])
def test_rank_rejects_top_n_below_one(top_n):
    with pytest.raises(ValueError):
        rank_guesses(WORDS[:3], ConstraintState(), WORDS, workers=2, top_n=top_n)


def test_rank_empty_pool_raises():
    with pytest.raises(EmptyPoolError):
        rank_guesses(WORDS, ConstraintState(), [], workers=2)
    # raised up front, even when there is nothing to score
    with pytest.raises(EmptyPoolError):
        rank_guesses([], ConstraintState(), [], workers=2)


def test_rank_empty_guessable():
    assert rank_guesses([], ConstraintState(), WORDS, workers=2) == []


def test_default_worker_count_fallback(monkeypatch):
    monkeypatch.setattr("wordle_assist.ranking.orchestrator.os.cpu_count", lambda: None)
    assert default_worker_count() == 8
    monkeypatch.setattr("wordle_assist.ranking.orchestrator.os.cpu_count", lambda: 12)
    assert default_worker_count() == 12


@pytest.mark.parametrize("pool", [[], ["angle"], ["angle", "ankle"]])
def test_rank_round_small_pool_is_direct(pool):
    assert len(pool) <= DIRECT_GUESS_LIMIT
    rep = rank_round(WORDS, ConstraintState(), pool, workers=2)
    assert rep.direct is True
    assert rep.suggestions == ()
    assert rep.listing == tuple(pool)
    assert rep.pool_size == len(pool)


def test_rank_round_scores_larger_pool():
    rep = rank_round(WORDS, ConstraintState(), WORDS, workers=2, top_n=5)
    assert rep.direct is False
    assert len(rep.suggestions) == 5
    assert rep.listing == tuple(WORDS)   # <= 20 words: listed in full


def test_rank_round_omits_listing_for_big_pool():
    pool = WORDS + ["adieu", "audio", "roate", "salet", "irate"]
    rep = rank_round(WORDS, ConstraintState(), pool, workers=2, top_n=3)
    assert rep.pool_size == 21
    assert rep.listing == ()
