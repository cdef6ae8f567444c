from pathlib import Path

import pytest
from wordle_assist.datasets import load_words, validate_wordlist, pretty_summary


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlist_happy_path(tmp_path: Path):
    words = tmp_path / "words.txt"
    _write(words, ["crane", "raise", "stare", "trace", "cared"])

    rep = validate_wordlist(str(words))
    assert rep["passed"] is True
    assert rep["count"] == 5 and rep["unique_count"] == 5
    assert len(rep["sha256"]) == 64
    s = pretty_summary(rep)
    assert "words=5" in s and "OK" in s


def test_validate_wordlist_flags_errors(tmp_path: Path):
    words = tmp_path / "words.txt"
    # wrong length, uppercase, non-alpha and a duplicate
    words.write_text("crane\nraiser\nSTARE\n???\ncrane\n", encoding="utf-8")

    rep = validate_wordlist(str(words))
    assert rep["passed"] is False
    assert rep["invalid_tokens"] == 3
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])
    assert "FAIL" in pretty_summary(rep)


def test_validate_wordlist_missing_file(tmp_path: Path):
    rep = validate_wordlist(str(tmp_path / "nope.txt"))
    assert rep["exists"] is False and rep["passed"] is False
    assert any("not found" in msg for msg in rep["issues"])


def test_load_words_whitespace_delimited(tmp_path: Path):
    words = tmp_path / "words.txt"
    words.write_text("crane raise\n\n  STARE\ttrace\nraiser crane x\n", encoding="utf-8")
    assert load_words(words) == ["crane", "raise", "stare", "trace"]


def test_load_words_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_words(tmp_path / "nope.txt")
