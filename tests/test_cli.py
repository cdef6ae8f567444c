import io
import json
from pathlib import Path

import pytest

from apps.cli import run, simulate

WORDS = ["apple", "angle", "ankle", "cable", "crane", "raise", "stare", "trace",
         "slate", "table", "eagle", "maple", "moody", "pique", "fjord", "buxom"]


def _words_file(tmp_path: Path, words) -> str:
    p = tmp_path / "words.txt"
    p.write_text("\n".join(words) + "\n", encoding="utf-8")
    return str(p)


def test_interactive_round_trip(tmp_path, monkeypatch, capsys):
    path = _words_file(tmp_path, WORDS)
    monkeypatch.setattr("sys.stdin", io.StringIO("zzzzz\napple\nbad\ngxxgg\n"))

    assert run.main(["--words", path, "--workers", "2", "--progress", "off"]) == 0

    out = capsys.readouterr().out
    assert "Best guesses to reduce the number of words remaining" in out
    assert "Error! Not in the word list." in out
    assert "Error! feedback must have 5 symbols" in out
    assert "2 words remaining:" in out
    assert out.rstrip().endswith("ankle")


def test_interactive_opening_and_eof(tmp_path, monkeypatch, capsys):
    path = _words_file(tmp_path, WORDS + ["serai"])
    monkeypatch.setattr("sys.stdin", io.StringIO(""))

    assert run.main(["--words", path, "--progress", "off"]) == 0

    out = capsys.readouterr().out
    assert 'Best guess: "serai"' in out
    assert "Best guesses to reduce" not in out


def test_interactive_missing_wordlist(tmp_path, capsys):
    assert run.main(["--words", str(tmp_path / "nope.txt")]) == 2
    assert "FAIL" in capsys.readouterr().out


def test_simulate_writes_reports(tmp_path, capsys):
    path = _words_file(tmp_path, ["crane", "slate", "moody", "pique", "buxom", "fjord"])
    outdir = tmp_path / "reports"

    rc = simulate.main(["--words", path, "--solver", "random_consistent",
                        "--outdir", str(outdir), "--progress", "off"])
    assert rc == 0
    assert "Solved 6/6" in capsys.readouterr().out

    manifests = list(outdir.glob("sim_*_manifest.json"))
    assert len(manifests) == 1
    m = json.loads(manifests[0].read_text(encoding="utf-8"))
    assert m["num_cases"] == 6 and m["solved"] == 6
    assert m["wordlist"]["passed"] is True
    assert len(list(outdir.glob("sim_*.csv"))) == 1


def test_interactive_accepts_uppercase_wordlist(tmp_path, monkeypatch, capsys):
    path = _words_file(tmp_path, ["APPLE", "ANGLE", "ANKLE", "CABLE", "CRANE"])
    monkeypatch.setattr("sys.stdin", io.StringIO("apple\ngxxgg\n"))

    assert run.main(["--words", path, "--no-opening", "--workers", "2", "--progress", "off"]) == 0

    out = capsys.readouterr().out
    assert "FAIL" in out                      # the strict validator still reports it
    assert "5 words remaining:" in out
    assert "Best guesses to reduce the number of words remaining" in out
    assert "2 words remaining:" in out


def test_interactive_no_usable_words(tmp_path):
    path = _words_file(tmp_path, ["abc", "123456", "??"])
    assert run.main(["--words", path, "--progress", "off"]) == 2


def test_interactive_rejects_top_below_one(tmp_path):
    path = _words_file(tmp_path, WORDS)
    with pytest.raises(SystemExit) as e:
        run.main(["--words", path, "--top", "0"])
    assert e.value.code == 2


def test_simulate_accepts_uppercase_wordlist(tmp_path, capsys):
    words = ["CRANE", "SLATE", "MOODY", "PIQUE", "BUXOM", "FJORD"]
    path = _words_file(tmp_path, words)

    rc = simulate.main(["--words", path, "--solver", "random_consistent",
                        "--outdir", str(tmp_path / "reports"), "--progress", "off"])
    assert rc == 0
    assert "Solved 6/6" in capsys.readouterr().out
