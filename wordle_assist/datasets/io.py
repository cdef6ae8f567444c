from __future__ import annotations
from pathlib import Path
from typing import Iterable, List

from wordle_assist.engine.feedback import WORD_LENGTH


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def is_word(token: str) -> bool:
    """Lowercase ASCII a–z, exactly WORD_LENGTH letters."""
    return len(token) == WORD_LENGTH and token.isascii() and token.isalpha() and token.islower()


def load_words(p: Path | str) -> List[str]:
    """
    Load a whitespace-delimited dictionary (any mix of spaces/newlines).

    Tokens are lowercased; anything that isn't a WORD_LENGTH-letter word is
    dropped, as are repeats (first occurrence wins, order preserved).
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)

    seen, out = set(), []
    for tok in p.read_text(encoding="utf-8").split():
        w = tok.lower()
        if is_word(w) and w not in seen:
            seen.add(w)
            out.append(w)
    return out
