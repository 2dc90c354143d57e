"""
Root word list loading.

The list is read once at startup. Loading never raises: the caller gets a
WordListResult and decides whether to abort (main.py exits the process).
"""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from config import LOGGER_NAME_GAME

logger = logging.getLogger(LOGGER_NAME_GAME)


class WordListError(Exception):
    """Raised when no root word can be chosen."""


@dataclass(frozen=True)
class WordListResult:
    """Outcome of the startup word list load."""
    words: Tuple[str, ...] = ()
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and len(self.words) > 0


def parse_word_list(text: str) -> Tuple[str, ...]:
    """Split file content into lowercase words, one per line, skipping blanks."""
    return tuple(
        line.strip().lower()
        for line in text.splitlines()
        if line.strip()
    )


def load_word_list(path: Path | str) -> WordListResult:
    """
    Load the bundled root word list.

    Returns a failed result (never raises) when the file is missing,
    unreadable, or has no usable lines.
    """
    p = Path(path)
    if not p.is_file():
        return WordListResult(error=f"Could not load word list: {p} not found")

    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        return WordListResult(error=f"Could not load word list {p}: {e}")

    words = parse_word_list(text)
    if not words:
        return WordListResult(error=f"Word list {p} contains no words")

    logger.info(f"Loaded {len(words)} root words from {p}")
    return WordListResult(words=words)
