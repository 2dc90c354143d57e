"""
Word Validator Service for Word Scramble Bot.

Classifies a submitted word as accepted or rejected for a round. The checks
run in a fixed order and the first failure wins, since each one carries its
own message for the player:

  1. normalize (lowercase, trim); empty input is a no-op
  2. not already used in the round
  3. spellable from the root word's letters
  4. recognized by the dictionary oracle
  5. at least `min_length` letters
  6. not the root word itself

Length and identity are checked after the dictionary lookup. Keep that order:
moving them earlier would change which message the player sees.
"""
import logging
from typing import Optional

from config import (
    LOGGER_NAME_GAME,
    DEFAULT_LANGUAGE,
    MIN_WORD_LENGTH,
    TITLE_WORD_USED,
    MESSAGE_WORD_USED,
    TITLE_WORD_IMPOSSIBLE,
    MESSAGE_WORD_IMPOSSIBLE,
    TITLE_WORD_UNRECOGNIZED,
    MESSAGE_WORD_UNRECOGNIZED,
    TITLE_WORD_TOO_SHORT,
    MESSAGE_WORD_TOO_SHORT,
    TITLE_WORD_SAME,
    MESSAGE_WORD_SAME,
)
from models.game import Round, RejectionReason, Accepted, Rejected, ValidationOutcome
from services.dictionary import DictionaryOracle

logger = logging.getLogger(LOGGER_NAME_GAME)

WORD_USED = Rejected(RejectionReason.USED, TITLE_WORD_USED, MESSAGE_WORD_USED)


def normalize(candidate: str) -> str:
    """Lowercase and trim surrounding whitespace."""
    return candidate.strip().lower()


def is_original(word: str, round_: Round) -> bool:
    """True if the word has not been accepted in this round yet."""
    return not round_.is_word_used(word)


def is_possible(word: str, root_word: str) -> bool:
    """
    True if `word` can be spelled from the letters of `root_word`,
    using each letter no more often than it appears in the root.
    """
    available = list(root_word)
    for letter in word:
        if letter not in available:
            return False
        available.remove(letter)
    return True


def is_long_enough(word: str, min_length: int = MIN_WORD_LENGTH) -> bool:
    return len(word) >= min_length


def is_root_word(word: str, root_word: str) -> bool:
    return word == root_word


async def validate(
    candidate: str,
    round_: Round,
    oracle: DictionaryOracle,
    *,
    language: str = DEFAULT_LANGUAGE,
    min_length: int = MIN_WORD_LENGTH,
) -> Optional[ValidationOutcome]:
    """
    Validate a submission against a round.

    Args:
        candidate: Raw text entered by the player
        round_: The round the word is submitted to (not modified)
        oracle: Dictionary used for the recognition check
        language: Locale passed to the oracle
        min_length: Shortest acceptable word

    Returns:
        Accepted or Rejected, or None when the normalized input is empty
    """
    word = normalize(candidate)
    if not word:
        return None

    if not is_original(word, round_):
        return WORD_USED

    if not is_possible(word, round_.root_word):
        return Rejected(
            RejectionReason.IMPOSSIBLE,
            TITLE_WORD_IMPOSSIBLE,
            MESSAGE_WORD_IMPOSSIBLE.format(root_word=round_.root_word),
        )

    if not await oracle.is_real_word(word, language):
        return Rejected(RejectionReason.UNRECOGNIZED, TITLE_WORD_UNRECOGNIZED, MESSAGE_WORD_UNRECOGNIZED)

    if not is_long_enough(word, min_length):
        return Rejected(
            RejectionReason.TOO_SHORT,
            TITLE_WORD_TOO_SHORT,
            MESSAGE_WORD_TOO_SHORT.format(min_length=min_length),
        )

    if is_root_word(word, round_.root_word):
        return Rejected(RejectionReason.SAME_AS_ROOT, TITLE_WORD_SAME, MESSAGE_WORD_SAME)

    logger.debug(f"Word accepted: '{word}' root={round_.root_word}")
    return Accepted(word)
