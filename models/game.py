"""
Game state dataclasses for Word Scramble Bot.
These classes hold the in-memory state of a round and the outcome of a submission.
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Union


@dataclass
class Round:
    """
    One round of the game: a root word and the words found from it so far.

    `used_words` is ordered most-recent-first, which is also the display order.
    """
    root_word: str
    used_words: List[str] = field(default_factory=list)
    started_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def word_count(self) -> int:
        return len(self.used_words)

    @property
    def letter_count(self) -> int:
        """Total letters across all accepted words."""
        return sum(len(word) for word in self.used_words)

    def is_word_used(self, word: str) -> bool:
        """Check if a word has already been accepted in this round."""
        return word in self.used_words


class RejectionReason(str, Enum):
    """Why a submitted word was turned down."""
    USED = "used"
    IMPOSSIBLE = "impossible"
    UNRECOGNIZED = "unrecognized"
    TOO_SHORT = "tooShort"
    SAME_AS_ROOT = "sameAsRoot"


@dataclass(frozen=True)
class Accepted:
    """The submission passed every check."""
    word: str


@dataclass(frozen=True)
class Rejected:
    """The submission failed a check; `title` and `message` are shown to the player."""
    reason: RejectionReason
    title: str
    message: str


ValidationOutcome = Union[Accepted, Rejected]
