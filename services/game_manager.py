"""
Game Manager Service for Word Scramble Bot.
Handles round lifecycle and per-channel state.
"""
import logging
import random
from typing import Optional, Dict, Sequence

from config import LOGGER_NAME_GAME
from models.game import Round
from services.word_list import WordListError

logger = logging.getLogger(LOGGER_NAME_GAME)


def start_new_round(word_list: Sequence[str], rng: Optional[random.Random] = None) -> Round:
    """
    Start a round with a root word picked uniformly at random from `word_list`.

    Raises:
        WordListError: if `word_list` is empty. This is a startup failure,
            not something a player can fix.
    """
    if not word_list:
        raise WordListError("Cannot start a round: the word list is empty")
    root_word = (rng or random).choice(word_list)
    return Round(root_word=root_word)


def record_word(round_: Round, word: str) -> None:
    """Insert an accepted word at the front of the round's used words."""
    round_.used_words.insert(0, word)


class GameManager:
    """
    Manages the active round of every channel.
    Each channel has at most one round; starting again replaces it.
    """

    def __init__(self, word_list: Sequence[str], rng: Optional[random.Random] = None):
        if not word_list:
            raise WordListError("GameManager needs at least one root word")
        self._word_list = tuple(word_list)
        self._rng = rng or random.Random()
        # Active rounds in memory: channel_id -> Round
        self._rounds: Dict[int, Round] = {}

    @property
    def word_list(self) -> Sequence[str]:
        return self._word_list

    def get_round(self, channel_id: int) -> Optional[Round]:
        """Get the active round for a channel."""
        return self._rounds.get(channel_id)

    def has_active_round(self, channel_id: int) -> bool:
        """Check if a channel has an active round."""
        return channel_id in self._rounds

    def start_round(self, channel_id: int) -> Round:
        """
        Start (or restart) the round in a channel.
        Any previous round in the channel is discarded.
        """
        previous = self._rounds.get(channel_id)
        round_ = start_new_round(self._word_list, self._rng)
        self._rounds[channel_id] = round_

        if previous:
            logger.info(
                f"Round restarted: channel={channel_id}, "
                f"old_root={previous.root_word}, words_found={previous.word_count}, "
                f"new_root={round_.root_word}"
            )
        else:
            logger.info(f"Round started: channel={channel_id}, root={round_.root_word}")
        return round_

    def record_word(self, channel_id: int, word: str) -> bool:
        """
        Record an accepted word in the channel's round.

        Returns:
            True if recorded, False if the channel has no round
        """
        round_ = self.get_round(channel_id)
        if not round_:
            return False

        record_word(round_, word)
        logger.debug(f"Word recorded: '{word}' channel={channel_id}, root={round_.root_word}")
        return True

    def end_round(self, channel_id: int) -> Optional[Round]:
        """
        End the round in a channel.

        Returns:
            The ended round, None if there was none
        """
        round_ = self._rounds.pop(channel_id, None)
        if round_:
            logger.info(
                f"Round ended: channel={channel_id}, root={round_.root_word}, "
                f"words_found={round_.word_count}"
            )
        return round_
