"""Services module for Word Scramble Bot."""
from services.word_validator import validate, normalize
from services.game_manager import GameManager, start_new_round, record_word
from services.word_list import load_word_list, WordListResult, WordListError
from services.dictionary import DictionaryOracle, FreeDictionaryOracle, WordSetOracle

__all__ = [
    "validate",
    "normalize",
    "GameManager",
    "start_new_round",
    "record_word",
    "load_word_list",
    "WordListResult",
    "WordListError",
    "DictionaryOracle",
    "FreeDictionaryOracle",
    "WordSetOracle",
]
