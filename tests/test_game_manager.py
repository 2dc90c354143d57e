import random
from dataclasses import fields

import pytest

from models.game import Round
from services.game_manager import GameManager, start_new_round, record_word
from services.word_list import WordListError

WORDS = ("silkworm", "tomatoes", "elephant")


def test_start_new_round_picks_from_word_list():
    rng = random.Random(7)
    for _ in range(20):
        round_ = start_new_round(WORDS, rng)
        assert round_.root_word in WORDS
        assert round_.used_words == []


def test_start_new_round_reaches_every_word():
    rng = random.Random(1)
    seen = {start_new_round(WORDS, rng).root_word for _ in range(200)}
    assert seen == set(WORDS)


def test_start_new_round_with_empty_list_is_fatal():
    with pytest.raises(WordListError):
        start_new_round([])


def test_record_word_inserts_most_recent_first():
    round_ = Round(root_word="silkworm")
    record_word(round_, "silk")
    record_word(round_, "worm")
    record_word(round_, "milk")
    assert round_.used_words == ["milk", "worm", "silk"]
    assert round_.word_count == 3
    assert round_.letter_count == 12


def test_round_holds_only_game_state():
    round_ = Round(root_word="silkworm")
    assert [f.name for f in fields(round_)] == ["root_word", "used_words", "started_at"]
    assert not hasattr(round_, "to_dict")
    assert round_.is_word_used("silk") is False


def test_game_manager_requires_words():
    with pytest.raises(WordListError):
        GameManager([])


def test_game_manager_round_lifecycle():
    manager = GameManager(WORDS, random.Random(3))
    assert manager.get_round(1) is None
    assert manager.has_active_round(1) is False

    round_ = manager.start_round(1)
    assert manager.get_round(1) is round_
    assert manager.record_word(1, "silk") is True
    assert round_.used_words == ["silk"]

    ended = manager.end_round(1)
    assert ended is round_
    assert manager.has_active_round(1) is False
    assert manager.end_round(1) is None


def test_restart_discards_used_words():
    manager = GameManager(WORDS, random.Random(5))
    first = manager.start_round(1)
    manager.record_word(1, "silk")

    second = manager.start_round(1)
    assert second is not first
    assert second.used_words == []
    assert second.root_word in WORDS
    assert manager.get_round(1) is second


def test_record_word_without_round():
    manager = GameManager(WORDS)
    assert manager.record_word(42, "silk") is False


def test_rounds_are_per_channel():
    manager = GameManager(WORDS)
    a = manager.start_round(1)
    b = manager.start_round(2)
    manager.record_word(1, "silk")
    assert a.used_words == ["silk"]
    assert b.used_words == []
    manager.end_round(1)
    assert manager.get_round(2) is b
