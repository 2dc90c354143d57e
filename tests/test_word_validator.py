import pytest

from config import MIN_WORD_LENGTH, Settings
from models.game import Round, RejectionReason, Accepted, Rejected
from services.dictionary import WordSetOracle
from services.word_validator import (
    normalize,
    is_possible,
    is_original,
    is_long_enough,
    validate,
)

ENGLISH = WordSetOracle([
    "silk", "silkworm", "work", "worm", "milk", "slow", "owls", "mow", "or", "to",
    "tomatoes", "tomato", "mast", "stoat",
])


class RecordingOracle:
    """Recognizes a fixed set of words and remembers every lookup."""

    def __init__(self, words=()):
        self.words = set(words)
        self.calls = []

    async def is_real_word(self, word, locale="en"):
        self.calls.append((word, locale))
        return word in self.words


# --- normalization ---
@pytest.mark.parametrize("raw,expected", [
    ("silk", "silk"),
    ("  SILK \n", "silk"),
    ("\tWorM", "worm"),
    ("   ", ""),
    ("", ""),
])
def test_normalize(raw, expected):
    assert normalize(raw) == expected


@pytest.mark.parametrize("raw", ["Silk", "  MiLk  ", "\n\tOWLS\t", "x", "  "])
def test_normalize_is_idempotent(raw):
    assert normalize(normalize(raw)) == normalize(raw)


# --- composability ---
@pytest.mark.parametrize("word,root,expected", [
    ("silk", "silkworm", True),
    ("silkk", "silkworm", False),   # only one 'k'
    ("worms", "silkworm", True),
    ("mow", "silkworm", True),
    ("moo", "silkworm", False),     # only one 'o'
    ("silkworm", "silkworm", True),
    ("mrowklis", "silkworm", True),  # any permutation
    ("tomatoes", "tomatoes", True),
    ("ottoman", "tomatoes", False),  # no 'n'
])
def test_is_possible(word, root, expected):
    assert is_possible(word, root) is expected


def test_is_original():
    round_ = Round(root_word="silkworm", used_words=["silk"])
    assert is_original("worm", round_) is True
    assert is_original("silk", round_) is False


def test_length_limit_is_shared_with_settings():
    assert MIN_WORD_LENGTH == 3
    assert Settings.model_fields["min_word_length"].default == MIN_WORD_LENGTH
    assert is_long_enough("mow") is True
    assert is_long_enough("mo") is False


# --- pipeline outcomes ---
async def test_accepts_spellable_real_word():
    round_ = Round(root_word="silkworm")
    assert await validate("silk", round_, ENGLISH) == Accepted("silk")


async def test_accepts_normalized_input():
    round_ = Round(root_word="silkworm")
    assert await validate("  WORM \n", round_, ENGLISH) == Accepted("worm")


@pytest.mark.parametrize("raw", ["", "   ", "\n\t"])
async def test_empty_submission_is_a_no_op(raw):
    oracle = RecordingOracle()
    assert await validate(raw, Round(root_word="silkworm"), oracle) is None
    assert oracle.calls == []


async def test_rejects_impossible_word():
    outcome = await validate("silkk", Round(root_word="silkworm"), ENGLISH)
    assert isinstance(outcome, Rejected)
    assert outcome.reason is RejectionReason.IMPOSSIBLE
    assert outcome.title == "Word not possible"
    assert outcome.message == "You can't spell that word from 'silkworm'!"


async def test_rejects_unrecognized_word():
    outcome = await validate("klis", Round(root_word="silkworm"), ENGLISH)
    assert outcome.reason is RejectionReason.UNRECOGNIZED
    assert outcome.message == "You can't just make them up, you know!"


async def test_rejects_too_short_word():
    outcome = await validate("to", Round(root_word="tomatoes"), ENGLISH)
    assert outcome.reason is RejectionReason.TOO_SHORT
    assert outcome.title == "Word too short"
    assert outcome.message == "You can't enter a word with less than 3 letters!"


async def test_too_short_message_follows_min_length():
    outcome = await validate("mow", Round(root_word="silkworm"), ENGLISH, min_length=4)
    assert outcome.reason is RejectionReason.TOO_SHORT
    assert "less than 4 letters" in outcome.message


async def test_rejects_root_word():
    outcome = await validate("SilkWorm", Round(root_word="silkworm"), ENGLISH)
    assert outcome.reason is RejectionReason.SAME_AS_ROOT
    assert outcome.title == "Word is same"
    assert outcome.message == "You can't use the question word as an answer!"


async def test_duplicate_submission_is_rejected_the_second_time():
    round_ = Round(root_word="silkworm")
    first = await validate("milk", round_, ENGLISH)
    assert first == Accepted("milk")
    round_.used_words.insert(0, first.word)

    second = await validate("Milk", round_, ENGLISH)
    assert second.reason is RejectionReason.USED
    assert second.title == "Word used already"
    assert second.message == "Be more original"


async def test_validate_does_not_modify_round():
    round_ = Round(root_word="silkworm", used_words=["silk"])
    await validate("worm", round_, ENGLISH)
    assert round_.used_words == ["silk"]


# --- check ordering ---
async def test_used_check_runs_before_composability():
    round_ = Round(root_word="silkworm", used_words=["zebra"])
    outcome = await validate("zebra", round_, ENGLISH)
    assert outcome.reason is RejectionReason.USED


async def test_impossible_word_never_reaches_dictionary():
    oracle = RecordingOracle({"zebra"})
    outcome = await validate("zebra", Round(root_word="silkworm"), oracle)
    assert outcome.reason is RejectionReason.IMPOSSIBLE
    assert oracle.calls == []


async def test_dictionary_runs_before_length_check():
    oracle = RecordingOracle()
    outcome = await validate("or", Round(root_word="silkworm"), oracle)
    assert outcome.reason is RejectionReason.UNRECOGNIZED
    assert oracle.calls == [("or", "en")]


async def test_dictionary_runs_before_identity_check():
    oracle = RecordingOracle()
    outcome = await validate("silkworm", Round(root_word="silkworm"), oracle)
    assert outcome.reason is RejectionReason.UNRECOGNIZED


async def test_language_is_passed_to_oracle():
    oracle = RecordingOracle({"milk"})
    await validate("milk", Round(root_word="silkworm"), oracle, language="en-GB")
    assert oracle.calls == [("milk", "en-GB")]


@pytest.mark.parametrize("candidate", [
    "silk", "silkk", "worm", "mow", "or", "silkworm", "owls", "slow", "moo", "klis", "milk",
])
async def test_accepted_words_satisfy_every_rule(candidate):
    round_ = Round(root_word="silkworm", used_words=["slow"])
    before = list(round_.used_words)
    outcome = await validate(candidate, round_, ENGLISH)
    if isinstance(outcome, Accepted):
        word = outcome.word
        assert len(word) >= 3
        assert word != round_.root_word
        assert is_possible(word, round_.root_word)
        assert await ENGLISH.is_real_word(word)
        assert word not in before
