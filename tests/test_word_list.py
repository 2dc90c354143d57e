from pathlib import Path

from config import BASE_DIR
from services.word_list import load_word_list, parse_word_list


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_parse_word_list_normalizes_and_skips_blanks():
    text = "Silkworm\n\n  tomatoes  \r\nELEPHANT\n   \n"
    assert parse_word_list(text) == ("silkworm", "tomatoes", "elephant")


def test_load_word_list_happy_path(tmp_path: Path):
    p = tmp_path / "start.txt"
    _write(p, ["silkworm", "tomatoes"])

    result = load_word_list(p)
    assert result.ok is True
    assert result.error is None
    assert result.words == ("silkworm", "tomatoes")


def test_load_word_list_missing_file(tmp_path: Path):
    result = load_word_list(tmp_path / "nope.txt")
    assert result.ok is False
    assert "not found" in result.error
    assert result.words == ()


def test_load_word_list_empty_file(tmp_path: Path):
    p = tmp_path / "start.txt"
    p.write_text("\n  \n\n", encoding="utf-8")

    result = load_word_list(str(p))
    assert result.ok is False
    assert "no words" in result.error


def test_load_word_list_directory(tmp_path: Path):
    result = load_word_list(tmp_path)
    assert result.ok is False


def test_bundled_word_list_loads():
    result = load_word_list(BASE_DIR / "data" / "start.txt")
    assert result.ok is True
    assert "silkworm" in result.words
    assert all(w == w.strip().lower() and w for w in result.words)
