import pytest

from errors import InvalidArgumentError, InvalidInputError
from text_processing import StopWords, is_valid_text, split_into_words, validate_text


def test_split_into_words_preserves_order_and_case() -> None:
    assert split_into_words("  Cat in  the City ") == ["Cat", "in", "the", "City"]


def test_split_into_words_empty_text() -> None:
    assert split_into_words("") == []
    assert split_into_words("   ") == []


def test_is_valid_text_rejects_control_characters() -> None:
    assert is_valid_text("plain words")
    assert not is_valid_text("bad\x12word")
    assert not is_valid_text("tab\tseparated")


def test_validate_text_raises_invalid_input() -> None:
    with pytest.raises(InvalidInputError, match="control character"):
        validate_text("ca\x01t", "query")


def test_invalid_input_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        validate_text("\x00")


def test_stop_words_from_string_deduplicates() -> None:
    stop_words = StopWords("in the  in")

    assert len(stop_words) == 2
    assert stop_words.contains("in")
    assert "the" in stop_words
    assert "cat" not in stop_words
    assert list(stop_words) == ["in", "the"]


def test_stop_words_from_collection_ignores_empty_strings() -> None:
    stop_words = StopWords(["a", "", "and", "a"])

    assert list(stop_words) == ["a", "and"]


def test_stop_words_default_is_empty() -> None:
    assert len(StopWords()) == 0
    assert len(StopWords(None)) == 0


def test_stop_words_invalid_entry_raises() -> None:
    with pytest.raises(InvalidInputError):
        StopWords(["ok", "b\x1fad"])

    with pytest.raises(InvalidInputError):
        StopWords("in\x02 the")


def test_stop_words_filter_keeps_order() -> None:
    stop_words = StopWords("in the")

    assert stop_words.filter(["cat", "in", "the", "city"]) == ["cat", "city"]


def test_split_into_words_keeps_unicode_spaces_inside_words() -> None:
    assert split_into_words("a\u00a0b c\u2003d") == ["a\u00a0b", "c\u2003d"]


def test_invalid_input_is_an_invalid_argument() -> None:
    with pytest.raises(InvalidArgumentError):
        StopWords(["in", "th\x05e"])
