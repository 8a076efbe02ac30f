"""Whitespace tokenization, control-character validation and stop words."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from errors import InvalidInputError


def is_valid_text(text: str) -> bool:
    """Return True when text contains no ASCII control characters (0-31)."""
    return not any(ord(char) < 32 for char in text)


def validate_text(text: str, what: str = "text") -> str:
    if not is_valid_text(text):
        raise InvalidInputError(f"Invalid {what}: control character in {text!r}")
    return text


def split_into_words(text: str) -> list[str]:
    """Split text on spaces, preserving order and case.

    Other whitespace, including non-breaking and other Unicode spaces, stays
    part of the word; ASCII tabs and newlines are rejected by validation.
    """
    return [word for word in text.split(" ") if word]


class StopWords:
    """Immutable set of words excluded from indexing and from queries."""

    def __init__(self, words: str | Iterable[str] | None = None) -> None:
        if words is None:
            words = ()
        elif isinstance(words, str):
            words = split_into_words(validate_text(words, "stop words"))

        unique: set[str] = set()
        for word in words:
            if not word:
                continue
            unique.add(validate_text(word, "stop word"))
        self._words = frozenset(unique)

    def contains(self, word: str) -> bool:
        return word in self._words

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"StopWords({sorted(self._words)!r})"

    def filter(self, words: Iterable[str]) -> list[str]:
        """Drop stop words from a token sequence, keeping order."""
        return [word for word in words if word not in self._words]
