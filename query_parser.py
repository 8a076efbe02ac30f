"""Parsing of free-text queries into plus and minus terms."""

from __future__ import annotations

from dataclasses import dataclass, field

from errors import InvalidArgumentError
from text_processing import StopWords, split_into_words, validate_text

MINUS_PREFIX = "-"


@dataclass(frozen=True)
class Query:
    """Parsed query: terms a document should contain and terms that exclude it."""

    plus_words: frozenset[str] = field(default_factory=frozenset)
    minus_words: frozenset[str] = field(default_factory=frozenset)


class QueryParser:
    def __init__(self, stop_words: StopWords) -> None:
        self._stop_words = stop_words

    def parse(self, raw_query: str) -> Query:
        """Split the query, drop stop words and sort tokens into plus/minus sets."""
        validate_text(raw_query, "query")

        plus_words: set[str] = set()
        minus_words: set[str] = set()
        for token in self._stop_words.filter(split_into_words(raw_query)):
            if not token.startswith(MINUS_PREFIX):
                plus_words.add(token)
                continue

            word = token[len(MINUS_PREFIX):]
            if not word:
                raise InvalidArgumentError("Invalid query: empty minus word")
            if word.startswith(MINUS_PREFIX):
                raise InvalidArgumentError(f"Invalid query: double-dash minus word {token!r}")
            if word not in self._stop_words:
                minus_words.add(word)

        # a term that is also excluded can never match
        plus_words -= minus_words
        return Query(plus_words=frozenset(plus_words), minus_words=frozenset(minus_words))
