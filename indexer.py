"""Inverted index construction for text documents with status and rating."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from document import DocumentStatus
from errors import InvalidArgumentError, InvalidInputError
from text_processing import StopWords, is_valid_text, split_into_words


@dataclass(frozen=True)
class DocumentEntry:
    """Metadata stored for a single indexed document."""

    rating: int
    status: DocumentStatus


@dataclass
class IndexData:
    """Complete in-memory search index.

    ``term_frequencies`` maps each term to ``{document_id: tf}`` where tf is
    the term's share of the document's non-stop words. ``document_ids`` keeps
    insertion order.
    """

    term_frequencies: dict[str, dict[int, float]] = field(default_factory=dict)
    documents: dict[int, DocumentEntry] = field(default_factory=dict)
    document_ids: list[int] = field(default_factory=list)

    def document_frequency(self, term: str) -> int:
        return len(self.term_frequencies.get(term, ()))

    def postings(self, term: str) -> dict[int, float]:
        return self.term_frequencies.get(term, {})


class Indexer:
    """Validates documents and adds them to an append-only index."""

    def __init__(
        self,
        stop_words: StopWords,
        logger: logging.Logger,
        index_data: IndexData | None = None,
    ) -> None:
        self._stop_words = stop_words
        self._logger = logger
        self._index_data = index_data if index_data is not None else IndexData()

    @property
    def index_data(self) -> IndexData:
        return self._index_data

    def add_document(
        self,
        document_id: int,
        text: str,
        status: DocumentStatus = DocumentStatus.ACTUAL,
        ratings: Sequence[int] = (),
    ) -> None:
        """Index a document. Nothing is mutated if validation fails."""
        if document_id < 0:
            self._logger.warning("Rejected document with negative id %d", document_id)
            raise InvalidArgumentError(f"Document id must be non-negative, got {document_id}")
        if document_id in self._index_data.documents:
            self._logger.warning("Rejected duplicate document id %d", document_id)
            raise InvalidArgumentError(f"Document id {document_id} already exists")
        if not is_valid_text(text):
            self._logger.warning("Rejected document %d: control character in text", document_id)
            raise InvalidInputError(f"Document {document_id} text contains a control character")

        words = self._stop_words.filter(split_into_words(text))
        frequencies = _compute_term_frequencies(words)
        rating = compute_average_rating(ratings)

        for term, tf in frequencies.items():
            self._index_data.term_frequencies.setdefault(term, {})[document_id] = tf
        self._index_data.documents[document_id] = DocumentEntry(rating=rating, status=status)
        self._index_data.document_ids.append(document_id)

        if not words:
            self._logger.info("Document %d has no indexable words", document_id)
        else:
            self._logger.debug(
                "Indexed document %d (%d words, %d terms)",
                document_id,
                len(words),
                len(frequencies),
            )


def compute_average_rating(ratings: Iterable[int]) -> int:
    """Average rating rounded toward zero, 0 for no ratings."""
    values = list(ratings)
    if not values:
        return 0
    total = sum(values)
    average = abs(total) // len(values)
    return average if total >= 0 else -average


def _compute_term_frequencies(words: Sequence[str]) -> dict[str, float]:
    if not words:
        return {}
    step = 1.0 / len(words)
    frequencies: dict[str, float] = {}
    for word in words:
        frequencies[word] = frequencies.get(word, 0.0) + step
    return frequencies
