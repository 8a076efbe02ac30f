"""Thread-safe TF-IDF search server with stop words, minus words and filters."""

from __future__ import annotations

import functools
import logging
import math
import threading
from collections.abc import Callable, Iterable, Sequence

from document import Document, DocumentStatus
from errors import DocumentNotFoundError
from indexer import IndexData, Indexer
from query_parser import Query, QueryParser
from text_processing import StopWords

MAX_RESULT_DOCUMENT_COUNT = 5
RELEVANCE_EPSILON = 1e-6

DocumentPredicate = Callable[[int, DocumentStatus, int], bool]

LOGGER = logging.getLogger("search_server")


class SearchServer:
    """Indexes documents and ranks them against free-text queries."""

    def __init__(
        self,
        stop_words: str | Iterable[str] | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._logger = logger or LOGGER
        self._stop_words = StopWords(stop_words)
        self._index_data = IndexData()
        self._indexer = Indexer(self._stop_words, self._logger, self._index_data)
        self._query_parser = QueryParser(self._stop_words)
        self._lock = threading.RLock()

    @property
    def stop_words(self) -> StopWords:
        return self._stop_words

    def add_document(
        self,
        document_id: int,
        text: str,
        status: DocumentStatus = DocumentStatus.ACTUAL,
        ratings: Sequence[int] = (),
    ) -> None:
        with self._lock:
            self._indexer.add_document(document_id, text, status, ratings)

    def find_top_documents(
        self,
        raw_query: str,
        document_filter: DocumentStatus | DocumentPredicate = DocumentStatus.ACTUAL,
    ) -> list[Document]:
        """Return up to five best documents accepted by a status or predicate filter."""
        if isinstance(document_filter, DocumentStatus):
            predicate = _status_predicate(document_filter)
        else:
            predicate = document_filter

        query = self._query_parser.parse(raw_query)
        with self._lock:
            matched = self.find_all_documents(query)
        return rank_documents(matched, predicate)

    def find_all_documents(self, query: Query) -> list[Document]:
        """Score every document containing a plus term and not containing a minus term."""
        with self._lock:
            index = self._index_data
            total_documents = len(index.document_ids)

            relevance: dict[int, float] = {}
            for word in query.plus_words:
                postings = index.postings(word)
                if not postings:
                    continue
                idf = math.log(total_documents / index.document_frequency(word))
                for document_id, tf in postings.items():
                    relevance[document_id] = relevance.get(document_id, 0.0) + idf * tf

            for word in query.minus_words:
                for document_id in index.postings(word):
                    relevance.pop(document_id, None)

            matched: list[Document] = []
            for document_id in sorted(relevance):
                entry = index.documents[document_id]
                matched.append(
                    Document(
                        id=document_id,
                        relevance=relevance[document_id],
                        rating=entry.rating,
                        status=entry.status,
                    )
                )
            return matched

    def get_document_count(self) -> int:
        with self._lock:
            return len(self._index_data.document_ids)

    def get_document_id(self, index: int) -> int:
        """Return the id of the document added at the given position."""
        with self._lock:
            document_ids = self._index_data.document_ids
            if not 0 <= index < len(document_ids):
                raise IndexError(
                    f"Document position {index} out of range [0, {len(document_ids)})"
                )
            return document_ids[index]

    def match_document(
        self, raw_query: str, document_id: int
    ) -> tuple[list[str], DocumentStatus]:
        """Return the sorted plus terms found in a document, or none if a minus term is found."""
        query = self._query_parser.parse(raw_query)
        with self._lock:
            entry = self._index_data.documents.get(document_id)
            if entry is None:
                raise DocumentNotFoundError(f"Unknown document id {document_id}")

            for word in query.minus_words:
                if document_id in self._index_data.postings(word):
                    return [], entry.status

            matched_words = [
                word
                for word in query.plus_words
                if document_id in self._index_data.postings(word)
            ]
            return sorted(matched_words), entry.status


def rank_documents(
    documents: Iterable[Document],
    predicate: DocumentPredicate,
    limit: int = MAX_RESULT_DOCUMENT_COUNT,
) -> list[Document]:
    """Sort by relevance (rating breaks near-ties), filter, then truncate."""
    ranked = sorted(documents, key=functools.cmp_to_key(_compare_documents))
    accepted = [doc for doc in ranked if predicate(doc.id, doc.status, doc.rating)]
    return accepted[:limit]


def _compare_documents(lhs: Document, rhs: Document) -> int:
    if abs(lhs.relevance - rhs.relevance) < RELEVANCE_EPSILON:
        return rhs.rating - lhs.rating
    return -1 if lhs.relevance > rhs.relevance else 1


def _status_predicate(status: DocumentStatus) -> DocumentPredicate:
    def predicate(_document_id: int, document_status: DocumentStatus, _rating: int) -> bool:
        return document_status == status

    return predicate
