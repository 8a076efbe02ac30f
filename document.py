"""Document status and the result record returned by searches."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DocumentStatus(Enum):
    ACTUAL = "ACTUAL"
    IRRELEVANT = "IRRELEVANT"
    BANNED = "BANNED"
    REMOVED = "REMOVED"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: str) -> DocumentStatus:
        """Look up a status by its case-insensitive name."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown document status: {name!r}") from None


@dataclass(frozen=True)
class Document:
    """Single ranked search result."""

    id: int
    relevance: float
    rating: int
    status: DocumentStatus = DocumentStatus.ACTUAL

    def __str__(self) -> str:
        return (
            f"{{ document_id = {self.id}, relevance = {self.relevance:g}, "
            f"rating = {self.rating} }}"
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "document_id": self.id,
            "relevance": round(self.relevance, 6),
            "rating": self.rating,
            "status": str(self.status),
        }
