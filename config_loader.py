"""Configuration loading utilities for the search server demo."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from document import DocumentStatus


@dataclass(frozen=True)
class DocumentConfig:
    """Document to be indexed at startup."""

    id: int
    text: str
    status: DocumentStatus = DocumentStatus.ACTUAL
    ratings: tuple[int, ...] = ()


@dataclass(frozen=True)
class AppConfig:
    """Application configuration loaded from YAML."""

    documents: list[DocumentConfig]
    stop_words: list[str] = field(default_factory=list)
    queries: list[str] = field(default_factory=list)


def load_config(config_path: Path) -> AppConfig:
    """Load and validate configuration from a YAML file."""
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with config_path.open("r", encoding="utf-8") as file:
        raw: dict[str, Any] = yaml.safe_load(file) or {}

    stop_words = _parse_stop_words(raw.get("stop_words"))

    documents_raw = raw.get("documents")
    if not isinstance(documents_raw, list) or not documents_raw:
        raise ValueError("'documents' must be a non-empty list in config.yml")
    documents = [_parse_document(value) for value in documents_raw]

    queries_raw = raw.get("queries", [])
    if not isinstance(queries_raw, list):
        raise ValueError("'queries' must be a list of strings")
    for value in queries_raw:
        if not isinstance(value, str) or not value.strip():
            raise ValueError("Each entry in 'queries' must be a non-empty string")

    return AppConfig(
        documents=documents,
        stop_words=stop_words,
        queries=list(queries_raw),
    )


def _parse_stop_words(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return value.split()
    if isinstance(value, list) and all(isinstance(word, str) for word in value):
        return list(value)
    raise ValueError("'stop_words' must be a string or a list of strings")


def _parse_document(value: Any) -> DocumentConfig:
    if not isinstance(value, dict):
        raise ValueError("Each entry in 'documents' must be a mapping")

    document_id = value.get("id")
    if not isinstance(document_id, int) or isinstance(document_id, bool) or document_id < 0:
        raise ValueError("Document 'id' must be a non-negative integer")

    text = value.get("text")
    if not isinstance(text, str):
        raise ValueError(f"Document {document_id}: 'text' must be a string")

    status_raw = value.get("status", "ACTUAL")
    if not isinstance(status_raw, str):
        raise ValueError(f"Document {document_id}: 'status' must be a string")
    status = DocumentStatus.parse(status_raw)

    ratings_raw = value.get("ratings", [])
    if not isinstance(ratings_raw, list) or not all(
        isinstance(rating, int) and not isinstance(rating, bool) for rating in ratings_raw
    ):
        raise ValueError(f"Document {document_id}: 'ratings' must be a list of integers")

    return DocumentConfig(
        id=document_id,
        text=text,
        status=status,
        ratings=tuple(ratings_raw),
    )
