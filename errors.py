"""Exception types raised by the search server."""

from __future__ import annotations


class SearchServerError(Exception):
    """Base class for all search server errors."""


class InvalidArgumentError(SearchServerError, ValueError):
    """Structurally invalid argument: bad document id or malformed minus word."""


class InvalidInputError(InvalidArgumentError):
    """Text contains a forbidden control character."""


class DocumentNotFoundError(SearchServerError, KeyError):
    """Operation references a document id that was never added."""

    def __str__(self) -> str:
        # KeyError wraps its message in quotes
        return str(self.args[0]) if self.args else ""
