"""
Exception types raised by the storage and service layers.

Routes never see ``sqlite3`` errors directly: the document store
wraps them in ``PersistenceError``.  ``InvalidPostId`` is raised when
a path or argument is not a well‑formed post identifier; the HTTP
layer reports it exactly like a missing post.
"""

from typing import Any


class MessageBoardError(Exception):
    """Base class for all application errors."""


class InvalidPostId(MessageBoardError, ValueError):
    """The supplied value is not a syntactically valid post id."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Invalid post id: {value!r}")


class PersistenceError(MessageBoardError):
    """The underlying store failed to execute an operation."""
