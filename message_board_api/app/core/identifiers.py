"""
Identifier value type for stored posts.

Post ids are generated by the document store, never by clients.  An
id is a random UUID rendered as 32 hexadecimal characters.  Wrapping
it in ``PostId`` keeps validation in one place: anything coming from
a URL is parsed here before it reaches the database.
"""

import re
import uuid
from typing import Any

from .errors import InvalidPostId

_HEX_ID = re.compile(r"[0-9a-fA-F]{32}")


class PostId:
    """Immutable, hashable post identifier."""

    __slots__ = ("_value",)

    def __init__(self, value: str) -> None:
        if not self.is_valid(value):
            raise InvalidPostId(value)
        self._value = value.lower()

    @classmethod
    def generate(cls) -> "PostId":
        """Return a new, unique identifier."""
        return cls(uuid.uuid4().hex)

    @classmethod
    def parse(cls, value: Any) -> "PostId":
        """Parse ``value`` into a ``PostId``.

        Accepts an existing ``PostId`` or its string form in any case.
        Raises ``InvalidPostId`` for anything else.
        """
        if isinstance(value, PostId):
            return value
        return cls(value)

    @staticmethod
    def is_valid(value: Any) -> bool:
        return isinstance(value, str) and _HEX_ID.fullmatch(value) is not None

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"PostId({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PostId):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)
