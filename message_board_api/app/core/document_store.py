"""
Document collections stored in SQLite.

A ``DocumentCollection`` behaves like a minimal document database
collection: schemaless JSON documents addressed by a store‑generated
``_id``.  Each method is one SQL statement on a fresh connection, so
every call is atomic and every read sees the latest committed write.

Documents handed out are always freshly decoded from JSON; callers may
mutate them freely without touching stored state.  Engine failures
are re‑raised as ``PersistenceError``.
"""

from __future__ import annotations

import json
import logging
import sqlite3
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Mapping, Optional

from .db import get_cursor
from .errors import PersistenceError
from .identifiers import PostId

logger = logging.getLogger(__name__)

Document = Dict[str, Any]

ID_FIELD = "_id"


class DocumentCollection:
    """A named collection of JSON documents inside a SQLite database."""

    def __init__(self, name: str, database_path: str) -> None:
        self.name = name
        self.database_path = database_path

    @contextmanager
    def _cursor(self) -> Iterator[sqlite3.Cursor]:
        try:
            with get_cursor(self.database_path) as cursor:
                yield cursor
        except sqlite3.Error as exc:
            logger.error("Collection %s failed: %s", self.name, exc)
            raise PersistenceError(f"Collection {self.name!r} is unavailable") from exc

    def insert_one(self, document: Mapping[str, Any]) -> PostId:
        """Store a copy of ``document`` under a new id and return that id.

        Any ``_id`` key in the input is discarded.
        """
        body = {key: value for key, value in document.items() if key != ID_FIELD}
        doc_id = PostId.generate()
        with self._cursor() as cursor:
            cursor.execute(
                "INSERT INTO documents (collection, doc_id, body) VALUES (?, ?, ?)",
                (self.name, str(doc_id), json.dumps(body)),
            )
        return doc_id

    def find_all(self) -> List[Document]:
        """Return every document in insertion order."""
        with self._cursor() as cursor:
            rows = cursor.execute(
                "SELECT doc_id, body FROM documents WHERE collection = ? ORDER BY seq",
                (self.name,),
            ).fetchall()
        return [self._row_to_document(row) for row in rows]

    def find_by_id(self, doc_id: PostId) -> Optional[Document]:
        with self._cursor() as cursor:
            row = cursor.execute(
                "SELECT doc_id, body FROM documents WHERE collection = ? AND doc_id = ?",
                (self.name, str(doc_id)),
            ).fetchone()
        if row is None:
            return None
        return self._row_to_document(row)

    def replace_by_id(self, doc_id: PostId, document: Mapping[str, Any]) -> bool:
        """Replace all fields of the matching document except ``_id``.

        Returns ``True`` if a document matched.
        """
        body = {key: value for key, value in document.items() if key != ID_FIELD}
        with self._cursor() as cursor:
            cursor.execute(
                """
                UPDATE documents
                SET body = ?, updated_at = CURRENT_TIMESTAMP
                WHERE collection = ? AND doc_id = ?
                """,
                (json.dumps(body), self.name, str(doc_id)),
            )
            return cursor.rowcount > 0

    def delete_by_id(self, doc_id: PostId) -> bool:
        with self._cursor() as cursor:
            cursor.execute(
                "DELETE FROM documents WHERE collection = ? AND doc_id = ?",
                (self.name, str(doc_id)),
            )
            return cursor.rowcount > 0

    def count(self) -> int:
        with self._cursor() as cursor:
            row = cursor.execute(
                "SELECT COUNT(*) AS total FROM documents WHERE collection = ?",
                (self.name,),
            ).fetchone()
        return row["total"]

    def delete_all(self) -> int:
        """Remove every document of this collection; returns how many were removed."""
        with self._cursor() as cursor:
            cursor.execute("DELETE FROM documents WHERE collection = ?", (self.name,))
            return cursor.rowcount

    @staticmethod
    def _row_to_document(row: sqlite3.Row) -> Document:
        document: Document = {ID_FIELD: row["doc_id"]}
        document.update(json.loads(row["body"]))
        return document
