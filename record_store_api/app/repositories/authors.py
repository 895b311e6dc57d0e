"""Repository for authors."""

import sqlite3
from typing import Any, Dict, Iterable, List, Optional, Set

from record_store_api.app.repositories.base import Repository, live_clause, placeholders
from record_store_api.app.schemas.author import AuthorRead


class AuthorRepository(Repository):
    table = "authors"

    def list(self, include_deleted: bool = False) -> List[AuthorRead]:
        with self.database.connection() as conn:
            rows = conn.execute(
                f"SELECT * FROM authors WHERE {live_clause(include_deleted=include_deleted)} "
                "ORDER BY full_name ASC, id ASC"
            ).fetchall()
        return [self.row_to_author(row) for row in rows]

    def get(self, author_id: int, include_deleted: bool = False) -> Optional[AuthorRead]:
        with self.database.connection() as conn:
            row = self._fetch_row(conn, author_id, include_deleted)
        return self.row_to_author(row) if row else None

    def live_ids(self, author_ids: Iterable[int]) -> Set[int]:
        """Return the subset of ``author_ids`` that belong to live authors."""
        ids = list(set(author_ids))
        if not ids:
            return set()
        with self.database.connection() as conn:
            rows = conn.execute(
                f"SELECT id FROM authors WHERE id IN ({placeholders(ids)}) AND deleted_at IS NULL",
                ids,
            ).fetchall()
        return {row["id"] for row in rows}

    def create(self, values: Dict[str, Any]) -> AuthorRead:
        with self.database.transaction() as conn:
            author_id = self._insert(conn, values)
            row = self._fetch_row(conn, author_id)
        return self.row_to_author(row)

    def update(self, author_id: int, changes: Dict[str, Any]) -> AuthorRead:
        with self.database.transaction() as conn:
            self._update(conn, author_id, changes)
            row = self._fetch_row(conn, author_id)
        return self.row_to_author(row)

    @staticmethod
    def row_to_author(row: sqlite3.Row, prefix: str = "") -> AuthorRead:
        """Build an ``AuthorRead`` from a row, optionally from prefixed join columns."""
        return AuthorRead(
            id=row[f"{prefix}id"],
            full_name=row[f"{prefix}full_name"],
            email=row[f"{prefix}email"],
            orcid=row[f"{prefix}orcid"],
            created_at=row[f"{prefix}created_at"],
            updated_at=row[f"{prefix}updated_at"],
            deleted_at=row[f"{prefix}deleted_at"],
        )
