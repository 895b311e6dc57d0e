"""Repository for e‑library items."""

import sqlite3
from typing import Any, Dict, List, Optional

from record_store_api.app.repositories.base import Repository, live_clause
from record_store_api.app.schemas.elibrary import ELibraryItemRead


class ELibraryRepository(Repository):
    table = "elibrary_items"

    def list(self, include_deleted: bool = False) -> List[ELibraryItemRead]:
        with self.database.connection() as conn:
            rows = conn.execute(
                f"SELECT * FROM elibrary_items WHERE {live_clause(include_deleted=include_deleted)} ORDER BY id DESC"
            ).fetchall()
        return [self._row_to_item(row) for row in rows]

    def get(self, item_id: int, include_deleted: bool = False) -> Optional[ELibraryItemRead]:
        with self.database.connection() as conn:
            row = self._fetch_row(conn, item_id, include_deleted)
        return self._row_to_item(row) if row else None

    def create(self, values: Dict[str, Any]) -> ELibraryItemRead:
        with self.database.transaction() as conn:
            item_id = self._insert(conn, values)
            row = self._fetch_row(conn, item_id)
        return self._row_to_item(row)

    def update(self, item_id: int, changes: Dict[str, Any]) -> ELibraryItemRead:
        with self.database.transaction() as conn:
            self._update(conn, item_id, changes)
            row = self._fetch_row(conn, item_id)
        return self._row_to_item(row)

    @staticmethod
    def _row_to_item(row: sqlite3.Row) -> ELibraryItemRead:
        return ELibraryItemRead(
            id=row["id"],
            author=row["author"],
            title=row["title"],
            organization=row["organization"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
            deleted_at=row["deleted_at"],
        )
