"""
Repositories for the read‑only lookup tables.

Project and publication types are seeded by the migrations and never
written through the API.  They still follow the soft‑delete
convention: a type whose ``deleted_at`` is set cannot be listed or
linked to.
"""

import sqlite3
from typing import List, Optional

from record_store_api.app.repositories.base import Repository, live_clause
from record_store_api.app.schemas.project import ProjectTypeRead
from record_store_api.app.schemas.publication import PublicationTypeRead


class ProjectTypeRepository(Repository):
    table = "project_types"
    tracks_updates = False

    def list(self, include_deleted: bool = False) -> List[ProjectTypeRead]:
        with self.database.connection() as conn:
            rows = conn.execute(
                f"SELECT * FROM project_types WHERE {live_clause(include_deleted=include_deleted)} ORDER BY id ASC"
            ).fetchall()
        return [self._row_to_type(row) for row in rows]

    def get(self, type_id: int, include_deleted: bool = False) -> Optional[ProjectTypeRead]:
        with self.database.connection() as conn:
            row = self._fetch_row(conn, type_id, include_deleted)
        return self._row_to_type(row) if row else None

    def find_by_name(self, name: str, include_deleted: bool = False) -> Optional[ProjectTypeRead]:
        """Look a type up by its unique name (surrounding whitespace ignored)."""
        with self.database.connection() as conn:
            row = conn.execute(
                f"SELECT * FROM project_types WHERE name = ? AND {live_clause(include_deleted=include_deleted)}",
                (name.strip(),),
            ).fetchone()
        return self._row_to_type(row) if row else None

    @staticmethod
    def _row_to_type(row: sqlite3.Row) -> ProjectTypeRead:
        return ProjectTypeRead(id=row["id"], name=row["name"], deleted_at=row["deleted_at"])


class PublicationTypeRepository(Repository):
    table = "publication_types"
    tracks_updates = False

    def list(self, include_deleted: bool = False) -> List[PublicationTypeRead]:
        with self.database.connection() as conn:
            rows = conn.execute(
                f"SELECT * FROM publication_types WHERE {live_clause(include_deleted=include_deleted)} "
                "ORDER BY name ASC, id ASC"
            ).fetchall()
        return [self._row_to_type(row) for row in rows]

    def get(self, type_id: int, include_deleted: bool = False) -> Optional[PublicationTypeRead]:
        with self.database.connection() as conn:
            row = self._fetch_row(conn, type_id, include_deleted)
        return self._row_to_type(row) if row else None

    @staticmethod
    def _row_to_type(row: sqlite3.Row) -> PublicationTypeRead:
        return PublicationTypeRead(id=row["id"], name=row["name"], deleted_at=row["deleted_at"])
