"""Repository for projects, returned with their project type expanded."""

import sqlite3
from datetime import date
from typing import Any, Dict, List, Optional

from record_store_api.app.repositories.base import Repository, live_clause
from record_store_api.app.schemas.project import ProjectRead, ProjectTypeRead

PROJECT_SELECT = """
    SELECT p.*, t.name AS type_name, t.deleted_at AS type_deleted_at
    FROM projects p
    JOIN project_types t ON t.id = p.type_id
"""


def _store_value(value: Any) -> Any:
    # dates are kept as ISO text so they sort and compare lexically
    return value.isoformat() if isinstance(value, date) else value


class ProjectRepository(Repository):
    table = "projects"

    def list(self, type_id: Optional[int] = None, include_deleted: bool = False) -> List[ProjectRead]:
        """Return projects newest first, optionally restricted to one type."""
        query = PROJECT_SELECT + f" WHERE {live_clause('p', include_deleted)}"
        params: list = []
        if type_id is not None:
            query += " AND p.type_id = ?"
            params.append(type_id)
        query += " ORDER BY p.id DESC"
        with self.database.connection() as conn:
            rows = conn.execute(query, params).fetchall()
        return [self._row_to_project(row) for row in rows]

    def get(self, project_id: int, include_deleted: bool = False) -> Optional[ProjectRead]:
        with self.database.connection() as conn:
            row = self._fetch_project(conn, project_id, include_deleted)
        return self._row_to_project(row) if row else None

    def create(self, values: Dict[str, Any]) -> ProjectRead:
        with self.database.transaction() as conn:
            project_id = self._insert(conn, {key: _store_value(value) for key, value in values.items()})
            row = self._fetch_project(conn, project_id)
        return self._row_to_project(row)

    def update(self, project_id: int, changes: Dict[str, Any]) -> ProjectRead:
        with self.database.transaction() as conn:
            self._update(conn, project_id, {key: _store_value(value) for key, value in changes.items()})
            row = self._fetch_project(conn, project_id)
        return self._row_to_project(row)

    def _fetch_project(
        self, conn: sqlite3.Connection, project_id: int, include_deleted: bool = False
    ) -> Optional[sqlite3.Row]:
        return conn.execute(
            PROJECT_SELECT + f" WHERE p.id = ? AND {live_clause('p', include_deleted)}",
            (project_id,),
        ).fetchone()

    @staticmethod
    def _row_to_project(row: sqlite3.Row) -> ProjectRead:
        return ProjectRead(
            id=row["id"],
            start_date=row["start_date"],
            end_date=row["end_date"],
            description=row["description"],
            website_url=row["website_url"],
            type_id=row["type_id"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
            deleted_at=row["deleted_at"],
            type=ProjectTypeRead(id=row["type_id"], name=row["type_name"], deleted_at=row["type_deleted_at"]),
        )
