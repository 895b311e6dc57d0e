"""
Soft‑delete aware repository base.

Every repository method that reads or writes a record accepts
``include_deleted`` (default ``False``).  With the default, rows whose
``deleted_at`` is set behave exactly as if they did not exist: they
are not listed, not returned, not updated and cannot be deleted again.
Nothing in the application issues a ``DELETE`` statement.
"""

import sqlite3
from typing import Any, Dict, Iterable, List, Optional

from record_store_api.app.core.db import Database, RecordNotFound, now_timestamp


def live_clause(alias: str = "", include_deleted: bool = False) -> str:
    """SQL condition selecting live rows (``1 = 1`` when deleted rows are wanted)."""
    if include_deleted:
        return "1 = 1"
    prefix = f"{alias}." if alias else ""
    return f"{prefix}deleted_at IS NULL"


def placeholders(values: Iterable[Any]) -> str:
    return ", ".join("?" for _ in values)


class Repository:
    """Common plumbing for a table with ``id`` and ``deleted_at`` columns."""

    table: str = ""
    #: whether the table carries an ``updated_at`` column
    tracks_updates: bool = True

    def __init__(self, database: Database) -> None:
        self.database = database

    def exists(self, record_id: int, include_deleted: bool = False) -> bool:
        with self.database.connection() as conn:
            return self._fetch_row(conn, record_id, include_deleted) is not None

    def soft_delete(self, record_id: int) -> bool:
        """Mark a live row as deleted.

        Returns ``False`` when no live row matched, which includes a
        row that has already been deleted.
        """
        with self.database.transaction() as conn:
            return self._soft_delete(conn, record_id)

    def _fetch_row(
        self, conn: sqlite3.Connection, record_id: int, include_deleted: bool = False
    ) -> Optional[sqlite3.Row]:
        return conn.execute(
            f"SELECT * FROM {self.table} WHERE id = ? AND {live_clause(include_deleted=include_deleted)}",
            (record_id,),
        ).fetchone()

    def _insert(self, conn: sqlite3.Connection, values: Dict[str, Any]) -> int:
        columns = ", ".join(values)
        cursor = conn.execute(
            f"INSERT INTO {self.table} ({columns}) VALUES ({placeholders(values)})",
            tuple(values.values()),
        )
        return cursor.lastrowid

    def _update(self, conn: sqlite3.Connection, record_id: int, changes: Dict[str, Any]) -> None:
        """Apply ``changes`` to a live row, raising ``RecordNotFound`` otherwise.

        Column names come from the repositories themselves, never from
        request payloads.
        """
        assignments = [f"{column} = ?" for column in changes]
        if self.tracks_updates:
            assignments.append("updated_at = CURRENT_TIMESTAMP")
        if not assignments:
            if self._fetch_row(conn, record_id) is None:
                raise RecordNotFound(f"{self.table} {record_id}")
            return
        cursor = conn.execute(
            f"UPDATE {self.table} SET {', '.join(assignments)} WHERE id = ? AND deleted_at IS NULL",
            (*changes.values(), record_id),
        )
        if cursor.rowcount == 0:
            raise RecordNotFound(f"{self.table} {record_id}")

    def _soft_delete(self, conn: sqlite3.Connection, record_id: int) -> bool:
        cursor = conn.execute(
            f"UPDATE {self.table} SET deleted_at = ? WHERE id = ? AND deleted_at IS NULL",
            (now_timestamp(), record_id),
        )
        return cursor.rowcount > 0


def group_by(rows: Iterable[sqlite3.Row], key: str) -> Dict[Any, List[sqlite3.Row]]:
    grouped: Dict[Any, List[sqlite3.Row]] = {}
    for row in rows:
        grouped.setdefault(row[key], []).append(row)
    return grouped
