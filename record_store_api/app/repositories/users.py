"""
Repository for users and their email/phone child rows.

Contact values are stored one per row in ``user_emails`` and
``user_phones``.  Replacing a set soft‑deletes the current live rows
and inserts the new values, and deleting a user soft‑deletes its live
contact rows in the same transaction.
"""

import sqlite3
from typing import Any, Dict, List, Optional, Sequence

from record_store_api.app.core.db import now_timestamp
from record_store_api.app.repositories.base import Repository, group_by, live_clause, placeholders
from record_store_api.app.schemas.user import EmailRead, PhoneRead, UserRead

# child table -> value column
CONTACT_TABLES = {"user_emails": "email", "user_phones": "phone"}


class UserRepository(Repository):
    table = "users"

    def list(self, include_deleted: bool = False) -> List[UserRead]:
        with self.database.connection() as conn:
            rows = conn.execute(
                f"SELECT * FROM users WHERE {live_clause(include_deleted=include_deleted)} ORDER BY id ASC"
            ).fetchall()
            return self._hydrate(conn, rows, include_deleted)

    def get(self, user_id: int, include_deleted: bool = False) -> Optional[UserRead]:
        with self.database.connection() as conn:
            row = self._fetch_row(conn, user_id, include_deleted)
            if row is None:
                return None
            return self._hydrate(conn, [row], include_deleted)[0]

    def create(self, name: str, emails: Sequence[str], phones: Sequence[str]) -> UserRead:
        with self.database.transaction() as conn:
            user_id = self._insert(conn, {"name": name})
            self._insert_contacts(conn, "user_emails", user_id, emails)
            self._insert_contacts(conn, "user_phones", user_id, phones)
            row = self._fetch_row(conn, user_id)
            return self._hydrate(conn, [row])[0]

    def update(
        self,
        user_id: int,
        changes: Dict[str, Any],
        emails: Optional[Sequence[str]] = None,
        phones: Optional[Sequence[str]] = None,
    ) -> UserRead:
        """Apply field changes and replace contact sets given as lists.

        ``None`` for ``emails``/``phones`` leaves that set untouched; an
        empty list clears it.
        """
        with self.database.transaction() as conn:
            self._update(conn, user_id, changes)
            if emails is not None:
                self._replace_contacts(conn, "user_emails", user_id, emails)
            if phones is not None:
                self._replace_contacts(conn, "user_phones", user_id, phones)
            row = self._fetch_row(conn, user_id)
            return self._hydrate(conn, [row])[0]

    def soft_delete(self, user_id: int) -> bool:
        with self.database.transaction() as conn:
            if not self._soft_delete(conn, user_id):
                return False
            deleted_at = now_timestamp()
            for table in CONTACT_TABLES:
                conn.execute(
                    f"UPDATE {table} SET deleted_at = ? WHERE user_id = ? AND deleted_at IS NULL",
                    (deleted_at, user_id),
                )
            return True

    def _insert_contacts(self, conn: sqlite3.Connection, table: str, user_id: int, values: Sequence[str]) -> None:
        column = CONTACT_TABLES[table]
        conn.executemany(
            f"INSERT INTO {table} (user_id, {column}) VALUES (?, ?)",
            [(user_id, value) for value in values],
        )

    def _replace_contacts(self, conn: sqlite3.Connection, table: str, user_id: int, values: Sequence[str]) -> None:
        conn.execute(
            f"UPDATE {table} SET deleted_at = ? WHERE user_id = ? AND deleted_at IS NULL",
            (now_timestamp(), user_id),
        )
        self._insert_contacts(conn, table, user_id, values)

    def _hydrate(
        self, conn: sqlite3.Connection, rows: Sequence[sqlite3.Row], include_deleted: bool = False
    ) -> List[UserRead]:
        """Attach contact rows to each user row with one query per child table."""
        user_ids = [row["id"] for row in rows]
        if not user_ids:
            return []
        contacts = {}
        for table in CONTACT_TABLES:
            child_rows = conn.execute(
                f"SELECT * FROM {table} WHERE user_id IN ({placeholders(user_ids)}) "
                f"AND {live_clause(include_deleted=include_deleted)} ORDER BY id ASC",
                user_ids,
            ).fetchall()
            contacts[table] = group_by(child_rows, "user_id")
        return [
            UserRead(
                id=row["id"],
                name=row["name"],
                created_at=row["created_at"],
                updated_at=row["updated_at"],
                deleted_at=row["deleted_at"],
                emails=[
                    EmailRead(id=child["id"], user_id=child["user_id"], email=child["email"])
                    for child in contacts["user_emails"].get(row["id"], [])
                ],
                phones=[
                    PhoneRead(id=child["id"], user_id=child["user_id"], phone=child["phone"])
                    for child in contacts["user_phones"].get(row["id"], [])
                ],
            )
            for row in rows
        ]
