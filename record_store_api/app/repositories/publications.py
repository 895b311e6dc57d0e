"""
Repository for publications and their ordered author links.

Links live in ``publication_authors`` and are append‑only: replacing a
publication's authors soft‑deletes every live link and inserts a fresh
row per submitted author, all inside the transaction that also applies
the publication's own field changes.  Readers therefore see either the
old link set or the new one, never a partial or empty intermediate.

Publications are returned with their type and their live links
(ordered by ``position``, ties by link id), each link carrying the
linked author.
"""

import sqlite3
from typing import Any, Dict, List, NamedTuple, Optional, Sequence

from record_store_api.app.core.db import RecordNotFound, now_timestamp
from record_store_api.app.repositories.authors import AuthorRepository
from record_store_api.app.repositories.base import Repository, group_by, live_clause, placeholders
from record_store_api.app.schemas.publication import (
    PublicationAuthorRead,
    PublicationRead,
    PublicationTypeRead,
)

PUBLICATION_SELECT = """
    SELECT p.*, t.name AS type_name, t.deleted_at AS type_deleted_at
    FROM publications p
    JOIN publication_types t ON t.id = p.type_id
"""

LINK_SELECT = """
    SELECT pa.id AS link_id, pa.publication_id, pa.author_id, pa.position,
           pa.deleted_at AS link_deleted_at,
           a.id AS a_id, a.full_name AS a_full_name, a.email AS a_email, a.orcid AS a_orcid,
           a.created_at AS a_created_at, a.updated_at AS a_updated_at, a.deleted_at AS a_deleted_at
    FROM publication_authors pa
    JOIN authors a ON a.id = pa.author_id
"""


class AuthorLink(NamedTuple):
    """One author of a publication at a given citation position."""

    author_id: int
    order: int


class PublicationRepository(Repository):
    table = "publications"

    def list(self, type_id: Optional[int] = None, include_deleted: bool = False) -> List[PublicationRead]:
        """Return publications newest year first, optionally of one type."""
        query = PUBLICATION_SELECT + f" WHERE {live_clause('p', include_deleted)}"
        params: list = []
        if type_id is not None:
            query += " AND p.type_id = ?"
            params.append(type_id)
        query += " ORDER BY p.year DESC, p.id DESC"
        with self.database.connection() as conn:
            rows = conn.execute(query, params).fetchall()
            return self._hydrate(conn, rows)

    def get(self, publication_id: int, include_deleted: bool = False) -> Optional[PublicationRead]:
        with self.database.connection() as conn:
            row = self._fetch_publication(conn, publication_id, include_deleted)
            if row is None:
                return None
            return self._hydrate(conn, [row])[0]

    def create(self, values: Dict[str, Any], links: Sequence[AuthorLink]) -> PublicationRead:
        with self.database.transaction() as conn:
            publication_id = self._insert(conn, values)
            self._insert_links(conn, publication_id, links)
            return self._load(conn, publication_id)

    def update(
        self,
        publication_id: int,
        changes: Dict[str, Any],
        links: Optional[Sequence[AuthorLink]] = None,
    ) -> PublicationRead:
        """Apply field changes and, when ``links`` is given, replace the authors.

        ``links=None`` leaves the current links untouched; an empty
        sequence detaches every author.  Both happen in one transaction.
        """
        with self.database.transaction() as conn:
            if links is not None:
                self._replace_links(conn, publication_id, links)
            self._update(conn, publication_id, changes)
            return self._load(conn, publication_id)

    def replace_authors(self, publication_id: int, links: Sequence[AuthorLink]) -> PublicationRead:
        """Atomically swap the full author set of a live publication."""
        return self.update(publication_id, {}, links)

    def soft_delete(self, publication_id: int) -> bool:
        """Soft‑delete the publication and its live author links together."""
        with self.database.transaction() as conn:
            if not self._soft_delete(conn, publication_id):
                return False
            self._soft_delete_links(conn, publication_id)
            return True

    def _insert_links(self, conn: sqlite3.Connection, publication_id: int, links: Sequence[AuthorLink]) -> None:
        conn.executemany(
            "INSERT INTO publication_authors (publication_id, author_id, position) VALUES (?, ?, ?)",
            [(publication_id, link.author_id, link.order) for link in links],
        )

    def _soft_delete_links(self, conn: sqlite3.Connection, publication_id: int) -> None:
        conn.execute(
            "UPDATE publication_authors SET deleted_at = ? WHERE publication_id = ? AND deleted_at IS NULL",
            (now_timestamp(), publication_id),
        )

    def _replace_links(self, conn: sqlite3.Connection, publication_id: int, links: Sequence[AuthorLink]) -> None:
        self._soft_delete_links(conn, publication_id)
        self._insert_links(conn, publication_id, links)

    def _fetch_publication(
        self, conn: sqlite3.Connection, publication_id: int, include_deleted: bool = False
    ) -> Optional[sqlite3.Row]:
        return conn.execute(
            PUBLICATION_SELECT + f" WHERE p.id = ? AND {live_clause('p', include_deleted)}",
            (publication_id,),
        ).fetchone()

    def _load(self, conn: sqlite3.Connection, publication_id: int) -> PublicationRead:
        row = self._fetch_publication(conn, publication_id)
        if row is None:
            raise RecordNotFound(f"publications {publication_id}")
        return self._hydrate(conn, [row])[0]

    def _hydrate(self, conn: sqlite3.Connection, rows: Sequence[sqlite3.Row]) -> List[PublicationRead]:
        """Attach type and live author links to publication rows."""
        publication_ids = [row["id"] for row in rows]
        if not publication_ids:
            return []
        link_rows = conn.execute(
            LINK_SELECT
            + f" WHERE pa.publication_id IN ({placeholders(publication_ids)}) AND pa.deleted_at IS NULL"
            + " ORDER BY pa.position ASC, pa.id ASC",
            publication_ids,
        ).fetchall()
        links = group_by(link_rows, "publication_id")
        return [
            PublicationRead(
                id=row["id"],
                year=row["year"],
                title=row["title"],
                description=row["description"],
                type_id=row["type_id"],
                created_at=row["created_at"],
                updated_at=row["updated_at"],
                deleted_at=row["deleted_at"],
                type=PublicationTypeRead(id=row["type_id"], name=row["type_name"], deleted_at=row["type_deleted_at"]),
                authors=[self._row_to_link(link) for link in links.get(row["id"], [])],
            )
            for row in rows
        ]

    @staticmethod
    def _row_to_link(row: sqlite3.Row) -> PublicationAuthorRead:
        return PublicationAuthorRead(
            id=row["link_id"],
            publication_id=row["publication_id"],
            author_id=row["author_id"],
            order=row["position"],
            deleted_at=row["link_deleted_at"],
            author=AuthorRepository.row_to_author(row, prefix="a_"),
        )
