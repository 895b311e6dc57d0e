"""
SQLite database integration and simple migration system.

``Database`` is the single handle to the relational store.  It is
constructed once when the application starts, stored on
``app.state.database`` and handed to repositories explicitly.  It
provides short‑lived connections for reads (``connection``), atomic
units of work for writes (``transaction``) and applies migrations on
startup (``init``).

sqlite3 errors never leave this module as‑is: they are translated into
the ``StoreError`` hierarchy below so that services can react to a
uniqueness violation without parsing vendor messages.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from .config import Settings

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Base class for failures reported by the persistence adapter."""


class RecordNotFound(StoreError):
    """The targeted live row does not exist (or vanished mid‑operation)."""


class UniqueViolation(StoreError):
    """A uniqueness constraint rejected the write.

    ``fields`` lists the offending columns using their API (camelCase)
    names, or is empty when the store did not report them.
    """

    def __init__(self, fields: Optional[List[str]] = None) -> None:
        self.fields = fields or []
        super().__init__(f"Unique constraint failed: {', '.join(self.fields) or 'unknown'}")


class StoreFailure(StoreError):
    """Any other store failure (I/O errors, locked database, bad SQL)."""


def _to_camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def translate_error(exc: sqlite3.Error) -> StoreError:
    """Map a sqlite3 exception onto the ``StoreError`` hierarchy.

    SQLite reports unique violations as
    ``UNIQUE constraint failed: authors.orcid`` (several columns are
    comma separated), which is the only vendor message inspected.
    """
    message = str(exc)
    if isinstance(exc, sqlite3.IntegrityError) and message.startswith("UNIQUE constraint failed"):
        _, _, columns = message.partition(":")
        fields = [_to_camel(column.strip().split(".")[-1]) for column in columns.split(",") if column.strip()]
        return UniqueViolation(fields)
    return StoreFailure(message)


def now_timestamp() -> str:
    """Current UTC time in the same format SQLite uses for CURRENT_TIMESTAMP."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")


MIGRATIONS: List[Tuple[int, str]] = [
    # Migration 1: record tables.  Every table carries ``deleted_at``;
    # a row is live while it is NULL.
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS users (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            deleted_at TIMESTAMP
        );

        CREATE TABLE IF NOT EXISTS user_emails (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            user_id INTEGER NOT NULL,
            email TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            deleted_at TIMESTAMP,
            FOREIGN KEY(user_id) REFERENCES users(id)
        );

        CREATE TABLE IF NOT EXISTS user_phones (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            user_id INTEGER NOT NULL,
            phone TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            deleted_at TIMESTAMP,
            FOREIGN KEY(user_id) REFERENCES users(id)
        );

        CREATE TABLE IF NOT EXISTS authors (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            full_name TEXT NOT NULL,
            email TEXT,
            orcid TEXT,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            deleted_at TIMESTAMP
        );

        CREATE TABLE IF NOT EXISTS project_types (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL UNIQUE,
            deleted_at TIMESTAMP
        );

        CREATE TABLE IF NOT EXISTS projects (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            start_date TEXT NOT NULL,
            end_date TEXT,
            description TEXT NOT NULL,
            website_url TEXT,
            type_id INTEGER NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            deleted_at TIMESTAMP,
            FOREIGN KEY(type_id) REFERENCES project_types(id)
        );

        CREATE TABLE IF NOT EXISTS publication_types (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL UNIQUE,
            deleted_at TIMESTAMP
        );

        CREATE TABLE IF NOT EXISTS publications (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            year INTEGER NOT NULL,
            title TEXT NOT NULL,
            description TEXT,
            type_id INTEGER NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            deleted_at TIMESTAMP,
            FOREIGN KEY(type_id) REFERENCES publication_types(id)
        );

        CREATE TABLE IF NOT EXISTS publication_authors (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            publication_id INTEGER NOT NULL,
            author_id INTEGER NOT NULL,
            position INTEGER NOT NULL CHECK (position > 0),
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            deleted_at TIMESTAMP,
            FOREIGN KEY(publication_id) REFERENCES publications(id),
            FOREIGN KEY(author_id) REFERENCES authors(id)
        );

        CREATE TABLE IF NOT EXISTS elibrary_items (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            author TEXT NOT NULL,
            title TEXT NOT NULL,
            organization TEXT,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            deleted_at TIMESTAMP
        );
        """,
    ),
    # Migration 2: uniqueness among live rows and lookup indices
    (
        2,
        """
        -- Partial indexes so that a soft-deleted row never blocks reuse of its value.
        CREATE UNIQUE INDEX IF NOT EXISTS ux_authors_orcid_live ON authors(orcid) WHERE deleted_at IS NULL;
        CREATE UNIQUE INDEX IF NOT EXISTS ux_user_emails_email_live ON user_emails(email) WHERE deleted_at IS NULL;

        CREATE INDEX IF NOT EXISTS idx_user_emails_user_id ON user_emails(user_id);
        CREATE INDEX IF NOT EXISTS idx_user_phones_user_id ON user_phones(user_id);
        CREATE INDEX IF NOT EXISTS idx_projects_type_id ON projects(type_id);
        CREATE INDEX IF NOT EXISTS idx_publications_type_id ON publications(type_id);
        CREATE INDEX IF NOT EXISTS idx_publication_authors_publication_id ON publication_authors(publication_id);
        CREATE INDEX IF NOT EXISTS idx_publication_authors_author_id ON publication_authors(author_id);
        """,
    ),
]

PROJECT_TYPES: List[Tuple[int, str]] = [
    (1, "National projects"),
    (2, "International projects"),
    (3, "Institutional projects"),
]

PUBLICATION_TYPES: List[Tuple[int, str]] = [
    (1, "Journal article"),
    (2, "Conference paper"),
    (3, "Monograph"),
    (4, "Book chapter"),
]


def get_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    Absolute paths are used as is; relative paths are resolved against
    the project root (the directory holding ``record_store_api``).
    """
    if os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / database_url).resolve())


class Database:
    """Handle to the SQLite store shared by all repositories."""

    def __init__(self, path: str) -> None:
        self.path = path

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(get_database_path(settings.database_url))

    def connect(self) -> sqlite3.Connection:
        """Open a new connection in autocommit mode.

        Rows are returned as ``sqlite3.Row`` so columns can be read by
        name.  Foreign key enforcement is off by default in SQLite and
        must be enabled per connection.
        """
        conn = sqlite3.connect(self.path, isolation_level=None)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        return conn

    @contextmanager
    def connection(self) -> Iterator[sqlite3.Connection]:
        """Yield a connection for reads and single statements."""
        try:
            conn = self.connect()
        except sqlite3.Error as exc:
            raise translate_error(exc) from exc
        try:
            yield conn
        except sqlite3.Error as exc:
            raise translate_error(exc) from exc
        finally:
            conn.close()

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        """Yield a connection inside ``BEGIN IMMEDIATE``.

        Commits when the block exits normally and rolls back on any
        exception, so either every statement in the block applies or
        none does.
        """
        with self.connection() as conn:
            conn.execute("BEGIN IMMEDIATE")
            try:
                yield conn
            except BaseException:
                conn.rollback()
                raise
            else:
                conn.commit()

    def init(self) -> None:
        """Create the schema, apply pending migrations and seed lookups.

        Creates the ``migrations`` table if it does not exist, applies
        every migration newer than the recorded version and makes sure
        the read‑only project and publication types exist.
        """
        Path(self.path).parent.mkdir(parents=True, exist_ok=True)
        with self.connection() as conn:
            conn.execute("CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)")
            row = conn.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
            current_version = row["version"] if row and row["version"] is not None else 0

            for version, sql in MIGRATIONS:
                if version > current_version:
                    conn.executescript(sql)
                    conn.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
                    logger.info("Applied migration %s", version)
                    current_version = version

            conn.executemany(
                "INSERT OR IGNORE INTO project_types (id, name) VALUES (?, ?)",
                PROJECT_TYPES,
            )
            conn.executemany(
                "INSERT OR IGNORE INTO publication_types (id, name) VALUES (?, ?)",
                PUBLICATION_TYPES,
            )
