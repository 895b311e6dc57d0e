"""
Tests for the SQLite store and the soft-delete aware repositories.

These work below the HTTP layer to check what actually lands in the
database: rows are never removed, and multi-statement writes apply
completely or not at all.
"""
import sqlite3

import pytest

from record_store_api.app.core.db import (
    Database,
    RecordNotFound,
    StoreFailure,
    UniqueViolation,
    get_database_path,
    translate_error,
)
from record_store_api.app.repositories.authors import AuthorRepository
from record_store_api.app.repositories.lookups import ProjectTypeRepository, PublicationTypeRepository
from record_store_api.app.repositories.publications import AuthorLink, PublicationRepository
from record_store_api.app.repositories.users import UserRepository


def count_rows(database: Database, table: str, where: str = "1 = 1") -> int:
    with database.connection() as conn:
        return conn.execute(f"SELECT COUNT(*) AS n FROM {table} WHERE {where}").fetchone()["n"]


def test_init_is_idempotent_and_seeds_types(database):
    database.init()
    assert [t.name for t in ProjectTypeRepository(database).list()] == [
        "National projects",
        "International projects",
        "Institutional projects",
    ]
    assert [t.name for t in PublicationTypeRepository(database).list()] == [
        "Book chapter",
        "Conference paper",
        "Journal article",
        "Monograph",
    ]
    assert count_rows(database, "migrations") == 2


def test_relative_database_path_is_absolute():
    assert get_database_path("/tmp/x.db") == "/tmp/x.db"
    assert get_database_path("data/records.db").endswith("data/records.db")
    assert get_database_path("data/records.db").startswith("/")


class TestTranslateError:
    def test_unique_violation_fields_are_camel_case(self):
        error = translate_error(sqlite3.IntegrityError("UNIQUE constraint failed: authors.full_name, authors.orcid"))
        assert isinstance(error, UniqueViolation)
        assert error.fields == ["fullName", "orcid"]

    def test_other_errors_are_store_failures(self):
        error = translate_error(sqlite3.OperationalError("database is locked"))
        assert isinstance(error, StoreFailure)
        assert str(error) == "database is locked"


class TestSoftDelete:
    def test_deleted_author_is_hidden_but_kept(self, database):
        authors = AuthorRepository(database)
        author = authors.create({"full_name": "Ivan Vazov"})

        assert authors.soft_delete(author.id) is True
        assert authors.get(author.id) is None
        assert authors.list() == []
        assert authors.exists(author.id) is False

        kept = authors.get(author.id, include_deleted=True)
        assert kept is not None
        assert kept.deleted_at is not None
        assert count_rows(database, "authors") == 1

    def test_second_delete_reports_missing(self, database):
        authors = AuthorRepository(database)
        author = authors.create({"full_name": "Ivan Vazov"})
        assert authors.soft_delete(author.id) is True
        assert authors.soft_delete(author.id) is False

    def test_deleted_row_cannot_be_updated(self, database):
        authors = AuthorRepository(database)
        author = authors.create({"full_name": "Ivan Vazov"})
        authors.soft_delete(author.id)
        with pytest.raises(RecordNotFound):
            authors.update(author.id, {"full_name": "Someone else"})

    def test_orcid_is_reusable_after_delete(self, database):
        authors = AuthorRepository(database)
        first = authors.create({"full_name": "A", "orcid": "0000-0001"})
        with pytest.raises(UniqueViolation) as excinfo:
            authors.create({"full_name": "B", "orcid": "0000-0001"})
        assert excinfo.value.fields == ["orcid"]

        authors.soft_delete(first.id)
        second = authors.create({"full_name": "B", "orcid": "0000-0001"})
        assert second.orcid == "0000-0001"

    def test_user_delete_cascades_to_contacts(self, database):
        users = UserRepository(database)
        user = users.create("Maria", ["m@x.org"], ["+359 1"])
        users.soft_delete(user.id)

        assert count_rows(database, "user_emails", "deleted_at IS NULL") == 0
        assert count_rows(database, "user_phones", "deleted_at IS NULL") == 0
        assert count_rows(database, "user_emails") == 1


class TestContactReplacement:
    def test_replacing_emails_keeps_history(self, database):
        users = UserRepository(database)
        user = users.create("Maria", ["old@x.org"], [])

        updated = users.update(user.id, {}, emails=["new@x.org"])

        assert [e.email for e in updated.emails] == ["new@x.org"]
        assert count_rows(database, "user_emails") == 2
        history = users.get(user.id, include_deleted=True)
        assert {e.email for e in history.emails} == {"old@x.org", "new@x.org"}

    def test_phones_untouched_when_not_given(self, database):
        users = UserRepository(database)
        user = users.create("Maria", [], ["+359 1"])
        updated = users.update(user.id, {"name": "Maria I."})
        assert updated.name == "Maria I."
        assert [p.phone for p in updated.phones] == ["+359 1"]


class TestPublicationLinks:
    def make_publication(self, database, links):
        return PublicationRepository(database).create(
            {"year": 2024, "title": "Study", "description": None, "type_id": 1},
            links,
        )

    def test_links_are_ordered_by_position(self, database):
        authors = AuthorRepository(database)
        a = authors.create({"full_name": "A"})
        b = authors.create({"full_name": "B"})

        publication = self.make_publication(database, [AuthorLink(a.id, 2), AuthorLink(b.id, 1)])

        assert [link.author_id for link in publication.authors] == [b.id, a.id]
        assert [link.order for link in publication.authors] == [1, 2]

    def test_replace_authors_soft_deletes_old_links(self, database):
        authors = AuthorRepository(database)
        a = authors.create({"full_name": "A"})
        b = authors.create({"full_name": "B"})
        publication = self.make_publication(database, [AuthorLink(a.id, 1)])

        replaced = PublicationRepository(database).replace_authors(publication.id, [AuthorLink(b.id, 1)])

        assert [link.author_id for link in replaced.authors] == [b.id]
        assert count_rows(database, "publication_authors") == 2
        assert count_rows(database, "publication_authors", "deleted_at IS NULL") == 1

    def test_failed_replace_leaves_old_links(self, database):
        authors = AuthorRepository(database)
        a = authors.create({"full_name": "A"})
        publication = self.make_publication(database, [AuthorLink(a.id, 1)])
        repo = PublicationRepository(database)

        # author 999 does not exist, so the foreign key rejects the insert
        with pytest.raises(StoreFailure):
            repo.replace_authors(publication.id, [AuthorLink(999, 1)])

        current = repo.get(publication.id)
        assert [link.author_id for link in current.authors] == [a.id]
        assert count_rows(database, "publication_authors") == 1

    def test_delete_cascades_to_links(self, database):
        authors = AuthorRepository(database)
        a = authors.create({"full_name": "A"})
        publication = self.make_publication(database, [AuthorLink(a.id, 1)])
        repo = PublicationRepository(database)

        assert repo.soft_delete(publication.id) is True
        assert repo.get(publication.id) is None
        assert count_rows(database, "publication_authors", "deleted_at IS NULL") == 0
