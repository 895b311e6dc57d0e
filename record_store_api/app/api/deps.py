"""
Dependency providers for route handlers.

The ``Database`` is created once by ``create_app`` and kept on
``app.state``.  These providers wrap it in the repositories and
services a handler needs, so handlers never reach for a global store
and tests can hand the application a database of their own.
"""

from typing import Annotated

from fastapi import Depends, Path, Request

from record_store_api.app.core.db import Database
from record_store_api.app.core.validation import SQLITE_INT_MAX
from record_store_api.app.repositories.authors import AuthorRepository
from record_store_api.app.repositories.elibrary import ELibraryRepository
from record_store_api.app.repositories.projects import ProjectRepository
from record_store_api.app.repositories.publications import PublicationRepository
from record_store_api.app.repositories.lookups import ProjectTypeRepository, PublicationTypeRepository
from record_store_api.app.repositories.users import UserRepository
from record_store_api.app.services.author_service import AuthorService
from record_store_api.app.services.elibrary_service import ELibraryService
from record_store_api.app.services.project_service import ProjectService
from record_store_api.app.services.publication_service import PublicationService
from record_store_api.app.services.type_service import TypeService
from record_store_api.app.services.user_service import UserService

# Path id of a record.  Ids start at 1 and must fit a SQLite INTEGER;
# anything else is rejected with 400 "Invalid <name> id".
RecordId = Annotated[int, Path(ge=1, le=SQLITE_INT_MAX)]


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_user_service(database: Database = Depends(get_database)) -> UserService:
    return UserService(UserRepository(database))


def get_author_service(database: Database = Depends(get_database)) -> AuthorService:
    return AuthorService(AuthorRepository(database))


def get_elibrary_service(database: Database = Depends(get_database)) -> ELibraryService:
    return ELibraryService(ELibraryRepository(database))


def get_project_service(database: Database = Depends(get_database)) -> ProjectService:
    return ProjectService(ProjectRepository(database), ProjectTypeRepository(database))


def get_publication_service(database: Database = Depends(get_database)) -> PublicationService:
    return PublicationService(
        PublicationRepository(database),
        PublicationTypeRepository(database),
        AuthorRepository(database),
    )


def get_type_service(database: Database = Depends(get_database)) -> TypeService:
    return TypeService(ProjectTypeRepository(database), PublicationTypeRepository(database))
