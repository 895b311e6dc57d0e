"""
Top‑level router for version 1 of the API.

Aggregates the record routers under their collection paths.  When a
new record type is introduced, include its router here.
"""

from fastapi import APIRouter

from .endpoints import authors, elibrary, health, lookups, projects, publications, users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(authors.router, prefix="/authors", tags=["authors"])
router.include_router(projects.router, prefix="/projects", tags=["projects"])
router.include_router(lookups.project_types_router, prefix="/project-types", tags=["project types"])
router.include_router(publications.router, prefix="/publications", tags=["publications"])
router.include_router(lookups.publication_types_router, prefix="/publication-types", tags=["publication types"])
router.include_router(elibrary.router, prefix="/e-library", tags=["e-library"])
router.include_router(health.router, prefix="/health", tags=["health"])
