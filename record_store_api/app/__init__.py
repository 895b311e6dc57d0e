"""
Application package initializer.

Each record domain (users, authors, projects, publications, e‑library
items) exposes a router in ``api/v1/endpoints``, a set of schemas in
``schemas``, a repository in ``repositories`` and a service in
``services``.  Handlers talk to services, services talk to
repositories, and repositories are the only code that issues SQL.
"""

from .main import app  # noqa: F401
