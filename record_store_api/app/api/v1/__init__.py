"""
Version 1 of the API.

Bundles the record endpoints (users, authors, projects, publications,
e‑library and the read‑only type lookups).  Breaking changes belong in
a new version subpackage.
"""
