"""
Top‑level package for the Record Store API.

Marks ``record_store_api`` as a package so that modules within ``app``
can be imported using fully qualified names such as
``record_store_api.app.main``.  All functionality lives in submodules
under ``app``.
"""

__all__ = []
