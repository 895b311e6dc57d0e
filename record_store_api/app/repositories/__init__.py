"""
Persistence layer.

One repository per record type, each built around the shared
``Database`` handle.  Repositories issue all SQL, honour the
soft‑delete convention of ``base.Repository`` and return pydantic
read models.
"""
