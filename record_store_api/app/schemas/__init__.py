"""
Pydantic schema definitions for API payloads.

Each record type defines a ``*Create`` and ``*Update`` request model
and a ``*Read`` response model.  Python attributes are snake_case; the
JSON names are camelCase aliases, which is what clients send and
receive.
"""
