"""Database Base — declarative base shared by every ORM model.

Invariants:
    - One metadata object for all tables (alembic and test fixtures read it)
"""
