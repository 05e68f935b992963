"""Infrastructure Layer — Storage Port adapters and cross-cutting concerns.

Invariants:
    - Infrastructure implements core protocols; core never imports from here
    - All SQLAlchemy failures leave this layer as StorageError

Design Decisions:
    - One adapter module per entity, sharing a single DatabaseSessionManager
"""
