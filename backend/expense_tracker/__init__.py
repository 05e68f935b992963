"""Expense Tracker Application Package — categories and expenses over a REST API.

Invariants:
    - Package root holds only __version__ (import side-effects prohibited)
    - __version__ is the single source for packaging, OpenAPI and the health probe

Design Decisions:
    - No star exports: explicit imports only
"""

__version__ = "1.0.0"
