"""Services Layer — Category and Expense domain services.

Invariants:
    - Services hold no mutable state beyond their injected collaborators
    - Validation runs before any Storage Port call
    - Storage failures pass through unmodified (no retry, no rollback logic here)

Design Decisions:
    - Imperative shell around core/: services await the Storage Port, core rules stay pure
"""
