"""Boundary Protocols — the Storage Port between the domain services and persistence.

Invariants:
    - Core NEVER imports from infrastructure — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - get() raises ResourceNotFoundError for a missing id; every other failure
      surfaces as StorageError and is passed through by services unmodified
    - list() orders by id and honours PageWindow (limit <= 0 returns all matches)

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
    - Async in Protocol: implementations do IO; the rules that USE these
      records (enforce_*.py) are never async themselves
    - delete() of a missing id is not an error at this boundary
"""

from typing import Protocol

from expense_tracker.core.domain_types import (
    CategoryId, CategoryRecord, ExpenseId, ExpenseRecord, PageWindow,
)


class CategoryRepository(Protocol):
    """Contract for category persistence — implemented by infrastructure."""
    async def create(self, record: CategoryRecord) -> CategoryRecord: ...
    async def list(
        self, window: PageWindow, name_filter: str,
    ) -> list[CategoryRecord]: ...
    async def get(self, category_id: CategoryId) -> CategoryRecord: ...
    async def update(self, record: CategoryRecord) -> None: ...
    async def delete(self, category_id: CategoryId) -> None: ...


class ExpenseRepository(Protocol):
    """Contract for expense persistence — implemented by infrastructure."""
    async def create(self, record: ExpenseRecord) -> ExpenseRecord: ...
    async def list(
        self,
        window: PageWindow,
        description_filter: str,
        category_id: CategoryId | None,
    ) -> list[ExpenseRecord]: ...
    async def get(self, expense_id: ExpenseId) -> ExpenseRecord: ...
    async def update(self, record: ExpenseRecord) -> None: ...
    async def delete(self, expense_id: ExpenseId) -> None: ...
