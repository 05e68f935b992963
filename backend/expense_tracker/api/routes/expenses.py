"""Expense Routes — CRUD endpoints under /api/v1/expenses.

Invariants:
    - Path ids are integers; non-integers are rejected by FastAPI binding (400)
    - category_id <= 0 in the query means "no category filter"
    - Domain errors propagate to the global handlers (no try/except here)
"""

from fastapi import APIRouter, Depends, Query, Response, status

from expense_tracker.api.dependencies import get_expense_service
from expense_tracker.core.domain_types import (
    DEFAULT_PAGE_LIMIT, ExpenseId, PageWindow,
)
from expense_tracker.schemas.expense import ExpenseRequest, ExpenseResponse
from expense_tracker.services.expense_service import ExpenseService

router = APIRouter(prefix="/api/v1/expenses", tags=["expenses"])


@router.post(
    "", response_model=ExpenseResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_expense(
    body: ExpenseRequest,
    service: ExpenseService = Depends(get_expense_service),
):
    """Create an expense. The date may be DD-MM-YYYY or YYYY-MM-DD."""
    return await service.create(body)


@router.get("", response_model=list[ExpenseResponse])
async def list_expenses(
    offset: int = Query(0, description="Rows to skip"),
    limit: int = Query(DEFAULT_PAGE_LIMIT, description="Page size; <= 0 returns all"),
    description: str = Query("", description="Case-insensitive partial match on description"),
    category_id: int = Query(0, description="Exact category filter; <= 0 disables it"),
    service: ExpenseService = Depends(get_expense_service),
):
    """List expenses with pagination and optional filters."""
    return await service.list(
        PageWindow.from_query(offset, limit), description, category_id,
    )


@router.get("/{expense_id}", response_model=ExpenseResponse)
async def get_expense(
    expense_id: int,
    service: ExpenseService = Depends(get_expense_service),
):
    """Get an expense by id, with its category name."""
    return await service.get(ExpenseId(expense_id))


@router.put("/{expense_id}", response_model=ExpenseResponse)
async def update_expense(
    expense_id: int,
    body: ExpenseRequest,
    service: ExpenseService = Depends(get_expense_service),
):
    """Replace every mutable field of an expense."""
    return await service.update(ExpenseId(expense_id), body)


@router.delete("/{expense_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_expense(
    expense_id: int,
    service: ExpenseService = Depends(get_expense_service),
):
    """Delete an expense."""
    await service.delete(ExpenseId(expense_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
