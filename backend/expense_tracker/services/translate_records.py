"""Record Translation — wire requests to domain records, domain records to projections.

Invariants:
    - Category names are trimmed on the way in; nothing else is rewritten
    - Expense dates are emitted as YYYY-MM-DD
    - Pure mapping: no IO, category names are resolved by the caller
"""

from datetime import date, datetime

from expense_tracker.core.domain_types import (
    CategoryId, CategoryRecord, ExpenseRecord,
)
from expense_tracker.core.enforce_category import normalize_category_name
from expense_tracker.core.parse_dates import format_expense_date
from expense_tracker.schemas.category import CategoryRequest, CategoryResponse
from expense_tracker.schemas.expense import ExpenseRequest, ExpenseResponse


def category_record_from_request(
    request: CategoryRequest, now: datetime,
) -> CategoryRecord:
    return CategoryRecord(
        name=normalize_category_name(request.name),
        description=request.description,
        created_at=now,
        updated_at=now,
    )


def apply_category_request(
    record: CategoryRecord, request: CategoryRequest, now: datetime,
) -> None:
    """Overwrite mutable fields in place; id and created_at are kept."""
    record.name = normalize_category_name(request.name)
    record.description = request.description
    record.updated_at = now


def category_to_response(record: CategoryRecord) -> CategoryResponse:
    return CategoryResponse(
        id=record.id,
        name=record.name,
        description=record.description,
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


def expense_record_from_request(
    request: ExpenseRequest, expense_date: date, now: datetime,
) -> ExpenseRecord:
    return ExpenseRecord(
        category_id=CategoryId(request.category_id),
        amount=request.amount,
        description=request.description,
        date=expense_date,
        created_at=now,
        updated_at=now,
    )


def apply_expense_request(
    record: ExpenseRecord, request: ExpenseRequest, expense_date: date, now: datetime,
) -> None:
    """Overwrite mutable fields in place; id and created_at are kept."""
    record.category_id = CategoryId(request.category_id)
    record.amount = request.amount
    record.description = request.description
    record.date = expense_date
    record.updated_at = now


def expense_to_response(record: ExpenseRecord, category_name: str) -> ExpenseResponse:
    return ExpenseResponse(
        id=record.id,
        category_id=record.category_id,
        category_name=category_name,
        amount=float(record.amount),
        description=record.description,
        date=format_expense_date(record.date),
    )
