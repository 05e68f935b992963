"""Expense Service — referential checks, date/amount rules and category-name resolution.

Invariants:
    - A missing category fails with InvalidReferenceError and persists nothing
    - Dates parse DD-MM-YYYY then YYYY-MM-DD; past days are rejected, today is allowed
    - amount <= 0, >= 10^10 or finer than a cent is rejected by the service itself
    - category_name is resolved after the write; a deleted category reads back as ""
    - update re-checks the category only when category_id changes
    - StorageError from the port passes through unmodified

Design Decisions:
    - The clock is pinned to 2025-03-01 (see conftest.FakeClock)
"""

from decimal import Decimal

import pytest

from expense_tracker.core.domain_types import CategoryId, ExpenseId, PageWindow
from expense_tracker.core.errors import (
    FieldValidationError, InvalidReferenceError, ResourceNotFoundError, StorageError,
)
from expense_tracker.schemas.category import CategoryRequest
from expense_tracker.schemas.expense import ExpenseRequest
from expense_tracker.services.expense_service import ExpenseService

ALL = PageWindow(limit=0)


def _expense(category_id: int, **overrides) -> ExpenseRequest:
    fields = {
        "category_id": category_id,
        "amount": Decimal("12.50"),
        "description": "Lunch",
        "date": "15-03-2025",
    }
    fields.update(overrides)
    return ExpenseRequest(**fields)


# ─── create ──────────────────────────────────────────────────────

async def test_create_resolves_category_name_and_normalizes_date(
    expense_service, food_category,
):
    created = await expense_service.create(_expense(food_category.id))
    assert created.id == 1
    assert created.category_id == food_category.id
    assert created.category_name == "Food"
    assert created.amount == 12.5
    assert created.description == "Lunch"
    assert created.date == "2025-03-15"


async def test_create_accepts_iso_date(expense_service, food_category):
    created = await expense_service.create(
        _expense(food_category.id, date="2025-03-15"),
    )
    assert created.date == "2025-03-15"


async def test_create_with_today_is_allowed(expense_service, food_category):
    created = await expense_service.create(
        _expense(food_category.id, date="01-03-2025"),
    )
    assert created.date == "2025-03-01"


async def test_create_with_missing_category_persists_nothing(expense_service):
    with pytest.raises(InvalidReferenceError) as exc_info:
        await expense_service.create(_expense(999))
    assert exc_info.value.message == "category not found"
    assert await expense_service.list(ALL) == []


async def test_category_checked_before_date(expense_service):
    with pytest.raises(InvalidReferenceError):
        await expense_service.create(_expense(999, date="garbage"))


@pytest.mark.parametrize("raw_date", ["15/03/2025", "2025.03.15", "5-3-2025", ""])
async def test_create_with_unparseable_date_fails(
    expense_service, food_category, raw_date,
):
    with pytest.raises(FieldValidationError) as exc_info:
        await expense_service.create(_expense(food_category.id, date=raw_date))
    assert exc_info.value.field == "date"
    assert await expense_service.list(ALL) == []


@pytest.mark.parametrize("amount", [Decimal("0"), Decimal("-3.20")])
async def test_create_with_non_positive_amount_fails(
    expense_service, food_category, amount,
):
    with pytest.raises(FieldValidationError) as exc_info:
        await expense_service.create(_expense(food_category.id, amount=amount))
    assert exc_info.value.message == "amount must be greater than 0"


async def test_create_with_sub_cent_amount_persists_nothing(
    expense_service, food_category,
):
    with pytest.raises(FieldValidationError) as exc_info:
        await expense_service.create(
            _expense(food_category.id, amount=Decimal("0.001")),
        )
    assert exc_info.value.violation.rule == "decimal_places"
    assert await expense_service.list(ALL) == []


async def test_create_with_amount_beyond_column_fails(expense_service, food_category):
    with pytest.raises(FieldValidationError) as exc_info:
        await expense_service.create(
            _expense(food_category.id, amount=Decimal("1e10")),
        )
    assert exc_info.value.violation.rule == "lt"
    assert await expense_service.list(ALL) == []


async def test_stored_amount_equals_validated_amount(expense_service, food_category):
    created = await expense_service.create(
        _expense(food_category.id, amount=Decimal("0.01")),
    )
    fetched = await expense_service.get(ExpenseId(created.id))
    assert created.amount == 0.01
    assert fetched.amount == 0.01


async def test_create_with_yesterday_fails(expense_service, food_category):
    with pytest.raises(FieldValidationError) as exc_info:
        await expense_service.create(
            _expense(food_category.id, date="28-02-2025"),
        )
    assert exc_info.value.message == "date cannot be in the past"


async def test_create_with_long_description_fails(expense_service, food_category):
    with pytest.raises(FieldValidationError) as exc_info:
        await expense_service.create(
            _expense(food_category.id, description="x" * 256),
        )
    assert exc_info.value.field == "description"


# ─── read ────────────────────────────────────────────────────────

async def test_get_is_idempotent(expense_service, food_category):
    created = await expense_service.create(_expense(food_category.id))
    first = await expense_service.get(ExpenseId(created.id))
    second = await expense_service.get(ExpenseId(created.id))
    assert first == second == created


async def test_get_missing_raises_not_found(expense_service):
    with pytest.raises(ResourceNotFoundError):
        await expense_service.get(ExpenseId(404))


async def test_get_reflects_category_rename(
    expense_service, category_service, food_category,
):
    created = await expense_service.create(_expense(food_category.id))
    await category_service.update(
        CategoryId(food_category.id), CategoryRequest(name="Groceries"),
    )
    fetched = await expense_service.get(ExpenseId(created.id))
    assert fetched.category_name == "Groceries"


async def test_get_with_deleted_category_leaves_name_empty(
    expense_service, category_service, food_category,
):
    created = await expense_service.create(_expense(food_category.id))
    await category_service.delete(CategoryId(food_category.id))

    fetched = await expense_service.get(ExpenseId(created.id))
    assert fetched.category_name == ""
    assert fetched.category_id == food_category.id


async def test_list_filters_by_description_and_category(
    expense_service, category_service, food_category,
):
    rent = await category_service.create(CategoryRequest(name="Rent"))
    await expense_service.create(_expense(food_category.id, description="Team lunch"))
    await expense_service.create(_expense(food_category.id, description="Dinner"))
    await expense_service.create(_expense(rent.id, description="March LUNCH money"))

    lunches = await expense_service.list(ALL, "lunch")
    assert [e.description for e in lunches] == ["Team lunch", "March LUNCH money"]

    food_lunches = await expense_service.list(ALL, "lunch", food_category.id)
    assert [e.description for e in food_lunches] == ["Team lunch"]

    rent_only = await expense_service.list(ALL, "", rent.id)
    assert [e.category_name for e in rent_only] == ["Rent"]


@pytest.mark.parametrize("category_id", [0, -1])
async def test_list_non_positive_category_disables_filter(
    expense_service, food_category, category_id,
):
    await expense_service.create(_expense(food_category.id))
    assert len(await expense_service.list(ALL, "", category_id)) == 1


async def test_list_paginates(expense_service, food_category):
    for i in range(15):
        await expense_service.create(_expense(food_category.id, description=f"E{i}"))

    first_page = await expense_service.list(PageWindow())
    assert [e.description for e in first_page] == [f"E{i}" for i in range(10)]

    second_page = await expense_service.list(PageWindow(offset=10, limit=10))
    assert [e.description for e in second_page] == [f"E{i}" for i in range(10, 15)]

    assert len(await expense_service.list(PageWindow(offset=10, limit=0))) == 15


# ─── update ──────────────────────────────────────────────────────

async def test_update_overwrites_all_fields(
    expense_service, category_service, food_category,
):
    rent = await category_service.create(CategoryRequest(name="Rent"))
    created = await expense_service.create(_expense(food_category.id))

    updated = await expense_service.update(
        ExpenseId(created.id),
        ExpenseRequest(
            category_id=rent.id, amount=Decimal("900"),
            description="April rent", date="2025-04-01",
        ),
    )
    assert updated.id == created.id
    assert updated.category_name == "Rent"
    assert updated.amount == 900.0
    assert updated.description == "April rent"
    assert updated.date == "2025-04-01"


async def test_update_to_missing_category_leaves_row_untouched(
    expense_service, food_category,
):
    created = await expense_service.create(_expense(food_category.id))

    with pytest.raises(InvalidReferenceError):
        await expense_service.update(
            ExpenseId(created.id),
            _expense(999, description="changed", amount=Decimal("1")),
        )

    assert await expense_service.get(ExpenseId(created.id)) == created


async def test_update_with_unchanged_category_skips_existence_check(
    expense_service, category_service, food_category,
):
    created = await expense_service.create(_expense(food_category.id))
    await category_service.delete(CategoryId(food_category.id))

    updated = await expense_service.update(
        ExpenseId(created.id), _expense(food_category.id, description="Still lunch"),
    )
    assert updated.description == "Still lunch"
    assert updated.category_name == ""


async def test_update_missing_expense_raises_not_found(
    expense_service, food_category,
):
    with pytest.raises(ResourceNotFoundError):
        await expense_service.update(ExpenseId(404), _expense(food_category.id))


async def test_update_revalidates_date_and_amount(expense_service, food_category):
    created = await expense_service.create(_expense(food_category.id))

    with pytest.raises(FieldValidationError):
        await expense_service.update(
            ExpenseId(created.id), _expense(food_category.id, date="01-01-2020"),
        )
    with pytest.raises(FieldValidationError):
        await expense_service.update(
            ExpenseId(created.id), _expense(food_category.id, amount=Decimal("0")),
        )
    assert await expense_service.get(ExpenseId(created.id)) == created


# ─── delete ──────────────────────────────────────────────────────

async def test_delete_removes_row(expense_service, food_category):
    created = await expense_service.create(_expense(food_category.id))
    await expense_service.delete(ExpenseId(created.id))
    with pytest.raises(ResourceNotFoundError):
        await expense_service.get(ExpenseId(created.id))


# ─── storage failures ────────────────────────────────────────────

class _FailingExpenseRepository:
    """ExpenseRepository whose every call fails at the storage layer."""

    async def create(self, record):
        raise StorageError("Integrity constraint violated", "commit")

    async def list(self, window, description_filter, category_id):
        raise StorageError("Connection or operational error", "execute")

    async def get(self, expense_id):
        raise StorageError("Connection or operational error", "execute")

    async def update(self, record):
        raise StorageError("Integrity constraint violated", "commit")

    async def delete(self, expense_id):
        raise StorageError("Connection or operational error", "execute")


async def test_storage_errors_pass_through_unmodified(
    category_service, food_category, clock,
):
    service = ExpenseService(
        _FailingExpenseRepository(), category_service,
        today=clock.today, now=clock.now,
    )
    with pytest.raises(StorageError) as exc_info:
        await service.create(_expense(food_category.id))
    assert exc_info.value.operation == "commit"

    with pytest.raises(StorageError):
        await service.list(ALL)
    with pytest.raises(StorageError):
        await service.delete(ExpenseId(1))
