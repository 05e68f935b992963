"""Expense Service — validates expenses, enforces the category reference, resolves category names.

Invariants:
    - create order: category exists -> date parses -> amount > 0 -> date not past -> description
    - update order: expense exists -> category exists (only if category_id changed) -> field rules
    - Nothing is persisted when any check fails
    - category_name in every projection comes from a fresh lookup after the write;
      a missing category yields "" instead of failing the read
    - list with category_id <= 0 means no category filter

Design Decisions:
    - Depends on CategoryService for existence and name lookups, on ExpenseRepository for storage
    - today/now injected: the past-date rule is tested against a pinned calendar day
    - No transaction spans the category check and the expense write; a category
      deleted in between leaves an orphan (accepted race)
"""

import logging
from datetime import date, datetime
from typing import Callable

from expense_tracker.core.clock import utc_now, utc_today
from expense_tracker.core.domain_types import (
    CategoryId, ExpenseId, ExpenseRecord, PageWindow,
)
from expense_tracker.core.enforce_expense import validate_expense_fields
from expense_tracker.core.errors import FieldValidationError
from expense_tracker.core.repository_protocols import ExpenseRepository
from expense_tracker.schemas.expense import ExpenseRequest, ExpenseResponse
from expense_tracker.services.category_service import CategoryService
from expense_tracker.services.translate_records import (
    apply_expense_request,
    expense_record_from_request,
    expense_to_response,
)

logger = logging.getLogger(__name__)


class ExpenseService:
    """Expense CRUD with referential and field validation."""

    def __init__(
        self,
        repository: ExpenseRepository,
        categories: CategoryService,
        today: Callable[[], date] = utc_today,
        now: Callable[[], datetime] = utc_now,
    ):
        self.repository = repository
        self.categories = categories
        self.today = today
        self.now = now

    async def create(self, request: ExpenseRequest) -> ExpenseResponse:
        await self.categories.require_exists(CategoryId(request.category_id))
        expense_date = self._validate(request)

        record = await self.repository.create(
            expense_record_from_request(request, expense_date, self.now()),
        )
        logger.info(
            "Expense created",
            extra={"expense_id": record.id, "category_id": record.category_id},
        )
        return await self._project(record)

    async def list(
        self,
        window: PageWindow,
        description_filter: str = "",
        category_id: int = 0,
    ) -> list[ExpenseResponse]:
        category_filter = CategoryId(category_id) if category_id > 0 else None
        records = await self.repository.list(
            window, description_filter, category_filter,
        )

        names: dict[CategoryId, str] = {}
        responses = []
        for record in records:
            if record.category_id not in names:
                names[record.category_id] = await self._category_name(record)
            responses.append(
                expense_to_response(record, names[record.category_id]),
            )
        return responses

    async def get(self, expense_id: ExpenseId) -> ExpenseResponse:
        return await self._project(await self.repository.get(expense_id))

    async def update(
        self, expense_id: ExpenseId, request: ExpenseRequest,
    ) -> ExpenseResponse:
        record = await self.repository.get(expense_id)
        if record.category_id != request.category_id:
            await self.categories.require_exists(CategoryId(request.category_id))
        expense_date = self._validate(request)

        apply_expense_request(record, request, expense_date, self.now())
        await self.repository.update(record)
        logger.info(
            "Expense updated",
            extra={"expense_id": expense_id, "category_id": record.category_id},
        )
        return await self._project(record)

    async def delete(self, expense_id: ExpenseId) -> None:
        await self.repository.delete(expense_id)
        logger.info("Expense deleted", extra={"expense_id": expense_id})

    async def _project(self, record: ExpenseRecord) -> ExpenseResponse:
        return expense_to_response(record, await self._category_name(record))

    async def _category_name(self, record: ExpenseRecord) -> str:
        name = await self.categories.find_name(record.category_id)
        if name is None:
            logger.warning(
                "Expense references a missing category",
                extra={"expense_id": record.id, "category_id": record.category_id},
            )
            return ""
        return name

    def _validate(self, request: ExpenseRequest) -> date:
        expense_date, violation = validate_expense_fields(
            request.date, request.amount, request.description, self.today(),
        )
        if violation:
            logger.warning(
                f"Expense rejected: {violation.message}",
                extra={"error_code": "VALIDATION_ERROR"},
            )
            raise FieldValidationError(violation)
        return expense_date
