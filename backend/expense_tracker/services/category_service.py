"""Category Service — validates and persists categories; answers existence checks for expenses.

Invariants:
    - create/update validate name (trimmed, 2-50) and description (<= 255) BEFORE any storage call
    - update validates first, then loads (ResourceNotFoundError propagates), then saves
    - list never fails on an empty result
    - delete does not look at referencing expenses (orphans allowed) and does not
      map a missing id to ResourceNotFoundError
    - require_exists raises InvalidReferenceError; find_name returns None; both
      only translate ResourceNotFoundError, any StorageError propagates

Design Decisions:
    - Clock injected (now): tests pin timestamps without patching datetime
    - Existence check lives here so ExpenseService depends on this service,
      not on the category table directly
"""

import logging
from datetime import datetime
from typing import Callable

from expense_tracker.core.clock import utc_now
from expense_tracker.core.domain_types import CategoryId, PageWindow
from expense_tracker.core.enforce_category import validate_category_fields
from expense_tracker.core.errors import (
    FieldValidationError, InvalidReferenceError, ResourceNotFoundError,
)
from expense_tracker.core.repository_protocols import CategoryRepository
from expense_tracker.schemas.category import CategoryRequest, CategoryResponse
from expense_tracker.services.translate_records import (
    apply_category_request,
    category_record_from_request,
    category_to_response,
)

logger = logging.getLogger(__name__)


class CategoryService:
    """Category CRUD with field validation."""

    def __init__(
        self,
        repository: CategoryRepository,
        now: Callable[[], datetime] = utc_now,
    ):
        self.repository = repository
        self.now = now

    async def create(self, request: CategoryRequest) -> CategoryResponse:
        self._validate(request)
        record = await self.repository.create(
            category_record_from_request(request, self.now()),
        )
        logger.info(
            f"Category '{record.name}' created",
            extra={"category_id": record.id},
        )
        return category_to_response(record)

    async def list(
        self, window: PageWindow, name_filter: str = "",
    ) -> list[CategoryResponse]:
        records = await self.repository.list(window, name_filter)
        return [category_to_response(r) for r in records]

    async def get(self, category_id: CategoryId) -> CategoryResponse:
        return category_to_response(await self.repository.get(category_id))

    async def update(
        self, category_id: CategoryId, request: CategoryRequest,
    ) -> CategoryResponse:
        self._validate(request)
        record = await self.repository.get(category_id)
        apply_category_request(record, request, self.now())
        await self.repository.update(record)
        logger.info("Category updated", extra={"category_id": category_id})
        return category_to_response(record)

    async def delete(self, category_id: CategoryId) -> None:
        await self.repository.delete(category_id)
        logger.info("Category deleted", extra={"category_id": category_id})

    # ─── Existence checks (used by ExpenseService) ───────────────

    async def require_exists(self, category_id: CategoryId) -> None:
        """Referential check before an expense write."""
        try:
            await self.repository.get(category_id)
        except ResourceNotFoundError:
            raise InvalidReferenceError("Category", category_id)

    async def find_name(self, category_id: CategoryId) -> str | None:
        """Fresh lookup of the display name; None when the category is gone."""
        try:
            record = await self.repository.get(category_id)
        except ResourceNotFoundError:
            return None
        return record.name

    def _validate(self, request: CategoryRequest) -> None:
        violation = validate_category_fields(request.name, request.description)
        if violation:
            logger.warning(
                f"Category rejected: {violation.message}",
                extra={"error_code": "VALIDATION_ERROR"},
            )
            raise FieldValidationError(violation)
