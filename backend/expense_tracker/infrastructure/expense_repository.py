"""SQL Expense Repository — Storage Port adapter for the expenses table.

Invariants:
    - Each call runs in its own session from DatabaseSessionManager
    - list() orders by id; description filter is case-insensitive substring,
      category filter is exact and skipped when None
    - get() raises ResourceNotFoundError; delete() of a missing id is a no-op
"""

from sqlalchemy import delete, select

from expense_tracker.core.domain_types import (
    CategoryId, ExpenseId, ExpenseRecord, PageWindow,
)
from expense_tracker.core.errors import ResourceNotFoundError
from expense_tracker.infrastructure.database import DatabaseSessionManager
from expense_tracker.models.expense import Expense


def _to_record(row: Expense) -> ExpenseRecord:
    return ExpenseRecord(
        id=ExpenseId(row.id),
        category_id=CategoryId(row.category_id),
        amount=row.amount,
        description=row.description,
        date=row.date,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class SqlExpenseRepository:
    """ExpenseRepository backed by SQLAlchemy."""

    def __init__(self, db_manager: DatabaseSessionManager):
        self.db_manager = db_manager

    async def create(self, record: ExpenseRecord) -> ExpenseRecord:
        row = Expense(
            category_id=record.category_id,
            amount=record.amount,
            description=record.description,
            date=record.date,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )
        async with self.db_manager.session() as db:
            db.add(row)
            await db.commit()
            await db.refresh(row)
            return _to_record(row)

    async def list(
        self,
        window: PageWindow,
        description_filter: str,
        category_id: CategoryId | None,
    ) -> list[ExpenseRecord]:
        query = select(Expense).order_by(Expense.id)
        if description_filter:
            query = query.where(
                Expense.description.icontains(description_filter, autoescape=True),
            )
        if category_id is not None:
            query = query.where(Expense.category_id == category_id)
        if not window.unbounded:
            query = query.offset(window.offset).limit(window.limit)

        async with self.db_manager.session() as db:
            result = await db.execute(query)
            return [_to_record(row) for row in result.scalars().all()]

    async def get(self, expense_id: ExpenseId) -> ExpenseRecord:
        async with self.db_manager.session() as db:
            row = await db.get(Expense, expense_id)
            if row is None:
                raise ResourceNotFoundError("Expense", expense_id)
            return _to_record(row)

    async def update(self, record: ExpenseRecord) -> None:
        async with self.db_manager.session() as db:
            row = await db.get(Expense, record.id)
            if row is None:
                raise ResourceNotFoundError("Expense", record.id)
            row.category_id = record.category_id
            row.amount = record.amount
            row.description = record.description
            row.date = record.date
            row.updated_at = record.updated_at
            await db.commit()

    async def delete(self, expense_id: ExpenseId) -> None:
        async with self.db_manager.session() as db:
            await db.execute(delete(Expense).where(Expense.id == expense_id))
            await db.commit()
