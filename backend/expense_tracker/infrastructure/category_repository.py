"""SQL Category Repository — Storage Port adapter for the categories table.

Invariants:
    - Each call runs in its own session from DatabaseSessionManager
    - list() orders by id; name filter is a case-insensitive substring match
      with LIKE wildcards in the filter escaped
    - get() raises ResourceNotFoundError; delete() of a missing id is a no-op

Design Decisions:
    - ORM rows never leave this module: callers receive CategoryRecord copies
"""

from sqlalchemy import delete, select

from expense_tracker.core.domain_types import CategoryId, CategoryRecord, PageWindow
from expense_tracker.core.errors import ResourceNotFoundError
from expense_tracker.infrastructure.database import DatabaseSessionManager
from expense_tracker.models.category import Category


def _to_record(row: Category) -> CategoryRecord:
    return CategoryRecord(
        id=CategoryId(row.id),
        name=row.name,
        description=row.description,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class SqlCategoryRepository:
    """CategoryRepository backed by SQLAlchemy."""

    def __init__(self, db_manager: DatabaseSessionManager):
        self.db_manager = db_manager

    async def create(self, record: CategoryRecord) -> CategoryRecord:
        row = Category(
            name=record.name,
            description=record.description,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )
        async with self.db_manager.session() as db:
            db.add(row)
            await db.commit()
            await db.refresh(row)
            return _to_record(row)

    async def list(
        self, window: PageWindow, name_filter: str,
    ) -> list[CategoryRecord]:
        query = select(Category).order_by(Category.id)
        if name_filter:
            query = query.where(
                Category.name.icontains(name_filter, autoescape=True),
            )
        if not window.unbounded:
            query = query.offset(window.offset).limit(window.limit)

        async with self.db_manager.session() as db:
            result = await db.execute(query)
            return [_to_record(row) for row in result.scalars().all()]

    async def get(self, category_id: CategoryId) -> CategoryRecord:
        async with self.db_manager.session() as db:
            row = await db.get(Category, category_id)
            if row is None:
                raise ResourceNotFoundError("Category", category_id)
            return _to_record(row)

    async def update(self, record: CategoryRecord) -> None:
        async with self.db_manager.session() as db:
            row = await db.get(Category, record.id)
            if row is None:
                raise ResourceNotFoundError("Category", record.id)
            row.name = record.name
            row.description = record.description
            row.updated_at = record.updated_at
            await db.commit()

    async def delete(self, category_id: CategoryId) -> None:
        async with self.db_manager.session() as db:
            await db.execute(delete(Category).where(Category.id == category_id))
            await db.commit()
