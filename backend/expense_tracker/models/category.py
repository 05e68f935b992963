"""Category ORM — persists a user-defined spending category.

Invariants:
    - id is an autoincrement integer, never reused after delete
    - name is stored trimmed (services normalize before persisting)
    - created_at set once; updated_at refreshed by the service on every mutation

Design Decisions:
    - No back-reference collection to expenses: deletion never cascades or blocks
    - sqlite_autoincrement: keeps ids monotonic on SQLite as SERIAL does on PostgreSQL
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from expense_tracker.db.base import Base


class Category(Base):
    """Category row."""
    __tablename__ = "categories"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str] = mapped_column(
        String(255), nullable=False, default="",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
