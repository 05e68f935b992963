"""Expense ORM — persists a single dated spending entry.

Invariants:
    - category_id is a plain indexed integer, NOT a foreign key: the reference
      is checked by the Expense service at write time only
    - amount is Numeric(12, 2); positivity, the upper bound and the scale are
      enforced by the expense field rules before a row reaches this column
    - date has no time-of-day component

Design Decisions:
    - No relationship(): the category name is resolved on demand by the service,
      so a deleted category leaves an orphan rather than failing the read
"""

import datetime as dt
from decimal import Decimal

from sqlalchemy import String, Integer, Numeric, Date, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from expense_tracker.core.domain_types import AMOUNT_DECIMAL_PLACES, AMOUNT_INTEGER_DIGITS
from expense_tracker.db.base import Base


class Expense(Base):
    """Expense row."""
    __tablename__ = "expenses"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    category_id: Mapped[int] = mapped_column(
        Integer, nullable=False, index=True,
    )
    amount: Mapped[Decimal] = mapped_column(
        Numeric(
            AMOUNT_INTEGER_DIGITS + AMOUNT_DECIMAL_PLACES, AMOUNT_DECIMAL_PLACES,
        ),
        nullable=False,
    )
    description: Mapped[str] = mapped_column(
        String(255), nullable=False, default="",
    )
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: dt.datetime.now(dt.timezone.utc),
    )
    updated_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: dt.datetime.now(dt.timezone.utc),
    )
