"""Domain Types — identities, records and the pagination window shared by core and shell.

Invariants:
    - CategoryId, ExpenseId wrap ints — ids are system-assigned and immutable
    - Records are plain dataclasses: the Storage Port speaks records, never ORM rows
    - ExpenseRecord.date is a calendar date (no time-of-day component)
    - PageWindow with limit <= 0 is unbounded; offset is then ignored

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Records are mutable: Update loads, overwrites fields, refreshes updated_at, saves
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

CategoryId = NewType("CategoryId", int)
ExpenseId = NewType("ExpenseId", int)


# ─── Field Bounds ────────────────────────────────────────────────

CATEGORY_NAME_MIN_LENGTH: int = 2
CATEGORY_NAME_MAX_LENGTH: int = 50
DESCRIPTION_MAX_LENGTH: int = 255
DEFAULT_PAGE_LIMIT: int = 10

# amount is stored as Numeric(AMOUNT_INTEGER_DIGITS + AMOUNT_DECIMAL_PLACES, AMOUNT_DECIMAL_PLACES)
AMOUNT_DECIMAL_PLACES: int = 2
AMOUNT_INTEGER_DIGITS: int = 10
AMOUNT_UPPER_BOUND: Decimal = Decimal(10) ** AMOUNT_INTEGER_DIGITS


# ─── Records ─────────────────────────────────────────────────────

@dataclass
class CategoryRecord:
    """A stored Category. id is None until the Storage Port assigns one."""
    name: str
    description: str
    created_at: datetime
    updated_at: datetime
    id: CategoryId | None = None


@dataclass
class ExpenseRecord:
    """A stored Expense. category_id is a weak reference resolved on demand."""
    category_id: CategoryId
    amount: Decimal
    description: str
    date: date
    created_at: datetime
    updated_at: datetime
    id: ExpenseId | None = None


@dataclass(frozen=True)
class PageWindow:
    """Offset/limit window over id-ordered rows."""
    offset: int = 0
    limit: int = DEFAULT_PAGE_LIMIT

    @property
    def unbounded(self) -> bool:
        return self.limit <= 0

    @classmethod
    def from_query(cls, offset: int, limit: int) -> "PageWindow":
        """Build a window from raw query values; negative offsets clamp to 0."""
        return cls(offset=max(offset, 0), limit=limit)
