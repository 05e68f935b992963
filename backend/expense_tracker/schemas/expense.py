"""Expense Schemas — wire shapes for expense create/update and responses.

Invariants:
    - ExpenseRequest.date is the raw string (DD-MM-YYYY or YYYY-MM-DD); parsing is a domain rule
    - ExpenseResponse.date is always YYYY-MM-DD
    - category_name is "" when the referenced category no longer exists

Design Decisions:
    - amount is Decimal on the way in (no float rounding before the > 0 check)
      and a JSON number on the way out
"""

from decimal import Decimal

from pydantic import BaseModel, Field


class ExpenseRequest(BaseModel):
    """Expense create/update body."""
    category_id: int
    amount: Decimal
    description: str = ""
    date: str = Field(examples=["15-03-2025", "2025-03-15"])


class ExpenseResponse(BaseModel):
    """Expense projection with the category name resolved."""
    id: int
    category_id: int
    category_name: str
    amount: float
    description: str
    date: str
