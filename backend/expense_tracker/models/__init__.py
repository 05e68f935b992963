"""ORM Models — SQLAlchemy declarative models for categories and expenses.

Invariants:
    - All models inherit from Base (db/base.py)
    - No ORM relationship between Expense and Category: the link is a weak id

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete for alembic
      and for test fixtures calling create_all
"""

from expense_tracker.models.category import Category  # noqa: F401
from expense_tracker.models.expense import Expense  # noqa: F401
