"""Dependency Providers — wire the Storage Port and domain services once per process.

Invariants:
    - build_services() is called once from the lifespan; routes read app.state.services
    - Services are stateless, so one instance serves every concurrent request

Design Decisions:
    - Explicit construction over module globals: tests swap app.state.services
      for one built on an in-memory database
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable

from fastapi import Request

from expense_tracker.core.clock import utc_now, utc_today
from expense_tracker.infrastructure.category_repository import SqlCategoryRepository
from expense_tracker.infrastructure.database import DatabaseSessionManager
from expense_tracker.infrastructure.expense_repository import SqlExpenseRepository
from expense_tracker.services.category_service import CategoryService
from expense_tracker.services.expense_service import ExpenseService


@dataclass
class ServiceContainer:
    """Process-wide collaborators stored on app.state."""
    db_manager: DatabaseSessionManager
    categories: CategoryService
    expenses: ExpenseService


def build_services(
    db_manager: DatabaseSessionManager,
    today: Callable[[], date] = utc_today,
    now: Callable[[], datetime] = utc_now,
) -> ServiceContainer:
    """Construct repositories and services around one session manager."""
    categories = CategoryService(SqlCategoryRepository(db_manager), now=now)
    expenses = ExpenseService(
        SqlExpenseRepository(db_manager), categories, today=today, now=now,
    )
    return ServiceContainer(
        db_manager=db_manager, categories=categories, expenses=expenses,
    )


def get_services(request: Request) -> ServiceContainer:
    services = getattr(request.app.state, "services", None)
    if services is None:
        raise RuntimeError("Services not initialized")
    return services


def get_category_service(request: Request) -> CategoryService:
    return get_services(request).categories


def get_expense_service(request: Request) -> ExpenseService:
    return get_services(request).expenses
