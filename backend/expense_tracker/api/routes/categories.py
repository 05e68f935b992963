"""Category Routes — CRUD endpoints under /api/v1/categories.

Invariants:
    - Path ids are integers; non-integers are rejected by FastAPI binding (400)
    - limit <= 0 returns every matching row; offset defaults to 0, limit to 10
    - Domain errors propagate to the global handlers (no try/except here)
"""

from fastapi import APIRouter, Depends, Query, Response, status

from expense_tracker.api.dependencies import get_category_service
from expense_tracker.core.domain_types import (
    CategoryId, DEFAULT_PAGE_LIMIT, PageWindow,
)
from expense_tracker.schemas.category import CategoryRequest, CategoryResponse
from expense_tracker.services.category_service import CategoryService

router = APIRouter(prefix="/api/v1/categories", tags=["categories"])


@router.post(
    "", response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_category(
    body: CategoryRequest,
    service: CategoryService = Depends(get_category_service),
):
    """Create a category."""
    return await service.create(body)


@router.get("", response_model=list[CategoryResponse])
async def list_categories(
    offset: int = Query(0, description="Rows to skip"),
    limit: int = Query(DEFAULT_PAGE_LIMIT, description="Page size; <= 0 returns all"),
    name: str = Query("", description="Case-insensitive partial match on name"),
    service: CategoryService = Depends(get_category_service),
):
    """List categories with pagination and an optional name filter."""
    return await service.list(PageWindow.from_query(offset, limit), name)


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(
    category_id: int,
    service: CategoryService = Depends(get_category_service),
):
    """Get a category by id."""
    return await service.get(CategoryId(category_id))


@router.put("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: int,
    body: CategoryRequest,
    service: CategoryService = Depends(get_category_service),
):
    """Replace a category's name and description."""
    return await service.update(CategoryId(category_id), body)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: int,
    service: CategoryService = Depends(get_category_service),
):
    """Delete a category. Expenses referencing it are left in place."""
    await service.delete(CategoryId(category_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
