"""Category Schemas — wire shapes for category create/update and responses.

Invariants:
    - CategoryRequest is a full-field replacement (no partial updates)
    - description defaults to "" and is always present in responses
"""

from datetime import datetime

from pydantic import BaseModel


class CategoryRequest(BaseModel):
    """Category create/update body."""
    name: str
    description: str = ""


class CategoryResponse(BaseModel):
    """Category projection."""
    id: int
    name: str
    description: str
    created_at: datetime
    updated_at: datetime
