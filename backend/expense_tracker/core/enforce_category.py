"""Category Field Rules — pure checks for name and description bounds.

Invariants:
    - name is measured AFTER trimming surrounding whitespace: 2-50 characters
    - description is measured as given: 0-255 characters
    - Checks are PURE: return FieldViolation or None, never raise

Design Decisions:
    - First violation wins: name is checked before description, matching
      the order clients see the fields in the request body
"""

from expense_tracker.core.domain_types import (
    CATEGORY_NAME_MIN_LENGTH,
    CATEGORY_NAME_MAX_LENGTH,
    DESCRIPTION_MAX_LENGTH,
)
from expense_tracker.core.errors import FieldViolation


def normalize_category_name(name: str) -> str:
    return name.strip()


def check_category_name(name: str) -> FieldViolation | None:
    """Name bounds apply to the trimmed value."""
    trimmed = normalize_category_name(name)
    if len(trimmed) < CATEGORY_NAME_MIN_LENGTH:
        return FieldViolation(
            "name", "min_length",
            f"name must be at least {CATEGORY_NAME_MIN_LENGTH} characters",
        )
    if len(trimmed) > CATEGORY_NAME_MAX_LENGTH:
        return FieldViolation(
            "name", "max_length",
            f"name must not exceed {CATEGORY_NAME_MAX_LENGTH} characters",
        )
    return None


def check_description(description: str) -> FieldViolation | None:
    """Shared by categories and expenses."""
    if len(description) > DESCRIPTION_MAX_LENGTH:
        return FieldViolation(
            "description", "max_length",
            f"description must not exceed {DESCRIPTION_MAX_LENGTH} characters",
        )
    return None


def validate_category_fields(name: str, description: str) -> FieldViolation | None:
    """Rule set for Category create and update."""
    return check_category_name(name) or check_description(description)
