"""Expense Field Rules — pure checks for date, amount and description.

Invariants:
    - Check order: date format -> amount -> date not in the past -> description
    - amount is strictly positive, below AMOUNT_UPPER_BOUND and has at most
      AMOUNT_DECIMAL_PLACES places, so the stored value equals the validated one
    - A date equal to today passes; only strictly earlier days are rejected
    - amount is re-checked here even when the transport layer already did
    - validate_expense_fields is PURE: today is passed in, never read from the clock

Design Decisions:
    - Returns (parsed_date, violation): the caller needs the parsed date to
      persist it, and a second parse would duplicate the format logic
"""

from datetime import date
from decimal import Decimal

from expense_tracker.core.domain_types import AMOUNT_DECIMAL_PLACES, AMOUNT_UPPER_BOUND
from expense_tracker.core.enforce_category import check_description
from expense_tracker.core.errors import FieldViolation
from expense_tracker.core.parse_dates import parse_expense_date


INVALID_DATE_MESSAGE: str = "invalid date format, expected dd-mm-yyyy or yyyy-mm-dd"
PAST_DATE_MESSAGE: str = "date cannot be in the past"
NON_POSITIVE_AMOUNT_MESSAGE: str = "amount must be greater than 0"
AMOUNT_TOO_LARGE_MESSAGE: str = f"amount must be less than {AMOUNT_UPPER_BOUND}"
AMOUNT_PRECISION_MESSAGE: str = (
    f"amount must have at most {AMOUNT_DECIMAL_PLACES} decimal places"
)
AMOUNT_STEP: Decimal = Decimal(1).scaleb(-AMOUNT_DECIMAL_PLACES)


def check_amount(amount: Decimal) -> FieldViolation | None:
    """Positive, below the column bound, and exact at storage precision."""
    if amount <= 0:
        return FieldViolation("amount", "gt", NON_POSITIVE_AMOUNT_MESSAGE)
    if amount >= AMOUNT_UPPER_BOUND:
        return FieldViolation("amount", "lt", AMOUNT_TOO_LARGE_MESSAGE)
    if amount != amount.quantize(AMOUNT_STEP):
        return FieldViolation("amount", "decimal_places", AMOUNT_PRECISION_MESSAGE)
    return None


def check_not_past(expense_date: date, today: date) -> FieldViolation | None:
    if expense_date < today:
        return FieldViolation("date", "not_past", PAST_DATE_MESSAGE)
    return None


def validate_expense_fields(
    raw_date: str, amount: Decimal, description: str, today: date,
) -> tuple[date | None, FieldViolation | None]:
    """Rule set for Expense create and update. First violation wins."""
    if not raw_date:
        return None, FieldViolation("date", "required", "date is required")

    parsed = parse_expense_date(raw_date)
    if parsed is None:
        return None, FieldViolation("date", "format", INVALID_DATE_MESSAGE)

    violation = (
        check_amount(amount)
        or check_not_past(parsed, today)
        or check_description(description)
    )
    return parsed, violation
