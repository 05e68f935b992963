"""Clock — UTC defaults for the services' injectable now/today callables.

Invariants:
    - "today" is the UTC calendar day, so the past-date rule does not depend
      on the server's local time zone
    - Services take these as defaults only; tests pass a pinned clock instead
"""

from datetime import date, datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def utc_today() -> date:
    """Current calendar day in UTC; the default clock for past-date checks."""
    return utc_now().date()
