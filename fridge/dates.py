from __future__ import annotations

import datetime as dt


DATE_FORMAT = "%Y-%m-%d"


def ymd(value: dt.date | dt.datetime | None) -> str | None:
    if value is None:
        return None
    if isinstance(value, dt.datetime):
        value = value.date()
    return value.strftime(DATE_FORMAT)


def days_left(today: dt.date, expires_at: dt.date | dt.datetime | None) -> int | None:
    """Whole days until `expires_at`; negative once it has passed."""
    if expires_at is None:
        return None
    if isinstance(expires_at, dt.datetime):
        expires_at = expires_at.date()
    if isinstance(today, dt.datetime):
        today = today.date()
    return (expires_at - today).days
