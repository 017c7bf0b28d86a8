"""Utility constants and helpers for timefilter.

Time unit constants are ``relativedelta`` offsets. Truncation helpers use
relativedelta's absolute fields, so they keep the instant's ``tzinfo``.
"""

from datetime import datetime

from dateutil.relativedelta import relativedelta

# Time unit constants
HOUR = relativedelta(hours=1)
DAY = relativedelta(days=1)

_MIDNIGHT = relativedelta(hour=0, minute=0, second=0, microsecond=0)


def midnight(now: datetime) -> datetime:
    """Start of the calendar day containing ``now``."""
    return now + _MIDNIGHT


def first_of_month(now: datetime) -> datetime:
    return now + relativedelta(day=1) + _MIDNIGHT


def first_of_year(now: datetime) -> datetime:
    return now + relativedelta(month=1, day=1) + _MIDNIGHT
