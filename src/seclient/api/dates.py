"""Date and timestamp formats used on the SolarEdge wire."""

from datetime import date, datetime
from typing import Annotated, Any

from pydantic import BeforeValidator

DATE_FORMAT = "%Y-%m-%d"
DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_date(d: date | datetime) -> str:
    """Format a date or datetime for a query string.

    Args:
        d: Date to format.

    Returns:
        ``YYYY-MM-DD HH:MM:SS`` for datetimes, ``YYYY-MM-DD`` for dates.
    """
    if isinstance(d, datetime):
        return d.strftime(DATETIME_FORMAT)
    return d.strftime(DATE_FORMAT)


def parse_datetime(value: Any) -> Any:
    """Parse an API timestamp, accepting a bare date as midnight."""
    if not isinstance(value, str):
        return value
    try:
        return datetime.strptime(value, DATETIME_FORMAT)
    except ValueError:
        return datetime.strptime(value, DATE_FORMAT)


def parse_date(value: Any) -> Any:
    """Parse an API date."""
    if not isinstance(value, str):
        return value
    return datetime.strptime(value, DATE_FORMAT).date()


ApiDateTime = Annotated[datetime, BeforeValidator(parse_datetime)]
ApiDate = Annotated[date, BeforeValidator(parse_date)]
