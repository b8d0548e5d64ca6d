"""Date and time helpers using the framework's ``dd-MM-yyyy HH:mm:ss`` format."""

from datetime import datetime, timedelta
from typing import Optional

DATE_TIME_FORMAT = "%d-%m-%Y %H:%M:%S"


def current_timestamp() -> str:
    return format_timestamp(datetime.now())


def format_timestamp(dt: datetime) -> str:
    return dt.strftime(DATE_TIME_FORMAT)


def add_days(dt: datetime, days: int) -> datetime:
    """Shift ``dt`` by ``days``; negative values go back in time."""
    return dt + timedelta(days=days)


def hour_of_day(dt: Optional[datetime] = None) -> int:
    return (dt or datetime.now()).hour


def minute_of_hour(dt: Optional[datetime] = None) -> int:
    return (dt or datetime.now()).minute
