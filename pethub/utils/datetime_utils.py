"""Datetime helpers shared by the services."""
from datetime import datetime
import pytz


def utcnow() -> datetime:
    """Current instant as an aware UTC datetime."""
    return datetime.now(pytz.utc)


def to_naive_utc(value: datetime) -> datetime:
    """Convert to the naive UTC form the database stores."""
    if value.tzinfo is not None:
        return value.astimezone(pytz.utc).replace(tzinfo=None)
    return value
