"""Column Types: engine-independent behavior for values SQLite stores loosely.

Invariants:
    - UTCDateTime always hands back timezone-aware UTC datetimes, on every engine
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.types import TypeDecorator


class UTCDateTime(TypeDecorator):
    """DateTime(timezone=True) that normalizes to UTC; naive values are taken as UTC."""
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect) -> datetime | None:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    def process_result_value(self, value: datetime | None, dialect) -> datetime | None:
        if value is None:
            return None
        if value.tzinfo is None:
            # SQLite drops the offset; everything written here was UTC
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
