from datetime import datetime, timezone
from typing import Optional


def from_iso_string(value: str) -> Optional[datetime]:
    """Parse a stored timestamp or plain date; naive values are taken as UTC."""
    if not value:
        return None
    try:
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def sort_key(value: Optional[str]) -> datetime:
    return from_iso_string(value or "") or datetime.min.replace(tzinfo=timezone.utc)


def most_recent_first(records: list) -> list:
    # sorted() is stable, records without created_at keep their relative order
    return sorted(records, key=lambda r: sort_key(r.created_at), reverse=True)


def month_start(now: datetime) -> datetime:
    return now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
