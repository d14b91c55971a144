from datetime import datetime, timezone

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(dt: datetime) -> str:
    return dt.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)


def parse_timestamp(value: str) -> datetime:
    """Parse a stored timestamp. Accepts the stored format and plain ISO-8601."""
    try:
        return datetime.strptime(value, TIMESTAMP_FORMAT).replace(tzinfo=timezone.utc)
    except ValueError:
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
        return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'} ago"


def relative_time(now: datetime, then: datetime) -> str:
    """Human "posted N ago" string. Months are counted as 30 days."""
    hours = int((now - then).total_seconds() // 3600)
    if hours < 1:
        return "just now"
    if hours < 24:
        return _plural(hours, "hour")
    days = hours // 24
    if days < 30:
        return _plural(days, "day")
    return _plural(days // 30, "month")
