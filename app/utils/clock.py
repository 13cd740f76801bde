from datetime import datetime, timezone


def utcnow() -> datetime:
    """Current wall-clock time as a naive UTC datetime, matching stored columns"""
    return datetime.utcnow()


def to_timestamp(value: datetime) -> int:
    """Whole seconds since the epoch; naive values are taken as UTC"""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp())
