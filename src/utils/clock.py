"""Time helpers: tickets store instants as integer epoch milliseconds (UTC)."""

from datetime import datetime, timedelta, timezone

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def utc_now() -> datetime:
    """Current instant, timezone-aware."""
    return datetime.now(timezone.utc)


def to_epoch_ms(moment: datetime) -> int:
    """Convert a datetime to epoch milliseconds; naive values are taken as UTC."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return (moment - EPOCH) // timedelta(milliseconds=1)


def from_epoch_ms(epoch_ms: int) -> datetime:
    return EPOCH + timedelta(milliseconds=epoch_ms)


def isoformat_ms(epoch_ms: int) -> str:
    """Render epoch milliseconds as e.g. 2024-05-01T10:00:00.000Z."""
    text = from_epoch_ms(epoch_ms).isoformat(timespec="milliseconds")
    return text.replace("+00:00", "Z")
