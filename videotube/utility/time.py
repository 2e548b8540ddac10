from datetime import datetime, UTC


def utc_now() -> datetime:
    return datetime.now(UTC)


def is_expired(expires_at: datetime | None) -> bool:
    """Sessions without an expiry never expire. Naive values are read as UTC."""
    if expires_at is None:
        return False
    if expires_at.tzinfo is None:
        expires_at = expires_at.replace(tzinfo=UTC)
    return expires_at < utc_now()
