"""Timestamp parsing shared by positions and polls."""

from datetime import datetime, timezone


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an ISO 8601 string into an aware UTC datetime, None if unusable."""
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def to_iso(moment: datetime) -> str:
    """Format as ISO 8601 UTC with millisecond precision and a Z suffix."""
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def age_in_days(moment: datetime, now: datetime | None = None) -> float:
    """Signed age of moment relative to now, in days."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return (now - moment).total_seconds() / 86400
