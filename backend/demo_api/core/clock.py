"""Response timestamps: ISO 8601, UTC, millisecond precision, Z suffix."""

from datetime import datetime, timezone


def format_timestamp(moment: datetime) -> str:
    """Render an aware datetime as e.g. 2026-10-17T12:00:00.123Z."""
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now_iso() -> str:
    return format_timestamp(datetime.now(timezone.utc))
