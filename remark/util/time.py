"""Timestamp helpers."""

from datetime import UTC, datetime


def iso_now() -> str:
    """Current UTC time as an ISO-8601 string, e.g. ``2025-01-31T12:00:00.000Z``.

    All stored timestamps use this fixed-width format so that lexicographic
    order equals chronological order.
    """
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")
