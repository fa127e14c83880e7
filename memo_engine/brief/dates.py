"""Date parsing, long-form display and day arithmetic for memo generation.

Every helper here tolerates missing or malformed input: display falls back
to ``DATE_NOT_AVAILABLE`` and day counts fall back to ``STALE_DAYS`` so that
recency filters treat the record as stale.  Both paths log a warning.

"Now" is never read implicitly by the pipeline.  Callers pass a clock, a
zero-argument callable returning an aware datetime, and ``utc_now`` is only
the default.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone, tzinfo
from typing import Callable, Optional
from zoneinfo import ZoneInfo

from memo_engine.config import settings

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

DATE_NOT_AVAILABLE = "Date not available"
STALE_DAYS = 999
SECONDS_PER_DAY = 60 * 60 * 24


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def fixed_clock(moment: datetime) -> Clock:
    """Return a clock frozen at ``moment`` (naive values are taken as UTC)."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return lambda: moment


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp or date into an aware datetime.

    Accepts offsets, a trailing ``Z`` and bare dates (``2025-11-02``).
    Naive results are interpreted as UTC.  Returns None when the value is
    missing or cannot be parsed.
    """
    if not value or not isinstance(value, str):
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _display_zone() -> tzinfo:
    name = settings.display_timezone
    if not name or name.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(name)


def format_long_date(value: Optional[str]) -> str:
    """Render a timestamp as e.g. ``Saturday, November 15, 2025 at 9:00 PM UTC``.

    The instant is shown in the configured display zone.
    """
    parsed = parse_timestamp(value)
    if parsed is None:
        logger.warning("Invalid date string provided to format_long_date: %r", value)
        return DATE_NOT_AVAILABLE

    local = parsed.astimezone(_display_zone())
    hour = local.hour % 12 or 12
    return (
        f"{local.strftime('%A, %B')} {local.day}, {local.year} "
        f"at {hour}:{local.minute:02d} {'AM' if local.hour < 12 else 'PM'} "
        f"{local.tzname()}"
    )


def days_since(value: Optional[str], now: Optional[datetime] = None) -> int:
    """Whole days between ``value`` and ``now``, regardless of direction."""
    parsed = parse_timestamp(value)
    if parsed is None:
        logger.warning("Invalid date string provided to days_since: %r", value)
        return STALE_DAYS

    if now is None:
        now = utc_now()
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return int(abs((now - parsed).total_seconds()) // SECONDS_PER_DAY)
