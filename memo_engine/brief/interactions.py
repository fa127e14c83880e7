"""Recency filtering and narrative rendering of a contact's interaction log."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from memo_engine.brief.dates import days_since, parse_timestamp
from memo_engine.models import Interaction

DEFAULT_RECENCY_WINDOW_DAYS = 90
DEFAULT_MAX_RENDERED_INTERACTIONS = 3

NO_RECENT_INTERACTIONS = "No recent interactions on record."

# Sort key for interactions whose date cannot be parsed
_UNDATED = datetime.min.replace(tzinfo=timezone.utc)


def relative_time(days: int) -> str:
    if days == 0:
        return "today"
    if days == 1:
        return "yesterday"
    return f"{days} days ago"


def _sort_key(interaction: Interaction) -> datetime:
    return parse_timestamp(interaction.date) or _UNDATED


def most_recent(interactions: list[Interaction]) -> Optional[Interaction]:
    """The latest-dated interaction, or None for an empty log."""
    if not interactions:
        return None
    return max(interactions, key=_sort_key)


def rank_recent(
    interactions: list[Interaction],
    now: Optional[datetime] = None,
    window_days: int = DEFAULT_RECENCY_WINDOW_DAYS,
    limit: int = DEFAULT_MAX_RENDERED_INTERACTIONS,
) -> list[str]:
    """Render the ``limit`` most recent interactions inside the window.

    Interactions older than ``window_days`` are dropped, the rest are
    ordered newest first (ties keep their input order) and rendered as
    ``"{type} {relative time}: {summary}"``.
    """
    aged = [(ix, days_since(ix.date, now)) for ix in interactions]
    recent = [(ix, days) for ix, days in aged if days <= window_days]
    recent.sort(key=lambda pair: _sort_key(pair[0]), reverse=True)

    return [
        f"{ix.type.value} {relative_time(days)}: {ix.summary}"
        for ix, days in recent[:limit]
    ]


def summarize_interactions(
    interactions: list[Interaction],
    now: Optional[datetime] = None,
    window_days: int = DEFAULT_RECENCY_WINDOW_DAYS,
    limit: int = DEFAULT_MAX_RENDERED_INTERACTIONS,
) -> str:
    """Space-joined narrative of recent interactions for an attendee background."""
    rendered = rank_recent(interactions, now, window_days=window_days, limit=limit)
    if not rendered:
        return NO_RECENT_INTERACTIONS
    return " ".join(rendered)
