"""Memo generation: cross-reference event, profiles and organization into a memo.

This is the orchestrating layer.  It:
1. Validates the required inputs (no partial memo on failure)
2. Formats the meeting date and builds the meeting context narrative
3. Builds one attendee background per profile
4. Extracts key topics and assembles suggested talking points
5. Attaches recent developments, relationship history and metadata

Generation is synchronous and pure apart from reading the supplied clock.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from memo_engine.brief.confidence import compute_confidence
from memo_engine.brief.dates import Clock, format_long_date, parse_timestamp, utc_now
from memo_engine.brief.interactions import summarize_interactions
from memo_engine.brief.talking_points import build_talking_points
from memo_engine.brief.topics import extract_topics
from memo_engine.config import settings
from memo_engine.models import (
    AttendeeBackground,
    Event,
    Memo,
    MemoMetadata,
    MemoSections,
    Organization,
    Profile,
    RecentDevelopment,
)

logger = logging.getLogger(__name__)

DATA_SOURCES = [
    "Event calendar",
    "Contact profiles",
    "Organization database",
    "News aggregator",
    "Interaction history",
]

DEFAULT_FOCUS = "upcoming initiatives and collaboration opportunities"
DEFAULT_DEVELOPMENT = "organizational initiatives"


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class MemoInputError(ValueError):
    """Required memo input is missing or invalid; no memo is produced."""


class MissingEventError(MemoInputError):
    def __init__(self) -> None:
        super().__init__("generate_memo: missing required event")


class MissingProfilesError(MemoInputError):
    def __init__(self) -> None:
        super().__init__("generate_memo: missing required profiles")


class MissingOrganizationError(MemoInputError):
    def __init__(self) -> None:
        super().__init__("generate_memo: missing required organization")


class MissingEventDatetimeError(MemoInputError):
    def __init__(self, event_id: str) -> None:
        super().__init__(f"generate_memo: event {event_id!r} is missing its datetime")
        self.event_id = event_id


class InvalidEventDatetimeError(MemoInputError):
    def __init__(self, event_id: str, value: str) -> None:
        super().__init__(
            f"generate_memo: event {event_id!r} has an unparsable datetime {value!r}"
        )
        self.event_id = event_id
        self.value = value


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------

class MemoOptions(BaseModel):
    """Caller overrides for the attendee-background interaction window."""
    model_config = ConfigDict(populate_by_name=True)

    recency_window_days: int = Field(
        default_factory=lambda: settings.recency_window_days,
        alias="recencyWindowDays",
        ge=0,
    )
    max_rendered_interactions: int = Field(
        default_factory=lambda: settings.max_rendered_interactions,
        alias="maxRenderedInteractions",
        gt=0,
    )


# ---------------------------------------------------------------------------
# Section builders
# ---------------------------------------------------------------------------

def _plural(count: int, noun: str) -> str:
    return noun if count == 1 else f"{noun}s"


def _article(word: str) -> str:
    return "an" if word[:1].lower() in "aeiou" else "a"


def _meeting_context(
    event: Event, profiles: list[Profile], org: Organization, meeting_date: str,
) -> str:
    headline = org.recent_news[0].headline if org.recent_news else DEFAULT_DEVELOPMENT
    count = len(profiles)
    kind = event.meeting_type.value
    return (
        f"This meeting is scheduled for {meeting_date} in {event.location}. "
        f"The discussion will focus on {event.description or DEFAULT_FOCUS}. "
        f"This is {_article(kind)} {kind} meeting with {count} key "
        f"{_plural(count, 'attendee')} from {org.name}. "
        f"Given recent developments including {headline}, "
        "this meeting presents an opportunity to align on priorities and explore "
        "partnership opportunities."
    )


def _attendee_background(
    profile: Profile, now: datetime, options: MemoOptions,
) -> AttendeeBackground:
    engagement = summarize_interactions(
        profile.recent_interactions,
        now,
        window_days=options.recency_window_days,
        limit=options.max_rendered_interactions,
    )
    priorities = ", ".join(profile.priorities[: settings.max_background_priorities])
    context = (
        f"{profile.bio} "
        f"Current priorities include: {priorities}. "
        f"Recent engagement: {engagement} "
    )
    if profile.relationship_notes:
        context += f"Communication preferences: {profile.relationship_notes}"
    return AttendeeBackground(name=profile.name, context=context.rstrip())


def _recent_developments(org: Organization) -> list[RecentDevelopment]:
    return [
        RecentDevelopment(
            topic=item.headline,
            detail=f"{item.summary} (Source: {item.source}, {format_long_date(item.date)})",
        )
        for item in org.recent_news[: settings.max_recent_developments]
    ]


def _relationship_history(profiles: list[Profile], org: Organization) -> str:
    count = len(profiles)
    return (
        f"The relationship with {org.name} is characterized as "
        f"{_article(org.relationship.value)} {org.relationship.value} relationship. "
        f"Recent interactions have been positive, with {count} key "
        f"{_plural(count, 'contact')} engaged in regular communication. "
        "The organization has been responsive to city initiatives and has shown "
        "interest in expanded partnership opportunities. "
        "Communication patterns suggest preference for detailed, data-driven "
        "discussions with advance preparation."
    )


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def generate_memo(
    event: Optional[Event],
    profiles: Optional[list[Profile]],
    org: Optional[Organization],
    *,
    clock: Optional[Clock] = None,
    options: Optional[MemoOptions] = None,
) -> Memo:
    """Generate a meeting memo from an event, its attendee profiles and the org.

    Args:
        event: Calendar event being prepared for
        profiles: Contact profiles of the attendees, in display order
        org: Organization the attendees belong to, with its news
        clock: Source of "now"; defaults to the UTC wall clock
        options: Interaction window overrides for attendee backgrounds

    Raises:
        MemoInputError: a required input is missing or the event datetime
            is missing or unparsable
    """
    if event is None:
        raise MissingEventError()
    if profiles is None:
        raise MissingProfilesError()
    if org is None:
        raise MissingOrganizationError()
    if not event.datetime:
        raise MissingEventDatetimeError(event.id)
    if parse_timestamp(event.datetime) is None:
        raise InvalidEventDatetimeError(event.id, event.datetime)

    now = (clock or utc_now)()
    options = options or MemoOptions()

    meeting_date = format_long_date(event.datetime)
    key_topics = extract_topics(event, org, profiles)
    confidence = compute_confidence(profiles, org, now)

    sections = MemoSections(
        meeting_context=_meeting_context(event, profiles, org, meeting_date),
        attendee_backgrounds=[_attendee_background(p, now, options) for p in profiles],
        key_topics=key_topics,
        suggested_talking_points=build_talking_points(key_topics, org, profiles, now),
        recent_developments=_recent_developments(org),
        relationship_history=_relationship_history(profiles, org),
    )

    logger.info(
        "Memo generated for %s: confidence=%s, topics=%d, talking_points=%d",
        event.id,
        confidence.value,
        len(sections.key_topics),
        len(sections.suggested_talking_points),
    )

    return Memo(
        meeting_title=event.title,
        date=meeting_date,
        sections=sections,
        metadata=MemoMetadata(
            generated_at=format_long_date(now.isoformat()),
            data_sources=list(DATA_SOURCES),
            confidence=confidence,
        ),
    )
