"""Shared test fixtures."""

from __future__ import annotations

import os
from datetime import datetime, timedelta, timezone

import pytest

# Stable display zone for formatted dates
os.environ["MEMO_DISPLAY_TIMEZONE"] = "UTC"

from memo_engine.brief.dates import fixed_clock
from memo_engine.models import (
    Attendee,
    Event,
    Interaction,
    NewsItem,
    Organization,
    Profile,
)

NOW = datetime(2025, 11, 10, 12, 0, tzinfo=timezone.utc)


def days_ago(n: int) -> str:
    """ISO timestamp exactly ``n`` days before NOW."""
    return (NOW - timedelta(days=n)).isoformat()


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def clock():
    return fixed_clock(NOW)


@pytest.fixture
def event() -> Event:
    return Event(
        id="evt_q4_budget",
        title="Q4 Budget Discussion with Denver Public Schools",
        datetime="2025-11-15T14:00:00-07:00",
        location="Mayor's Conference Room",
        description=(
            "Quarterly budget review and discussion of upcoming initiatives. "
            "Focus on capital improvements and staffing allocations."
        ),
        meeting_type="external",
        attendees=[
            Attendee(
                name="Dr. Alex Johnson",
                title="Superintendent",
                organization="Denver Public Schools",
                profile_id="prof_johnson",
            ),
            Attendee(
                name="Maria Rodriguez",
                title="CFO",
                organization="Denver Public Schools",
                profile_id="prof_rodriguez",
            ),
        ],
    )


@pytest.fixture
def johnson() -> Profile:
    return Profile(
        id="prof_johnson",
        name="Dr. Alex Johnson",
        title="Superintendent",
        organization="Denver Public Schools",
        bio="Dr. Johnson has served as Superintendent since 2021.",
        recent_interactions=[
            Interaction(date=days_ago(5), type="email", summary="Follow-up on teacher retention proposal."),
            Interaction(date=days_ago(56), type="meeting", summary="Q3 budget review meeting."),
            Interaction(date=days_ago(82), type="call", summary="Call about summer program outcomes."),
        ],
        priorities=[
            "Teacher retention and compensation",
            "Infrastructure improvements in underserved schools",
            "Expanding after-school programs",
            "Addressing achievement gaps",
        ],
        relationship_notes="Prefers detailed data and concrete proposals.",
    )


@pytest.fixture
def rodriguez() -> Profile:
    return Profile(
        id="prof_rodriguez",
        name="Maria Rodriguez",
        title="CFO",
        organization="Denver Public Schools",
        bio="Maria Rodriguez joined DPS in 2019 as CFO.",
        recent_interactions=[
            Interaction(date=days_ago(13), type="email", summary="Concerned about Q4 budget constraints."),
            Interaction(date=days_ago(19), type="meeting", summary="Attended city budget workshop."),
        ],
        priorities=[
            "Maintaining fiscal responsibility",
            "Multi-year budget planning",
        ],
    )


@pytest.fixture
def profiles(johnson, rodriguez) -> list[Profile]:
    return [johnson, rodriguez]


@pytest.fixture
def organization() -> Organization:
    return Organization(
        name="Denver Public Schools",
        description="The largest school district in Colorado.",
        recent_news=[
            NewsItem(
                headline="DPS Announces $50M Infrastructure Improvement Plan",
                date=days_ago(8),
                source="Denver Post",
                summary="A plan to address aging infrastructure across 15 schools.",
            ),
            NewsItem(
                headline="Teacher Retention Rates Improve Following Compensation Increases",
                date=days_ago(11),
                source="Chalkbeat Colorado",
                summary="Teacher retention improved by 8%.",
            ),
            NewsItem(
                headline="DPS Seeks City Support for Expanded After-School Programs",
                date=days_ago(16),
                source="Denver Gazette",
                summary="Expansion of after-school programming to 20 schools.",
            ),
            NewsItem(
                headline="District Board Approves Summer Calendar",
                date=days_ago(40),
                source="Denver Post",
                summary="Summer calendar approved.",
            ),
        ],
        key_initiatives=[
            "Infrastructure modernization (2025-2027)",
            "Teacher retention and compensation program",
            "Expansion of after-school and enrichment programs",
        ],
        relationship="constituent",
    )
