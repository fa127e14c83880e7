"""Pydantic models for meeting memo inputs and the memo output schema.

Inputs mirror the records handed over by the calendar, contact-profile and
organization/news stores.  They are frozen: the memo engine reads them and
never writes back.  Date fields stay raw strings so that a malformed date
degrades to a sentinel in the date helpers instead of failing validation.

All models accept and emit the camelCase wire names used by the upstream
stores (``meetingType``, ``recentInteractions``, ``keyTopics`` ...), while
Python code works with snake_case attributes.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class _Record(_CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True,
    )


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class MeetingType(str, Enum):
    internal = "internal"
    external = "external"
    public = "public"


class InteractionType(str, Enum):
    meeting = "meeting"
    email = "email"
    call = "call"
    event = "event"


class RelationshipType(str, Enum):
    partner = "partner"
    constituent = "constituent"
    vendor = "vendor"
    other = "other"


class Confidence(str, Enum):
    """Data freshness/completeness indicator attached to every memo."""
    high = "high"
    medium = "medium"
    low = "low"


class TopicLabel(str, Enum):
    """Closed set of canonical meeting themes."""
    budget = "Budget & Financial Planning"
    infrastructure = "Infrastructure & Capital Improvements"
    staffing = "Staffing & Human Resources"
    program_expansion = "Program Expansion"


# ---------------------------------------------------------------------------
# Input records
# ---------------------------------------------------------------------------

class Attendee(_Record):
    """Calendar-side reference to a person; loosely tied to a Profile."""
    name: str
    title: str = ""
    organization: str = ""
    profile_id: Optional[str] = None


class Event(_Record):
    id: str
    title: str
    datetime: Optional[str] = Field(
        None, description="ISO-8601 instant with offset; required by generate_memo",
    )
    location: str = ""
    attendees: list[Attendee] = Field(default_factory=list)
    description: Optional[str] = None
    meeting_type: MeetingType = MeetingType.external


class Interaction(_Record):
    date: str
    type: InteractionType
    summary: str


class Profile(_Record):
    id: str
    name: str
    title: str = ""
    organization: str = ""
    bio: str = ""
    recent_interactions: list[Interaction] = Field(default_factory=list)
    priorities: list[str] = Field(default_factory=list)
    relationship_notes: Optional[str] = None


class NewsItem(_Record):
    headline: str
    date: str
    source: str
    summary: str


class Organization(_Record):
    name: str
    description: str = ""
    recent_news: list[NewsItem] = Field(default_factory=list)
    key_initiatives: list[str] = Field(default_factory=list)
    relationship: RelationshipType = RelationshipType.other


# ---------------------------------------------------------------------------
# Memo output
# ---------------------------------------------------------------------------

class AttendeeBackground(_CamelModel):
    name: str
    context: str


class RecentDevelopment(_CamelModel):
    topic: str
    detail: str


class MemoSections(_CamelModel):
    meeting_context: str
    attendee_backgrounds: list[AttendeeBackground] = Field(default_factory=list)
    key_topics: list[TopicLabel] = Field(default_factory=list)
    suggested_talking_points: list[str] = Field(default_factory=list)
    recent_developments: list[RecentDevelopment] = Field(default_factory=list)
    relationship_history: str


class MemoMetadata(_CamelModel):
    generated_at: str
    data_sources: list[str] = Field(default_factory=list)
    confidence: Confidence = Confidence.medium


class Memo(_CamelModel):
    """The briefing document handed to the person preparing for the meeting."""
    meeting_title: str
    date: str
    sections: MemoSections
    metadata: MemoMetadata
