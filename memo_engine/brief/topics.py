"""Keyword-driven topic extraction across event, organization and attendees.

Three sources are scanned with case-insensitive substring rules:

1. The event description (what is on the agenda)
2. The organization's key initiatives (what it cares about strategically)
3. Each attendee's priorities (what individuals are measured on)

A label matched by several sources is reported once.  Insertion order is
kept so downstream rendering is deterministic.
"""

from __future__ import annotations

import logging

from memo_engine.models import Event, Organization, Profile, TopicLabel

logger = logging.getLogger(__name__)

# (keywords, label) pairs, evaluated top to bottom for each scanned string
EVENT_DESCRIPTION_RULES: list[tuple[tuple[str, ...], TopicLabel]] = [
    (("budget",), TopicLabel.budget),
    (("infrastructure", "capital"), TopicLabel.infrastructure),
    (("staffing", "teacher"), TopicLabel.staffing),
]

INITIATIVE_RULES: list[tuple[tuple[str, ...], TopicLabel]] = [
    (("infrastructure",), TopicLabel.infrastructure),
    (("teacher", "retention"), TopicLabel.staffing),
    (("after-school", "program"), TopicLabel.program_expansion),
]

PRIORITY_RULES: list[tuple[tuple[str, ...], TopicLabel]] = [
    (("retention", "compensation"), TopicLabel.staffing),
    (("infrastructure",), TopicLabel.infrastructure),
    (("budget", "funding"), TopicLabel.budget),
    (("program",), TopicLabel.program_expansion),
]


def _match(
    text: str,
    rules: list[tuple[tuple[str, ...], TopicLabel]],
    found: dict[TopicLabel, None],
) -> None:
    lowered = text.lower()
    for keywords, label in rules:
        if any(kw in lowered for kw in keywords):
            found.setdefault(label, None)


def extract_topics(
    event: Event,
    org: Organization,
    profiles: list[Profile],
) -> list[TopicLabel]:
    """Return the distinct topic labels found across all three sources."""
    # dict as an ordered set
    found: dict[TopicLabel, None] = {}

    _match(event.description or "", EVENT_DESCRIPTION_RULES, found)

    for initiative in org.key_initiatives:
        _match(initiative, INITIATIVE_RULES, found)

    for profile in profiles:
        for priority in profile.priorities:
            _match(priority, PRIORITY_RULES, found)

    topics = list(found)
    logger.debug("Extracted %d topics: %s", len(topics), [t.value for t in topics])
    return topics
