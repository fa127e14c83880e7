"""Suggested talking points: topic-gated rules anchored on news and profiles.

Rules run in a fixed order (budget, infrastructure, staffing, programs,
relationship) and each contributes zero or more points.  The order of the
output follows the rule table, not the order topics were discovered in.
Every memo ends with the relationship-maintenance point, so the list is
never empty.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from memo_engine.brief.dates import days_since, format_long_date
from memo_engine.brief.interactions import most_recent
from memo_engine.models import NewsItem, Organization, Profile, TopicLabel

logger = logging.getLogger(__name__)

CFO_TITLE_MARKER = "CFO"
RETENTION_CHAMPION_NAME = "Johnson"

BUDGET_NEWS_KEYWORDS = ("budget", "funding")
INFRASTRUCTURE_NEWS_KEYWORDS = ("infrastructure",)
RETENTION_NEWS_KEYWORDS = ("teacher", "retention")
PROGRAM_NEWS_KEYWORDS = ("after-school", "program")

RELATIONSHIP_POINT = (
    "Acknowledge the collaborative relationship and positive outcomes from recent initiatives. "
    "Express commitment to continued partnership and ask about priorities for the coming year."
)


@dataclass(frozen=True)
class TalkingPointRule:
    """A topic guard paired with the builder that runs when it passes.

    ``topic`` of None means the rule always runs.
    """
    name: str
    topic: Optional[TopicLabel]
    build: Callable[[Organization, list[Profile], datetime], list[str]]


def find_news(org: Organization, keywords: tuple[str, ...]) -> Optional[NewsItem]:
    """First news item (in the organization's order) whose headline matches."""
    for item in org.recent_news:
        headline = item.headline.lower()
        if any(kw in headline for kw in keywords):
            return item
    return None


def _days_since_latest(profile: Optional[Profile], now: datetime) -> int:
    latest = most_recent(profile.recent_interactions) if profile else None
    # A missing profile or log goes through the stale-date sentinel
    return days_since(latest.date if latest else None, now)


# ---------------------------------------------------------------------------
# Rule builders
# ---------------------------------------------------------------------------

def _budget_points(org: Organization, profiles: list[Profile], now: datetime) -> list[str]:
    news = find_news(org, BUDGET_NEWS_KEYWORDS)
    if news:
        return [
            f"Reference the {news.headline} ({news.source}, {format_long_date(news.date)}). "
            "Discuss how it aligns with city priorities and explore partnership funding opportunities."
        ]

    cfo = next((p for p in profiles if CFO_TITLE_MARKER in p.title), None)
    who = f"CFO {cfo.name}" if cfo else "the CFO"
    return [
        f"Address Q4 budget constraints mentioned by {who} in recent correspondence "
        f"({_days_since_latest(cfo, now)} days ago). "
        "Discuss multi-year planning approach to provide budget certainty."
    ]


def _infrastructure_points(org: Organization, profiles: list[Profile], now: datetime) -> list[str]:
    news = find_news(org, INFRASTRUCTURE_NEWS_KEYWORDS)
    if not news:
        return []
    return [
        f"Discuss the infrastructure improvement plan announced on {format_long_date(news.date)}. "
        "Explore how city resources can support the schools identified, particularly "
        "focusing on HVAC systems and accessibility improvements."
    ]


def _staffing_points(org: Organization, profiles: list[Profile], now: datetime) -> list[str]:
    points: list[str] = []

    if find_news(org, RETENTION_NEWS_KEYWORDS):
        points.append(
            "Acknowledge the positive teacher retention results mentioned in recent news. "
            "Discuss how city can continue supporting compensation initiatives and explore "
            "additional partnership opportunities."
        )

    champion = next((p for p in profiles if RETENTION_CHAMPION_NAME in p.name), None)
    if champion and any("retention" in p.lower() for p in champion.priorities):
        points.append(
            f"{champion.name} has prioritized teacher retention and compensation. "
            "Reference their previous interest in partnership opportunities "
            f"(from {_days_since_latest(champion, now)} days ago) and discuss concrete next steps."
        )

    return points


def _program_points(org: Organization, profiles: list[Profile], now: datetime) -> list[str]:
    if not find_news(org, PROGRAM_NEWS_KEYWORDS):
        return []
    return [
        "Address the proposal for expanded after-school programs. "
        "Discuss partnership opportunities with city recreation centers and explore "
        "funding mechanisms for underserved neighborhoods."
    ]


def _relationship_points(org: Organization, profiles: list[Profile], now: datetime) -> list[str]:
    return [RELATIONSHIP_POINT]


TALKING_POINT_RULES: list[TalkingPointRule] = [
    TalkingPointRule("budget", TopicLabel.budget, _budget_points),
    TalkingPointRule("infrastructure", TopicLabel.infrastructure, _infrastructure_points),
    TalkingPointRule("staffing", TopicLabel.staffing, _staffing_points),
    TalkingPointRule("program_expansion", TopicLabel.program_expansion, _program_points),
    TalkingPointRule("relationship", None, _relationship_points),
]


def build_talking_points(
    topics: list[TopicLabel],
    org: Organization,
    profiles: list[Profile],
    now: datetime,
) -> list[str]:
    """Assemble the ordered list of suggested talking points."""
    present = set(topics)
    points: list[str] = []

    for rule in TALKING_POINT_RULES:
        if rule.topic is not None and rule.topic not in present:
            continue
        added = rule.build(org, profiles, now)
        logger.debug("Talking point rule %s added %d point(s)", rule.name, len(added))
        points.extend(added)

    return points
