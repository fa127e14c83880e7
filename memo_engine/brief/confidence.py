"""Three-level data quality confidence for a generated memo.

Scoring:
- high:   every attendee contacted recently, fresh news, complete profiles
- low:    no recent contact AND no fresh news
- medium: anything else

Incomplete profiles alone never drop a memo to "low"; only the two
freshness signals failing together do.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from memo_engine.brief.dates import days_since
from memo_engine.config import settings
from memo_engine.models import Confidence, Organization, Profile


@dataclass(frozen=True)
class ConfidenceSignals:
    all_profiles_recently_contacted: bool
    has_fresh_news: bool
    all_profiles_complete: bool


def evaluate_signals(
    profiles: list[Profile],
    org: Organization,
    now: datetime,
    contact_threshold_days: Optional[int] = None,
    news_threshold_days: Optional[int] = None,
) -> ConfidenceSignals:
    if contact_threshold_days is None:
        contact_threshold_days = settings.recent_contact_threshold_days
    if news_threshold_days is None:
        news_threshold_days = settings.news_freshness_threshold_days

    recently_contacted = all(
        any(days_since(ix.date, now) <= contact_threshold_days for ix in p.recent_interactions)
        for p in profiles
    )
    fresh_news = any(
        days_since(item.date, now) <= news_threshold_days for item in org.recent_news
    )
    complete = all(
        bool(p.bio) and len(p.priorities) > 0 and len(p.recent_interactions) > 0
        for p in profiles
    )
    return ConfidenceSignals(
        all_profiles_recently_contacted=recently_contacted,
        has_fresh_news=fresh_news,
        all_profiles_complete=complete,
    )


def score_confidence(signals: ConfidenceSignals) -> Confidence:
    if (
        signals.all_profiles_recently_contacted
        and signals.has_fresh_news
        and signals.all_profiles_complete
    ):
        return Confidence.high
    if not signals.all_profiles_recently_contacted and not signals.has_fresh_news:
        return Confidence.low
    return Confidence.medium


def compute_confidence(
    profiles: list[Profile],
    org: Organization,
    now: datetime,
) -> Confidence:
    return score_confidence(evaluate_signals(profiles, org, now))
