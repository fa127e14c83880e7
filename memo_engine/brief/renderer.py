"""Render a Memo as a markdown briefing document."""

from __future__ import annotations

from memo_engine.models import Confidence, Memo

_CONFIDENCE_LABELS = {
    Confidence.high: "HIGH",
    Confidence.medium: "MEDIUM",
    Confidence.low: "LOW – data may be stale",
}

_EMPTY = "*None identified.*"


def render_markdown(memo: Memo) -> str:
    """Convert a Memo to a readable pre-meeting briefing."""
    lines: list[str] = []
    s = memo.sections
    m = memo.metadata

    # ── Header ──
    lines.append(f"# Meeting Memo: {memo.meeting_title}")
    lines.append("")
    lines.append("| Field | Value |")
    lines.append("|-------|-------|")
    lines.append(f"| **Meeting** | {memo.meeting_title} |")
    lines.append(f"| **Date** | {memo.date} |")
    lines.append(f"| **Generated** | {m.generated_at} |")
    lines.append(f"| **Confidence** | {_CONFIDENCE_LABELS[m.confidence]} |")
    lines.append(f"| **Sources** | {', '.join(m.data_sources) or 'none'} |")
    lines.append("")

    lines.append("## Meeting Context")
    lines.append("")
    lines.append(s.meeting_context)
    lines.append("")

    lines.append("## Attendee Backgrounds")
    lines.append("")
    if s.attendee_backgrounds:
        for bg in s.attendee_backgrounds:
            lines.append(f"### {bg.name}")
            lines.append("")
            lines.append(bg.context)
            lines.append("")
    else:
        lines.append(_EMPTY)
        lines.append("")

    lines.append("## Key Topics")
    lines.append("")
    if s.key_topics:
        lines.extend(f"- {topic.value}" for topic in s.key_topics)
    else:
        lines.append(_EMPTY)
    lines.append("")

    lines.append("## Suggested Talking Points")
    lines.append("")
    for i, point in enumerate(s.suggested_talking_points, 1):
        lines.append(f"{i}. {point}")
    lines.append("")

    lines.append("## Recent Developments")
    lines.append("")
    if s.recent_developments:
        for dev in s.recent_developments:
            lines.append(f"- **{dev.topic}**: {dev.detail}")
    else:
        lines.append(_EMPTY)
    lines.append("")

    lines.append("## Relationship History")
    lines.append("")
    lines.append(s.relationship_history)
    lines.append("")

    return "\n".join(lines)
