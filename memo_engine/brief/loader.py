"""Load memo inputs exported by the calendar, profile and organization stores."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from memo_engine.brief.generator import MemoInputError
from memo_engine.models import Event, Organization, Profile

logger = logging.getLogger(__name__)


class BundleLoadError(MemoInputError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Could not load memo inputs from {path}: {reason}")
        self.path = path


class MemoInputs(BaseModel):
    """One meeting's worth of upstream records."""
    model_config = ConfigDict(frozen=True)

    event: Event
    profiles: list[Profile] = Field(default_factory=list)
    organization: Organization


def load_bundle(path: Path | str) -> MemoInputs:
    """Read a JSON bundle of ``{"event", "profiles", "organization"}``."""
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise BundleLoadError(path, exc.strerror or str(exc)) from exc

    try:
        inputs = MemoInputs.model_validate_json(raw)
    except ValidationError as exc:
        raise BundleLoadError(path, f"{exc.error_count()} validation error(s)") from exc

    logger.debug(
        "Loaded bundle %s: event=%s, profiles=%d, news=%d",
        path, inputs.event.id, len(inputs.profiles), len(inputs.organization.recent_news),
    )
    return inputs
