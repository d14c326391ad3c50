"""Sample events published by the demo entry point."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TestEvent(BaseModel):
    """Fired once by the demo to show synchronous delivery."""

    __test__ = False  # keep pytest from collecting this as a test class

    occurred_at: datetime = Field(default_factory=_utcnow)


class Ping(BaseModel):
    """Minimal event with a sequence number."""

    seq: int = 0
