"""Data models for the Suno CLI."""

from dataclasses import dataclass
from typing import Optional


FINISHED_STATUSES = ("streaming", "complete")


@dataclass
class AudioRecord:
    """Represents a generated clip as reported by the feed."""

    id: str
    created_at: str
    model_name: str
    status: str
    title: Optional[str] = None
    image_url: Optional[str] = None
    lyric: Optional[str] = None
    audio_url: Optional[str] = None
    video_url: Optional[str] = None
    gpt_description_prompt: Optional[str] = None
    prompt: Optional[str] = None
    type: Optional[str] = None
    tags: Optional[str] = None
    duration: Optional[str] = None

    @property
    def is_finished(self) -> bool:
        return self.status in FINISHED_STATUSES


@dataclass
class Lyrics:
    """Represents a lyrics generation job."""

    id: str
    text: str
    title: str
    status: str

    @property
    def is_complete(self) -> bool:
        return self.status == "complete"


@dataclass
class BillingInfo:
    """Remaining credits and the current usage period."""

    credits_left: int
    period: Optional[str] = None
    monthly_limit: Optional[int] = None
    monthly_usage: Optional[int] = None


@dataclass
class Config:
    """User configuration for the CLI."""

    base_url: str
    clerk_url: str
    clerk_js_version: str
    model: str
    request_timeout: float
    poll_timeout: float
    lyrics_timeout: float
