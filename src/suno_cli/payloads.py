"""
Pydantic models for Suno API requests and responses.

Everything that crosses the wire goes through one of these models, so shape
problems surface where the data enters the client instead of deep inside it.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Payload(BaseModel):
    model_config = ConfigDict(extra="ignore")


# ─── Request Models ──────────────────────────────────────────

class GenerateRequest(_Payload):
    """Body of a song generation submission."""
    mv: str = Field(..., description="Suno model name")
    make_instrumental: bool = False
    prompt: str = Field("", description="Full lyrics in custom mode, empty otherwise")
    gpt_description_prompt: Optional[str] = None
    tags: Optional[str] = None
    title: Optional[str] = None

    @classmethod
    def describe(cls, prompt: str, model: str, make_instrumental: bool = False) -> "GenerateRequest":
        """Description mode: Suno writes the lyrics from a natural language prompt."""
        return cls(mv=model, make_instrumental=make_instrumental, gpt_description_prompt=prompt)

    @classmethod
    def custom(
        cls, prompt: str, tags: str, title: str, model: str, make_instrumental: bool = False
    ) -> "GenerateRequest":
        """Custom mode: caller supplies lyrics, style tags and title."""
        return cls(
            mv=model,
            make_instrumental=make_instrumental,
            prompt=prompt,
            tags=tags,
            title=title,
        )


class LyricsRequest(_Payload):
    prompt: str


# ─── Response Models ─────────────────────────────────────────

class ClientState(_Payload):
    last_active_session_id: Optional[str] = None


class SessionResponse(_Payload):
    """Clerk identity response."""
    response: Optional[ClientState] = None

    @property
    def session_id(self) -> Optional[str]:
        return self.response.last_active_session_id if self.response else None


class TokenResponse(_Payload):
    jwt: Optional[str] = None


class ClipMetadata(_Payload):
    prompt: Optional[str] = None
    gpt_description_prompt: Optional[str] = None
    type: Optional[str] = None
    tags: Optional[str] = None
    duration_formatted: Optional[str] = None


class Clip(_Payload):
    """Raw clip object as returned by the generate and feed endpoints."""
    id: str
    created_at: str
    model_name: str
    status: str
    title: Optional[str] = None
    image_url: Optional[str] = None
    audio_url: Optional[str] = None
    video_url: Optional[str] = None
    metadata: ClipMetadata = Field(default_factory=ClipMetadata)

    @field_validator("metadata", mode="before")
    @classmethod
    def _null_metadata(cls, value: Any) -> Any:
        return {} if value is None else value


class GenerateResponse(_Payload):
    clips: list[Clip]


class FeedResponse(_Payload):
    """Feed page. Older endpoints return a bare list, newer ones wrap it."""
    clips: list[Clip]

    @classmethod
    def from_json(cls, data: Any) -> "FeedResponse":
        if isinstance(data, list):
            data = {"clips": data}
        return cls.model_validate(data)


class LyricsJob(_Payload):
    id: str


class LyricsStatus(_Payload):
    status: str
    text: str = ""
    title: str = ""


class BillingPayload(_Payload):
    total_credits_left: int
    period: Optional[str] = None
    monthly_limit: Optional[int] = None
    monthly_usage: Optional[int] = None
