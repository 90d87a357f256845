"""Shared pytest fixtures for the suno-cli test suite."""

from unittest.mock import MagicMock, patch

import httpx
import pytest

from suno_cli.client import SunoClient
from suno_cli.models import AudioRecord, Config
from suno_cli.storage import Storage


class FakeClock:
    """Stands in for the time module: sleep() advances monotonic() instantly."""

    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps: list[float] = []

    def monotonic(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def make_response():
    """Returns a factory for MagicMock httpx.Response objects with a JSON body."""

    def _make(status_code: int = 200, json_data=None, reason: str = "OK") -> MagicMock:
        response = MagicMock(spec=httpx.Response)
        response.status_code = status_code
        response.reason_phrase = reason
        response.json.return_value = json_data
        return response

    return _make


@pytest.fixture
def make_clip():
    """Returns a factory for raw clip payloads as served by the feed."""

    def _make(clip_id: str = "clip-1", status: str = "complete", **overrides) -> dict:
        clip = {
            "id": clip_id,
            "title": "Sunshine",
            "image_url": f"https://cdn.suno.ai/image_{clip_id}.png",
            "audio_url": f"https://cdn.suno.ai/{clip_id}.mp3",
            "video_url": f"https://cdn.suno.ai/{clip_id}.mp4",
            "created_at": "2024-04-23T03:21:07.000Z",
            "model_name": "chirp-v3",
            "status": status,
            "metadata": {
                "prompt": "[Verse]\nHello sun\n\n[Chorus]\nLa la la\n",
                "gpt_description_prompt": "a happy pop song",
                "type": "gen",
                "tags": "pop, upbeat",
                "duration_formatted": "2:01",
            },
        }
        clip.update(overrides)
        return clip

    return _make


@pytest.fixture
def fake_clock() -> FakeClock:
    """Patches the client's time module with a deterministic clock."""
    clock = FakeClock()
    with patch("suno_cli.client.time", clock):
        yield clock


@pytest.fixture
def sample_config() -> Config:
    """Returns a Config pointing at test hosts."""
    return Config(
        base_url="https://studio.test",
        clerk_url="https://clerk.test",
        clerk_js_version="4.70.5",
        model="chirp-v3-0",
        request_timeout=10.0,
        poll_timeout=100.0,
        lyrics_timeout=60.0,
    )


@pytest.fixture
def client(sample_config: Config) -> SunoClient:
    """Returns a SunoClient that has not been initialized."""
    return SunoClient("__client=abc; __client_uat=1", sample_config)


@pytest.fixture
def authed_client(client: SunoClient) -> SunoClient:
    """Returns a SunoClient with a session id and token already set."""
    client._sid = "sess_123456789012345"
    client._token = "jwt-initial"
    return client


@pytest.fixture
def sample_record() -> AudioRecord:
    """Returns a finished AudioRecord for testing."""
    return AudioRecord(
        id="clip-1",
        title="Sunshine",
        created_at="2024-04-23T03:21:07.000Z",
        model_name="chirp-v3",
        status="complete",
        audio_url="https://cdn.suno.ai/clip-1.mp3",
        tags="pop, upbeat",
    )


@pytest.fixture
def tmp_storage(tmp_path) -> Storage:
    """Returns a Storage instance using a temporary directory."""
    return Storage(base_path=tmp_path)
