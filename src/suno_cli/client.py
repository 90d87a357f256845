"""Suno API client for generating songs and lyrics."""

import logging
import random
import time
from typing import Any, Optional, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from suno_cli.exceptions import AuthError, RequestError, StateError
from suno_cli.models import AudioRecord, BillingInfo, Config, Lyrics
from suno_cli.payloads import (
    BillingPayload,
    Clip,
    FeedResponse,
    GenerateRequest,
    GenerateResponse,
    LyricsJob,
    LyricsRequest,
    LyricsStatus,
    SessionResponse,
    TokenResponse,
)
from suno_cli.storage import DEFAULT_CONFIG

logger = logging.getLogger(__name__)

USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/130.0.0.0 Safari/537.36"
)

# Jittered pauses, in seconds (low, high)
REFRESH_WAIT_SECONDS = (1.0, 2.0)
INITIAL_POLL_DELAY_SECONDS = (5.0, 5.0)
POLL_INTERVAL_SECONDS = (3.0, 6.0)
LYRICS_POLL_INTERVAL_SECONDS = 2.0

PayloadT = TypeVar("PayloadT", bound=BaseModel)


def parse_lyrics(prompt: str) -> str:
    """Drop blank lines from a raw lyrics prompt."""
    lines = [line for line in prompt.split("\n") if line.strip()]
    return "\n".join(lines)


def _jitter(bounds: tuple[float, float]) -> None:
    time.sleep(random.uniform(*bounds))


class SunoClient:
    """Client for Suno's studio API, authenticated through a Clerk browser session."""

    def __init__(self, cookie: str, config: Optional[Config] = None) -> None:
        self._config = config or DEFAULT_CONFIG
        self._sid: Optional[str] = None
        self._token: Optional[str] = None
        self._client = httpx.Client(
            headers=self._build_headers(cookie),
            timeout=self._config.request_timeout,
        )

    def _build_headers(self, cookie: str) -> dict[str, str]:
        return {
            "User-Agent": USER_AGENT,
            "Cookie": cookie,
        }

    def __enter__(self) -> "SunoClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    @property
    def session_id(self) -> Optional[str]:
        return self._sid

    @property
    def token(self) -> Optional[str]:
        return self._token

    # Session handling

    def _clerk_params(self) -> dict[str, str]:
        return {"_clerk_js_version": self._config.clerk_js_version}

    def _check_response_auth(self, response: httpx.Response) -> None:
        if response.status_code in (401, 403):
            raise AuthError(f"Clerk rejected the session cookie: HTTP {response.status_code}")

    def init(self) -> "SunoClient":
        """Exchange the cookie for a session id, then obtain the first token."""
        response = self._client.get(f"{self._config.clerk_url}/v1/client", params=self._clerk_params())
        self._check_response_auth(response)
        self._check_response(response, "Session lookup")

        session = self._parse(SessionResponse, response)
        if not session.session_id:
            raise AuthError()

        self._sid = session.session_id
        logger.info("Session established (sid=%s...)", self._sid[:12])
        self.refresh_token(wait=False)
        return self

    def refresh_token(self, wait: bool = False) -> None:
        """Renew the short-lived bearer token. Call before every authenticated request."""
        if not self._sid:
            raise StateError("Session ID is not set. Cannot renew token.")

        url = f"{self._config.clerk_url}/v1/client/sessions/{self._sid}/tokens"
        response = self._client.post(url, params=self._clerk_params())
        self._check_response_auth(response)
        self._check_response(response, "Token renewal")

        payload = self._parse(TokenResponse, response)
        if not payload.jwt:
            raise AuthError("No token in Clerk renewal response")

        self._token = payload.jwt
        logger.debug("Bearer token renewed")

        if wait:
            _jitter(REFRESH_WAIT_SECONDS)

    # Request plumbing

    def _auth_headers(self) -> dict[str, str]:
        if self._token is None:
            raise StateError("No bearer token. Call init() before making requests.")
        return {"Authorization": f"Bearer {self._token}"}

    def _get(self, path: str, **kwargs: Any) -> httpx.Response:
        return self._client.get(f"{self._config.base_url}{path}", headers=self._auth_headers(), **kwargs)

    def _post(self, path: str, **kwargs: Any) -> httpx.Response:
        return self._client.post(f"{self._config.base_url}{path}", headers=self._auth_headers(), **kwargs)

    def _check_response(self, response: httpx.Response, action: str) -> None:
        if not 200 <= response.status_code < 300:
            raise RequestError(
                f"{action} failed: HTTP {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )

    def _parse(self, model: type[PayloadT], response: httpx.Response) -> PayloadT:
        try:
            return model.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise RequestError(f"Malformed {model.__name__} payload: {e}") from e

    # Songs

    def generate(
        self,
        prompt: str,
        make_instrumental: bool = False,
        wait_audio: bool = False,
    ) -> list[AudioRecord]:
        """Generate songs from a description; Suno writes the lyrics."""
        payload = GenerateRequest.describe(prompt, self._config.model, make_instrumental)
        return self._generate_songs(payload, wait_audio)

    def custom_generate(
        self,
        prompt: str,
        tags: str,
        title: str,
        make_instrumental: bool = False,
        wait_audio: bool = False,
    ) -> list[AudioRecord]:
        """Generate songs from caller-supplied lyrics, style tags and title."""
        payload = GenerateRequest.custom(prompt, tags, title, self._config.model, make_instrumental)
        return self._generate_songs(payload, wait_audio)

    def _generate_songs(self, payload: GenerateRequest, wait_audio: bool) -> list[AudioRecord]:
        self.refresh_token()
        started = time.monotonic()

        response = self._post("/api/generate/v2/", json=payload.model_dump(exclude_none=True))
        self._check_response(response, "Generate")
        clips = self._parse(GenerateResponse, response).clips
        song_ids = [clip.id for clip in clips]
        logger.info("Submitted generation job: %s", ", ".join(song_ids))

        if wait_audio:
            records = self.poll_until_complete(song_ids)
        else:
            self.refresh_token(wait=True)
            records = [self._map_clip(clip) for clip in clips]

        logger.info("Generation returned %d records in %.1fs", len(records), time.monotonic() - started)
        return records

    def poll_until_complete(
        self, song_ids: list[str], timeout: Optional[float] = None
    ) -> list[AudioRecord]:
        """Poll the feed until every clip is streaming or complete.

        A requested id missing from the feed counts as still pending.

        Returns the last observed snapshot when the timeout elapses first, so
        callers must check ``is_finished`` on each record themselves.
        """
        timeout = self._config.poll_timeout if timeout is None else timeout
        started = time.monotonic()
        wanted = set(song_ids)
        last_records: list[AudioRecord] = []

        _jitter(INITIAL_POLL_DELAY_SECONDS)
        while time.monotonic() - started < timeout:
            records = self.fetch(song_ids)
            finished = {record.id for record in records if record.is_finished}
            if finished >= wanted and all(record.is_finished for record in records):
                return records

            last_records = records
            logger.debug("%d of %d clips still pending", len(wanted - finished), len(wanted))
            _jitter(POLL_INTERVAL_SECONDS)
            self.refresh_token(wait=True)

        logger.warning("Timed out after %.0fs waiting for clips: %s", timeout, ", ".join(song_ids))
        return last_records

    def fetch(self, song_ids: Optional[list[str]] = None) -> list[AudioRecord]:
        """Fetch clip status for the given ids, or the most recent clips."""
        self.refresh_token()
        params = {"ids": ",".join(song_ids)} if song_ids else None

        response = self._get("/api/feed/", params=params)
        self._check_response(response, "Feed")
        try:
            feed = FeedResponse.from_json(response.json())
        except (ValueError, ValidationError) as e:
            raise RequestError(f"Malformed FeedResponse payload: {e}") from e

        return [self._map_clip(clip) for clip in feed.clips]

    def _map_clip(self, clip: Clip) -> AudioRecord:
        metadata = clip.metadata
        return AudioRecord(
            id=clip.id,
            title=clip.title,
            image_url=clip.image_url,
            lyric=parse_lyrics(metadata.prompt) if metadata.prompt else None,
            audio_url=clip.audio_url,
            video_url=clip.video_url,
            created_at=clip.created_at,
            model_name=clip.model_name,
            status=clip.status,
            gpt_description_prompt=metadata.gpt_description_prompt,
            prompt=metadata.prompt,
            type=metadata.type,
            tags=metadata.tags,
            duration=metadata.duration_formatted,
        )

    # Lyrics

    def generate_lyrics(self, prompt: str, timeout: Optional[float] = None) -> Lyrics:
        """Submit a lyrics job and poll until it completes or the timeout elapses."""
        timeout = self._config.lyrics_timeout if timeout is None else timeout
        self.refresh_token()

        response = self._post("/api/generate/lyrics/", json=LyricsRequest(prompt=prompt).model_dump())
        self._check_response(response, "Lyrics")
        lyrics_id = self._parse(LyricsJob, response).id
        logger.info("Submitted lyrics job: %s", lyrics_id)

        started = time.monotonic()
        status = self._lyrics_status(lyrics_id)
        while status.status != "complete" and time.monotonic() - started < timeout:
            time.sleep(LYRICS_POLL_INTERVAL_SECONDS)
            self.refresh_token()
            status = self._lyrics_status(lyrics_id)

        if status.status != "complete":
            logger.warning("Lyrics job %s still '%s' after %.0fs", lyrics_id, status.status, timeout)

        return Lyrics(id=lyrics_id, text=status.text, title=status.title, status=status.status)

    def _lyrics_status(self, lyrics_id: str) -> LyricsStatus:
        response = self._get(f"/api/generate/lyrics/{lyrics_id}")
        self._check_response(response, "Lyrics status")
        return self._parse(LyricsStatus, response)

    # Billing

    def get_billing_info(self) -> BillingInfo:
        """Return remaining credits and usage period."""
        self.refresh_token()

        response = self._get("/api/billing/info/")
        self._check_response(response, "Billing info")
        data = self._parse(BillingPayload, response)

        return BillingInfo(
            credits_left=data.total_credits_left,
            period=data.period,
            monthly_limit=data.monthly_limit,
            monthly_usage=data.monthly_usage,
        )
