"""Local file operations for configuration."""

import json
from pathlib import Path

from suno_cli.models import Config


DEFAULT_CONFIG = Config(
    base_url="https://studio-api.prod.suno.com",
    clerk_url="https://clerk.suno.com",
    clerk_js_version="4.70.5",
    model="chirp-v3-0",
    request_timeout=10.0,
    poll_timeout=100.0,
    lyrics_timeout=60.0,
)


class Storage:
    """Manages the local configuration file."""

    def __init__(self, base_path: Path | None = None) -> None:
        self.base_path = base_path or Path.home() / ".suno"
        self.config_path = self.base_path / "config.json"
        self.credentials_path = self.base_path / "credentials.json"

    def _ensure_dirs(self) -> None:
        """Create the base directory if it doesn't exist."""
        self.base_path.mkdir(parents=True, exist_ok=True)

    def get_config(self) -> Config:
        """Load config from config.json."""
        if not self.config_path.exists():
            return DEFAULT_CONFIG

        data = json.loads(self.config_path.read_text(encoding="utf-8"))
        return Config(
            base_url=data.get("base_url", DEFAULT_CONFIG.base_url),
            clerk_url=data.get("clerk_url", DEFAULT_CONFIG.clerk_url),
            clerk_js_version=data.get("clerk_js_version", DEFAULT_CONFIG.clerk_js_version),
            model=data.get("model", DEFAULT_CONFIG.model),
            request_timeout=float(data.get("request_timeout", DEFAULT_CONFIG.request_timeout)),
            poll_timeout=float(data.get("poll_timeout", DEFAULT_CONFIG.poll_timeout)),
            lyrics_timeout=float(data.get("lyrics_timeout", DEFAULT_CONFIG.lyrics_timeout)),
        )

    def save_config(self, config: Config) -> None:
        """Save config to config.json."""
        self._ensure_dirs()
        data = {
            "base_url": config.base_url,
            "clerk_url": config.clerk_url,
            "clerk_js_version": config.clerk_js_version,
            "model": config.model,
            "request_timeout": config.request_timeout,
            "poll_timeout": config.poll_timeout,
            "lyrics_timeout": config.lyrics_timeout,
        }
        self.config_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
