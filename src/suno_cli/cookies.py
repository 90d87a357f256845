"""Resolve the raw Suno session cookie from the environment or a credentials file."""

import json
import os
from pathlib import Path

from suno_cli.exceptions import CookieError

# Path to manual credentials file
CREDENTIALS_FILE = Path.home() / ".suno" / "credentials.json"

SETUP_HINT = (
    "To set up, export SUNO_COOKIE or create ~/.suno/credentials.json:\n"
    "{\n"
    '  "cookie": "__client=...; __client_uat=..."\n'
    "}\n\n"
    "Copy the Cookie request header from DevTools (F12) → Network on suno.com"
)


def _read_credentials_file(path: Path) -> str | None:
    if not path.exists():
        return None

    try:
        with open(path, "r") as f:
            creds = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        raise CookieError(f"Cannot read {path}: {e}\n\n{SETUP_HINT}") from e

    cookie = creds.get("cookie") if isinstance(creds, dict) else None
    return cookie.strip() if cookie else None


def get_cookie(credentials_path: Path = CREDENTIALS_FILE) -> str:
    """Return the raw cookie header value, preferring SUNO_COOKIE over the credentials file."""
    cookie = os.environ.get("SUNO_COOKIE", "").strip()
    if cookie:
        return cookie

    cookie = _read_credentials_file(credentials_path)
    if cookie:
        return cookie

    raise CookieError(f"No Suno cookie configured.\n\n{SETUP_HINT}")
