"""Session manager for coordinating Suno authentication."""

from suno_cli.client import SunoClient
from suno_cli.cookies import get_cookie
from suno_cli.exceptions import CookieError
from suno_cli.models import Config
from suno_cli.storage import Storage


def new_client(cookie: str, config: Config | None = None) -> SunoClient:
    """Create and initialize a client owned by the caller."""
    client = SunoClient(cookie, config)
    try:
        return client.init()
    except Exception:
        client.close()
        raise


class SessionManager:
    """Coordinates authentication and lazily provides an authenticated Suno client."""

    def __init__(self, storage: Storage | None = None) -> None:
        self._storage = storage or Storage()
        self._client: SunoClient | None = None

    def get_client(self) -> SunoClient:
        """Return the authenticated client, creating it on first use."""
        if self._client is not None:
            return self._client

        config = self._storage.get_config()

        try:
            cookie = get_cookie(self._storage.credentials_path)
        except CookieError as e:
            raise CookieError(f"Failed to load Suno cookie: {e.message}") from e

        self._client = new_client(cookie, config)
        return self._client

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
