"""API token storage.

The pipeline never reads stored tokens itself; callers resolve a token and
pass it in. Stores only offer get/set.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol


LOGGER = logging.getLogger(__name__)

TOKEN_KEY = "wanikani_api_token"


class TokenStore(Protocol):
    def get(self) -> str | None: ...

    def set(self, token: str) -> None: ...


class MemoryTokenStore:
    def __init__(self, token: str | None = None) -> None:
        self._token = token

    def get(self) -> str | None:
        return self._token

    def set(self, token: str) -> None:
        self._token = token


class FileTokenStore:
    """Persist the token in a small JSON file under the user's config dir."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path).expanduser()

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            LOGGER.warning("Ignoring unreadable token file %s (%s)", self.path, exc)
            return {}
        return payload if isinstance(payload, dict) else {}

    def get(self) -> str | None:
        token = self._read().get(TOKEN_KEY)
        return str(token) if token else None

    def set(self, token: str) -> None:
        if not token:
            return
        payload = self._read()
        payload[TOKEN_KEY] = token
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        LOGGER.info("Saved API token to %s", self.path)


def resolve_token(explicit: str | None, env_value: str | None, store: TokenStore) -> str:
    """Pick the first non-empty of explicit, env and stored token.

    An explicit or env token is written back to ``store``.
    """

    for candidate in (explicit, env_value):
        if candidate and candidate.strip():
            token = candidate.strip()
            if token != store.get():
                store.set(token)
            return token
    return (store.get() or "").strip()
