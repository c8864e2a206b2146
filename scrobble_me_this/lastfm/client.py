from __future__ import annotations

import logging
from typing import Any

import requests

from ..errors import AuthenticationError, ServiceError, SubmissionError
from .signature import api_signature, md5_hex

log = logging.getLogger(__name__)

LASTFM_API_URL = "https://ws.audioscrobbler.com/2.0/"
USER_AGENT = "scrobble-me-this/1.0 (+https://www.last.fm/api)"

_REDACTED_KEYS = {"api_sig", "sk", "authtoken"}


def _redacted(params: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in params.items() if k.lower() not in _REDACTED_KEYS}


class LastFmClient:
    """Signed write access to the Last.fm API.

    Every call is a single POST; nothing is retried.
    """

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ):
        self.api_key = api_key
        self.api_secret = api_secret
        self.timeout = timeout
        if session is None:
            session = requests.Session()
            session.headers.update({"User-Agent": USER_AGENT})
        self.session = session

    def _post(self, params: dict[str, Any]) -> dict[str, Any]:
        """Sign params, POST them form-encoded and decode the JSON reply."""
        body = dict(params)
        body["api_sig"] = api_signature(body, self.api_secret)
        body["format"] = "json"

        log.debug("POST %s %s", params.get("method"), _redacted(body))
        try:
            resp = self.session.post(LASTFM_API_URL, data=body, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise ServiceError(f"Request to Last.fm failed: {e}") from e

        try:
            data = resp.json()
        except ValueError as e:
            raise ServiceError(f"Invalid response from Last.fm (HTTP {resp.status_code})") from e

        log.debug("Response %d: %s", resp.status_code, data)
        if not isinstance(data, dict):
            raise ServiceError(f"Unexpected response from Last.fm: {data!r}")
        return data

    def get_mobile_session(self, username: str, password: str) -> str:
        """Exchange username/password for a session key (auth.getMobileSession)."""
        data = self._post(
            {
                "api_key": self.api_key,
                "method": "auth.getMobileSession",
                "username": username,
                "authToken": md5_hex(username + md5_hex(password)),
            }
        )

        if data.get("error"):
            raise AuthenticationError(f"Last.fm authentication error: {data.get('message')}", data)

        key = (data.get("session") or {}).get("key")
        if not key:
            raise AuthenticationError("Last.fm authentication error: no session key in response", data)
        return key

    def scrobble(self, session_key: str, artist: str, track: str, timestamp: int) -> dict[str, Any]:
        """Submit a single track.scrobble and return the decoded payload."""
        data = self._post(
            {
                "method": "track.scrobble",
                "api_key": self.api_key,
                "sk": session_key,
                "artist": artist,
                "track": track,
                "timestamp": timestamp,
            }
        )

        if data.get("error"):
            raise SubmissionError(f"Last.fm scrobbling error: {data.get('message')}", data)
        return data
