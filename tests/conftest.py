import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from scrobble_me_this.errors import SubmissionError  # noqa: E402

LASTFM_ENV = ("LASTFM_API_KEY", "LASTFM_API_SECRET", "LASTFM_USERNAME", "LASTFM_PASSWORD", "LOG_LEVEL", "LASTFM_TIMEOUT")


class FakeResponse:
    def __init__(self, payload, status_code: int = 200):
        self._payload = payload
        self.status_code = status_code

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class FakeSession:
    """Stands in for requests.Session, replaying canned JSON payloads."""

    def __init__(self, *payloads):
        self.payloads = list(payloads)
        self.calls = []
        self.headers = {}

    def post(self, url, data=None, timeout=None):
        self.calls.append({"url": url, "data": data, "timeout": timeout})
        item = self.payloads.pop(0)
        if isinstance(item, Exception):
            raise item
        if isinstance(item, FakeResponse):
            return item
        return FakeResponse(item)


class FakeClient:
    """LastFmClient double: authentication succeeds, submissions fail on chosen calls."""

    def __init__(self, session_key="sk-123", fail_on=(), auth_error=None, submit_error=None):
        self.session_key = session_key
        self.fail_on = set(fail_on)
        self.submit_error = submit_error
        self.auth_error = auth_error
        self.auth_calls = []
        self.scrobbles = []

    def get_mobile_session(self, username, password):
        self.auth_calls.append((username, password))
        if self.auth_error is not None:
            raise self.auth_error
        return self.session_key

    def scrobble(self, session_key, artist, track, timestamp):
        self.scrobbles.append((session_key, artist, track, timestamp))
        if len(self.scrobbles) in self.fail_on:
            if self.submit_error is not None:
                raise self.submit_error
            raise SubmissionError("Last.fm scrobbling error: Invalid parameters", {"error": 6, "message": "Invalid parameters"})
        return {"scrobbles": {"@attr": {"accepted": 1, "ignored": 0}}}


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture(autouse=True)
def _no_lastfm_env(monkeypatch):
    for name in LASTFM_ENV:
        monkeypatch.delenv(name, raising=False)
    yield
    # load_dotenv writes straight into os.environ
    for name in LASTFM_ENV:
        os.environ.pop(name, None)
