from __future__ import annotations

import logging
from typing import TextIO

from .config import Settings
from .csvinput import parse_records, read_input
from .lastfm import LastFmClient
from .scrobbler import ScrobbleSummary, scrobble_records

log = logging.getLogger(__name__)


def run(settings: Settings, client: LastFmClient | None = None, stdin: TextIO | None = None) -> ScrobbleSummary:
    """Authenticate, read the CSV and scrobble every row.

    Authentication, read and parse failures propagate before any row is
    submitted; per-row failures only show up in the returned summary.
    """
    if client is None:
        client = LastFmClient(settings.api_key, settings.api_secret, timeout=settings.request_timeout)

    log.info("Authenticating with Last.fm...")
    session_key = client.get_mobile_session(settings.username, settings.password)
    log.info("Authentication successful")

    text = read_input(settings.input_path, stdin)
    records = parse_records(text, settings.delimiter, settings.header)
    log.info("Found %d tracks to scrobble", len(records))

    return scrobble_records(
        client,
        session_key,
        records,
        settings.header,
        interval=settings.scrobble_interval,
        delay=settings.success_delay,
    )
