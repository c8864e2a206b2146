from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .csvinput import Record, resolve_track
from .errors import RowResolutionError, ServiceError, SubmissionError
from .lastfm.track import TrackPair

if TYPE_CHECKING:
    from .lastfm.client import LastFmClient

log = logging.getLogger(__name__)

SCROBBLE_INTERVAL = 30
SUCCESS_DELAY = 0.2


@dataclass(frozen=True, slots=True)
class ScrobbleOutcome:
    """Result of processing one CSV line."""

    line: int
    pair: TrackPair | None
    ok: bool
    error: str | None = None
    timestamp: int | None = None


@dataclass
class ScrobbleSummary:
    successful: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return self.successful + self.failed

    def record(self, outcome: ScrobbleOutcome) -> None:
        if outcome.ok:
            self.successful += 1
        else:
            self.failed += 1

    def __str__(self) -> str:
        return f"{self.successful} successful, {self.failed} failed"


def scrobble_timestamp(now: float, index: int, total: int, interval: int = SCROBBLE_INTERVAL) -> int:
    """Back-date row ``index`` of ``total`` so rows end up ``interval`` seconds apart, all in the past."""
    return int(now) - (total - index) * interval


def scrobble_records(
    client: LastFmClient,
    session_key: str,
    records: Sequence[Record],
    header: bool,
    *,
    interval: int = SCROBBLE_INTERVAL,
    delay: float = SUCCESS_DELAY,
    clock: Callable[[], float] | None = None,
    sleep: Callable[[float], None] | None = None,
    on_outcome: Callable[[ScrobbleOutcome], None] | None = None,
) -> ScrobbleSummary:
    """Scrobble every record in order, one request at a time.

    A bad row or a rejected submission is logged and counted; the loop always
    runs to the end. ``delay`` is slept only after a successful submission.
    """
    clock = clock or time.time
    sleep = sleep or time.sleep
    summary = ScrobbleSummary()
    total = len(records)

    for index, record in enumerate(records):
        line = index + 1

        try:
            pair = resolve_track(record, header)
        except RowResolutionError as e:
            log.error("Could not determine artist and track from line %d", line)
            outcome = ScrobbleOutcome(line=line, pair=None, ok=False, error=e.message)
            summary.record(outcome)
            if on_outcome:
                on_outcome(outcome)
            continue

        timestamp = scrobble_timestamp(clock(), index, total, interval)
        try:
            client.scrobble(session_key, pair.artist, pair.track, timestamp)
        except (SubmissionError, ServiceError) as e:
            log.error('Error scrobbling "%s": %s', pair, e.message)
            outcome = ScrobbleOutcome(line=line, pair=pair, ok=False, error=e.message, timestamp=timestamp)
        else:
            log.info("Scrobbled: %s", pair)
            outcome = ScrobbleOutcome(line=line, pair=pair, ok=True, timestamp=timestamp)

        summary.record(outcome)
        if on_outcome:
            on_outcome(outcome)

        if outcome.ok:
            sleep(delay)

    log.info("Scrobbling complete: %s", summary)
    return summary
