from collections.abc import Mapping, Sequence

from ..errors import RowResolutionError
from ..lastfm.track import TrackPair
from .reader import Record

ARTIST_COLUMNS = ("artist", "Artist")
TRACK_COLUMNS = ("track", "Track", "title", "Title")


def _first_present(record: Mapping[str, str], names: Sequence[str]) -> str:
    for name in names:
        value = record.get(name)
        if value:
            return value
    return ""


def resolve_track(record: Record, header: bool) -> TrackPair:
    """Pick artist and track out of a parsed CSV record.

    Header records are looked up by column name (artist; then track or title),
    plain records by position (artist first, track second).
    """
    if header and isinstance(record, Mapping):
        artist = _first_present(record, ARTIST_COLUMNS)
        track = _first_present(record, TRACK_COLUMNS)
    else:
        fields = list(record.values()) if isinstance(record, Mapping) else list(record)
        artist = fields[0] if len(fields) > 0 else ""
        track = fields[1] if len(fields) > 1 else ""

    if not artist or not track:
        raise RowResolutionError("Could not determine artist and track")
    return TrackPair(artist=artist, track=track)
