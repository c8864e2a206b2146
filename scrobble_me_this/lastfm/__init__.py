from .client import LASTFM_API_URL, LastFmClient
from .signature import api_signature, md5_hex
from .track import TrackPair

__all__ = [
    "LASTFM_API_URL",
    "LastFmClient",
    "TrackPair",
    "api_signature",
    "md5_hex",
]
