from .reader import Record, parse_records, read_input
from .resolver import resolve_track

__all__ = [
    "Record",
    "parse_records",
    "read_input",
    "resolve_track",
]
