from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TrackPair:
    """An (artist, track) pair ready to be scrobbled."""

    artist: str
    track: str

    def __str__(self) -> str:
        return f"{self.artist} - {self.track}"
