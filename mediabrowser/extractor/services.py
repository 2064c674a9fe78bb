"""Streaming services known to the extractor, keyed by their numeric service id."""

from enum import IntEnum


class StreamingService(IntEnum):
    """Numeric service ids as they appear in media IDs and stored playlists."""

    YOUTUBE = 0
    SOUNDCLOUD = 1
    MEDIA_CCC = 2
    PEERTUBE = 3
    BANDCAMP = 4

    @property
    def is_audio_only(self) -> bool:
        """Services whose channels publish tracks rather than videos."""
        return self in (StreamingService.SOUNDCLOUD, StreamingService.BANDCAMP)
