"""
Data sources the playback preparer reads from.

The database managers in `mediabrowser.database` and
`mediabrowser.extractor.YtDlpMetadataService` implement these protocols.
"""

from dataclasses import dataclass
from typing import Protocol

from mediabrowser.extractor.models import ChannelInfo, PlaylistInfo, StreamInfo, StreamInfoItem


@dataclass(frozen=True)
class RemotePlaylist:
    """A bookmarked playlist of a streaming service."""

    playlist_id: int
    service_id: int
    url: str
    name: str = ""


@dataclass(frozen=True)
class HistoryEntry:
    """One watch history entry."""

    stream_id: int
    item: StreamInfoItem


class LocalPlaylistSource(Protocol):
    async def get_playlist_streams(self, playlist_id: int) -> list[StreamInfoItem]: ...


class RemotePlaylistSource(Protocol):
    async def get_playlist(self, playlist_id: int) -> RemotePlaylist: ...


class HistorySource(Protocol):
    async def get_history(self) -> list[HistoryEntry]: ...


class MetadataSource(Protocol):
    async def get_stream_info(self, service_id: int, url: str) -> StreamInfo: ...

    async def get_playlist_info(self, service_id: int, url: str) -> PlaylistInfo: ...

    async def get_channel_info(self, service_id: int, url: str) -> ChannelInfo: ...
