"""
Extracted metadata models.

Plain data objects produced by a metadata source (see
`mediabrowser.browser.sources.MetadataSource`) and consumed when building
play queues.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class InfoType(str, Enum):
    """Kinds of info items a media ID can point at."""

    STREAM = "stream"
    PLAYLIST = "playlist"
    CHANNEL = "channel"
    COMMENT = "comment"


class StreamType(str, Enum):
    """Type of a single stream."""

    NONE = "none"
    VIDEO_STREAM = "video_stream"
    AUDIO_STREAM = "audio_stream"
    LIVE_STREAM = "live_stream"
    AUDIO_LIVE_STREAM = "audio_live_stream"
    POST_LIVE_STREAM = "post_live_stream"
    POST_LIVE_AUDIO_STREAM = "post_live_audio_stream"


class ChannelTabs:
    """Content filter names used by channel tab link handlers."""

    VIDEOS = "videos"
    TRACKS = "tracks"
    SHORTS = "shorts"
    LIVESTREAMS = "livestreams"
    CHANNELS = "channels"
    PLAYLISTS = "playlists"
    ALBUMS = "albums"
    LIKES = "likes"

    STREAM_TABS = frozenset({VIDEOS, TRACKS, SHORTS, LIVESTREAMS})


@dataclass(frozen=True)
class ListLinkHandler:
    """
    Link to a paged list on a streaming service.

    Attributes:
        original_url: URL as received
        url: Canonical URL of the list
        id: Service-specific list id
        content_filters: Filters selecting the list content, e.g. ("videos",)
        sort_filter: Optional sort order
    """

    original_url: str
    url: str
    id: str
    content_filters: tuple[str, ...] = ()
    sort_filter: str = ""


def is_streams_tab(tab: ListLinkHandler) -> bool:
    """Whether a channel tab lists playable streams (as opposed to playlists, about, ...)."""
    if not tab.content_filters:
        return False
    return tab.content_filters[0] in ChannelTabs.STREAM_TABS


@dataclass(frozen=True)
class StreamInfoItem:
    """A stream as listed inside a playlist, history or channel."""

    service_id: int
    url: str
    name: str
    stream_type: StreamType = StreamType.VIDEO_STREAM
    duration: int = -1
    thumbnail_url: Optional[str] = None
    uploader_name: Optional[str] = None
    uploader_url: Optional[str] = None
    view_count: int = -1
    textual_upload_date: Optional[str] = None


@dataclass
class StreamInfo:
    """Full metadata of a single stream."""

    service_id: int
    url: str
    id: str
    name: str
    stream_type: StreamType = StreamType.VIDEO_STREAM
    duration: int = -1
    thumbnail_url: Optional[str] = None
    uploader_name: Optional[str] = None
    uploader_url: Optional[str] = None
    view_count: int = -1

    def to_stream_info_item(self) -> StreamInfoItem:
        return StreamInfoItem(
            service_id=self.service_id,
            url=self.url,
            name=self.name,
            stream_type=self.stream_type,
            duration=self.duration,
            thumbnail_url=self.thumbnail_url,
            uploader_name=self.uploader_name,
            uploader_url=self.uploader_url,
            view_count=self.view_count,
        )


@dataclass
class PlaylistInfo:
    """
    Metadata of a playlist with its first page of items.

    Attributes:
        related_items: Streams that were extracted successfully
        next_page: Opaque token for the next page, None when complete
        errors: Exceptions raised while extracting individual items
    """

    service_id: int
    url: str
    id: str
    name: str
    related_items: list[StreamInfoItem] = field(default_factory=list)
    next_page: Optional[Any] = None
    uploader_name: Optional[str] = None
    thumbnail_url: Optional[str] = None
    stream_count: int = -1
    errors: list[Exception] = field(default_factory=list)

    @property
    def has_next_page(self) -> bool:
        return self.next_page is not None


@dataclass
class ChannelInfo:
    """Metadata of a channel and the tabs it exposes."""

    service_id: int
    url: str
    id: str
    name: str
    tabs: list[ListLinkHandler] = field(default_factory=list)
    avatar_url: Optional[str] = None
    subscriber_count: int = -1
    description: Optional[str] = None
