"""
Play queues handed to the playback pipeline.

A play queue is an ordered, immutable list of items plus the index playback
starts at. Queues are built once by the playback preparer and then owned by
the playback pipeline.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Union

from mediabrowser.extractor.models import (
    ListLinkHandler,
    PlaylistInfo,
    StreamInfo,
    StreamInfoItem,
    StreamType,
)


@dataclass(frozen=True)
class PlayQueueItem:
    """A single playable entry of a play queue."""

    service_id: int
    url: str
    title: str
    stream_type: StreamType
    duration: int = -1
    thumbnail_url: Optional[str] = None
    uploader: Optional[str] = None
    uploader_url: Optional[str] = None

    @classmethod
    def from_stream_info_item(cls, item: StreamInfoItem) -> "PlayQueueItem":
        return cls(
            service_id=item.service_id,
            url=item.url,
            title=item.name,
            stream_type=item.stream_type,
            duration=item.duration,
            thumbnail_url=item.thumbnail_url,
            uploader=item.uploader_name,
            uploader_url=item.uploader_url,
        )

    @classmethod
    def from_stream_info(cls, info: StreamInfo) -> "PlayQueueItem":
        return cls.from_stream_info_item(info.to_stream_info_item())


@dataclass(frozen=True)
class PlayQueue:
    """
    Base play queue.

    Attributes:
        items: Entries in playback order
        index: Zero-based index playback starts at. Not clamped to the
            number of items; the playback pipeline decides what an
            out-of-range index means.
    """

    items: tuple[PlayQueueItem, ...] = ()
    index: int = 0

    def __len__(self) -> int:
        return len(self.items)

    @property
    def is_complete(self) -> bool:
        """Whether all items are known up front."""
        return True

    @property
    def item(self) -> Optional[PlayQueueItem]:
        """Item at the start index, if it exists."""
        if 0 <= self.index < len(self.items):
            return self.items[self.index]
        return None


@dataclass(frozen=True)
class SinglePlayQueue(PlayQueue):
    """Play queue over a fixed list of streams."""

    @classmethod
    def of(
        cls,
        streams: Union[StreamInfo, Iterable[StreamInfoItem]],
        index: int = 0,
    ) -> "SinglePlayQueue":
        """
        Build a queue from a single stream or a list of stream items.

        Args:
            streams: A StreamInfo, or stream items in playback order
            index: Start index
        """
        if isinstance(streams, StreamInfo):
            return cls(items=(PlayQueueItem.from_stream_info(streams),), index=index)
        return cls(
            items=tuple(PlayQueueItem.from_stream_info_item(item) for item in streams),
            index=index,
        )


@dataclass(frozen=True)
class PlaylistPlayQueue(PlayQueue):
    """
    Play queue over an extracted playlist.

    Keeps service id, url and next-page token so the playback pipeline can
    fetch further pages.
    """

    service_id: int = -1
    url: str = ""
    next_page: Optional[Any] = None

    @classmethod
    def from_info(cls, info: PlaylistInfo, index: int = 0) -> "PlaylistPlayQueue":
        return cls(
            items=tuple(PlayQueueItem.from_stream_info_item(item) for item in info.related_items),
            index=index,
            service_id=info.service_id,
            url=info.url,
            next_page=info.next_page,
        )

    @property
    def is_complete(self) -> bool:
        return self.next_page is None


@dataclass(frozen=True)
class ChannelTabPlayQueue(PlayQueue):
    """
    Lazy play queue over a channel tab.

    Starts without items; the playback pipeline fetches pages of the tab
    referenced by `link_handler`.
    """

    service_id: int = -1
    link_handler: ListLinkHandler = field(
        default_factory=lambda: ListLinkHandler(original_url="", url="", id="")
    )

    @classmethod
    def for_tab(cls, service_id: int, link_handler: ListLinkHandler) -> "ChannelTabPlayQueue":
        return cls(service_id=service_id, link_handler=link_handler)

    @property
    def url(self) -> str:
        return self.link_handler.url

    @property
    def is_complete(self) -> bool:
        return False
