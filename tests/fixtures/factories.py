"""
Test Data Factories

Factory classes for generating extracted metadata test data.
"""

import random
import string
from typing import List, Optional

from mediabrowser.extractor.models import (
    ChannelInfo,
    ChannelTabs,
    ListLinkHandler,
    PlaylistInfo,
    StreamInfo,
    StreamInfoItem,
    StreamType,
)


class BaseFactory:
    """Base factory class."""

    _counter = 0

    @classmethod
    def _next_id(cls) -> int:
        BaseFactory._counter += 1
        return BaseFactory._counter

    @classmethod
    def _random_string(cls, length: int = 8) -> str:
        return ''.join(random.choices(string.ascii_letters, k=length))


class StreamInfoItemFactory(BaseFactory):
    """Factory for creating StreamInfoItem test instances."""

    @classmethod
    def create(
        cls,
        name: Optional[str] = None,
        service_id: int = 0,
        **kwargs
    ) -> StreamInfoItem:
        """Create a StreamInfoItem instance."""
        number = cls._next_id()
        return StreamInfoItem(
            service_id=service_id,
            url=kwargs.get("url", f"https://www.youtube.com/watch?v=video{number:05d}"),
            name=name or f"Test Stream {number}",
            stream_type=kwargs.get("stream_type", StreamType.VIDEO_STREAM),
            duration=kwargs.get("duration", 180),
            uploader_name=kwargs.get("uploader_name", "Test Uploader"),
        )

    @classmethod
    def create_batch(cls, count: int, **kwargs) -> List[StreamInfoItem]:
        """Create multiple StreamInfoItem instances."""
        return [cls.create(**kwargs) for _ in range(count)]


class StreamInfoFactory(BaseFactory):
    """Factory for creating StreamInfo test instances."""

    @classmethod
    def create(cls, url: Optional[str] = None, service_id: int = 0, **kwargs) -> StreamInfo:
        number = cls._next_id()
        return StreamInfo(
            service_id=service_id,
            url=url or f"https://www.youtube.com/watch?v=video{number:05d}",
            id=f"video{number:05d}",
            name=kwargs.get("name", f"Test Video {cls._random_string()}"),
            stream_type=kwargs.get("stream_type", StreamType.VIDEO_STREAM),
            duration=kwargs.get("duration", 300),
        )


class PlaylistInfoFactory(BaseFactory):
    """Factory for creating PlaylistInfo test instances."""

    @classmethod
    def create(
        cls,
        item_count: int = 3,
        url: Optional[str] = None,
        service_id: int = 0,
        **kwargs
    ) -> PlaylistInfo:
        number = cls._next_id()
        return PlaylistInfo(
            service_id=service_id,
            url=url or f"https://www.youtube.com/playlist?list=PL{number:05d}",
            id=f"PL{number:05d}",
            name=kwargs.get("name", f"Test Playlist {number}"),
            related_items=StreamInfoItemFactory.create_batch(item_count, service_id=service_id),
            next_page=kwargs.get("next_page"),
            errors=kwargs.get("errors", []),
        )


class ChannelInfoFactory(BaseFactory):
    """Factory for creating ChannelInfo test instances."""

    @classmethod
    def tab(cls, content_filter: str, channel_url: str = "https://www.youtube.com/@test") -> ListLinkHandler:
        tab_url = f"{channel_url}/{content_filter}"
        return ListLinkHandler(
            original_url=tab_url,
            url=tab_url,
            id="UCtest",
            content_filters=(content_filter,),
        )

    @classmethod
    def create(
        cls,
        tab_filters: tuple = (ChannelTabs.VIDEOS, ChannelTabs.PLAYLISTS),
        url: str = "https://www.youtube.com/@test",
        service_id: int = 0,
    ) -> ChannelInfo:
        return ChannelInfo(
            service_id=service_id,
            url=url,
            id="UCtest",
            name=f"Test Channel {cls._random_string()}",
            tabs=[cls.tab(content_filter, url) for content_filter in tab_filters],
        )
