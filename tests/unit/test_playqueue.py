"""
Unit tests for play queues.
"""

import dataclasses

import pytest

from mediabrowser.extractor import ChannelTabs, StreamType
from mediabrowser.playqueue import (
    ChannelTabPlayQueue,
    PlaylistPlayQueue,
    PlayQueueItem,
    SinglePlayQueue,
)
from tests.fixtures import (
    ChannelInfoFactory,
    PlaylistInfoFactory,
    StreamInfoFactory,
    StreamInfoItemFactory,
)


@pytest.mark.unit
class TestPlayQueueItem:
    """Tests for PlayQueueItem."""

    def test_from_stream_info_item(self):
        stream = StreamInfoItemFactory.create(
            name="Song",
            service_id=1,
            stream_type=StreamType.AUDIO_STREAM,
            duration=240,
            uploader_name="Artist",
        )

        item = PlayQueueItem.from_stream_info_item(stream)

        assert item.service_id == 1
        assert item.url == stream.url
        assert item.title == "Song"
        assert item.stream_type == StreamType.AUDIO_STREAM
        assert item.duration == 240
        assert item.uploader == "Artist"

    def test_from_stream_info(self):
        info = StreamInfoFactory.create(url="https://www.youtube.com/watch?v=abc", duration=60)

        item = PlayQueueItem.from_stream_info(info)

        assert item.url == "https://www.youtube.com/watch?v=abc"
        assert item.title == info.name
        assert item.duration == 60


@pytest.mark.unit
class TestSinglePlayQueue:
    """Tests for SinglePlayQueue."""

    def test_of_items(self):
        streams = StreamInfoItemFactory.create_batch(3)

        queue = SinglePlayQueue.of(streams, index=1)

        assert len(queue) == 3
        assert queue.index == 1
        assert queue.item.url == streams[1].url
        assert queue.is_complete

    def test_of_stream_info(self):
        queue = SinglePlayQueue.of(StreamInfoFactory.create())

        assert len(queue) == 1
        assert queue.index == 0

    def test_index_is_not_clamped(self):
        queue = SinglePlayQueue.of(StreamInfoItemFactory.create_batch(2), index=5)

        assert queue.index == 5
        assert queue.item is None

    def test_empty(self):
        queue = SinglePlayQueue.of([])

        assert len(queue) == 0
        assert queue.item is None

    def test_queue_is_immutable(self):
        queue = SinglePlayQueue.of(StreamInfoItemFactory.create_batch(1))

        with pytest.raises(dataclasses.FrozenInstanceError):
            queue.index = 3
        assert isinstance(queue.items, tuple)


@pytest.mark.unit
class TestPlaylistPlayQueue:
    """Tests for PlaylistPlayQueue."""

    def test_from_info(self):
        info = PlaylistInfoFactory.create(item_count=4, service_id=3)

        queue = PlaylistPlayQueue.from_info(info, index=2)

        assert len(queue) == 4
        assert queue.index == 2
        assert queue.service_id == 3
        assert queue.url == info.url
        assert queue.is_complete

    def test_next_page_makes_queue_incomplete(self):
        queue = PlaylistPlayQueue.from_info(PlaylistInfoFactory.create(next_page={"page": 2}))

        assert queue.next_page == {"page": 2}
        assert not queue.is_complete


@pytest.mark.unit
class TestChannelTabPlayQueue:
    """Tests for ChannelTabPlayQueue."""

    def test_for_tab(self):
        tab = ChannelInfoFactory.tab(ChannelTabs.VIDEOS, "https://www.youtube.com/@creator")

        queue = ChannelTabPlayQueue.for_tab(0, tab)

        assert queue.service_id == 0
        assert queue.link_handler is tab
        assert queue.url == "https://www.youtube.com/@creator/videos"
        assert len(queue) == 0
        assert not queue.is_complete
