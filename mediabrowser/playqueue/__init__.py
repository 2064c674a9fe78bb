"""
Play queues built by the playback preparer.
"""

from mediabrowser.playqueue.queues import (
    ChannelTabPlayQueue,
    PlaylistPlayQueue,
    PlayQueue,
    PlayQueueItem,
    SinglePlayQueue,
)

__all__ = [
    "ChannelTabPlayQueue",
    "PlaylistPlayQueue",
    "PlayQueue",
    "PlayQueueItem",
    "SinglePlayQueue",
]
