"""
mediabrowser Database Models

SQLAlchemy models for:
- Streams
- Local playlists and their entries
- Bookmarked remote playlists
- Watch history
"""

from mediabrowser.database.models.base import Base
from mediabrowser.database.models.history import StreamHistoryEntity
from mediabrowser.database.models.playlist import (
    PlaylistEntity,
    PlaylistRemoteEntity,
    PlaylistStreamEntity,
)
from mediabrowser.database.models.stream import StreamEntity

__all__ = [
    "Base",
    "PlaylistEntity",
    "PlaylistRemoteEntity",
    "PlaylistStreamEntity",
    "StreamEntity",
    "StreamHistoryEntity",
]
