"""
Local database: streams, playlists, bookmarks and watch history.
"""

from mediabrowser.database.connection import (
    close_db,
    create_engine_for_url,
    create_session_factory,
    create_tables,
    get_session,
    init_db,
)
from mediabrowser.database.managers import (
    LocalPlaylistManager,
    RemotePlaylistManager,
    StreamHistoryManager,
)

__all__ = [
    "close_db",
    "create_engine_for_url",
    "create_session_factory",
    "create_tables",
    "get_session",
    "init_db",
    "LocalPlaylistManager",
    "RemotePlaylistManager",
    "StreamHistoryManager",
]
