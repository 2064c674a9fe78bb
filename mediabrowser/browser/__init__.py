"""
Media browser playback preparation.

Components:
- media_ids: Media ID grammar (parsing and building)
- PlaybackPreparer: Resolves media IDs into play queues, one at a time
- PlaybackHost / CallbackHost: Callbacks into the media session host
- sources: Data source protocols the preparer reads from
"""

from mediabrowser.browser.host import CallbackHost, ErrorCode, PlaybackAction, PlaybackHost
from mediabrowser.browser.media_ids import (
    HistoryRequest,
    InfoItemRequest,
    LocalPlaylistRequest,
    MalformedMediaIdError,
    MediaIdError,
    MediaIdRequest,
    PlaylistUrlRequest,
    RemotePlaylistRequest,
    UnsupportedMediaIdError,
    build_media_id,
    history_media_id,
    info_item_media_id,
    local_playlist_media_id,
    parse_media_id,
    playlist_url_media_id,
    remote_playlist_media_id,
)
from mediabrowser.browser.preparer import PlaybackPreparer
from mediabrowser.browser.sources import (
    HistoryEntry,
    HistorySource,
    LocalPlaylistSource,
    MetadataSource,
    RemotePlaylist,
    RemotePlaylistSource,
)

__all__ = [
    # Host
    "CallbackHost",
    "ErrorCode",
    "PlaybackAction",
    "PlaybackHost",
    # Media IDs
    "HistoryRequest",
    "InfoItemRequest",
    "LocalPlaylistRequest",
    "MalformedMediaIdError",
    "MediaIdError",
    "MediaIdRequest",
    "PlaylistUrlRequest",
    "RemotePlaylistRequest",
    "UnsupportedMediaIdError",
    "build_media_id",
    "history_media_id",
    "info_item_media_id",
    "local_playlist_media_id",
    "parse_media_id",
    "playlist_url_media_id",
    "remote_playlist_media_id",
    # Preparer
    "PlaybackPreparer",
    # Sources
    "HistoryEntry",
    "HistorySource",
    "LocalPlaylistSource",
    "MetadataSource",
    "RemotePlaylist",
    "RemotePlaylistSource",
]
