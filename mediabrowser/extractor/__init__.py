"""
Metadata extraction for streams, playlists and channels.
"""

from mediabrowser.extractor.exceptions import ContentNotAvailableError, ExtractionError
from mediabrowser.extractor.models import (
    ChannelInfo,
    ChannelTabs,
    InfoType,
    ListLinkHandler,
    PlaylistInfo,
    StreamInfo,
    StreamInfoItem,
    StreamType,
    is_streams_tab,
)
from mediabrowser.extractor.services import StreamingService
from mediabrowser.extractor.ytdlp_service import YtDlpMetadataService

__all__ = [
    # Errors
    "ContentNotAvailableError",
    "ExtractionError",
    # Models
    "ChannelInfo",
    "ChannelTabs",
    "InfoType",
    "ListLinkHandler",
    "PlaylistInfo",
    "StreamInfo",
    "StreamInfoItem",
    "StreamType",
    "is_streams_tab",
    # Services
    "StreamingService",
    "YtDlpMetadataService",
]
