"""
mediabrowser - Media browser playback preparer

Turns the media IDs published to an in-car / voice media browsing surface
into play queues:
- Local and bookmarked remote playlists
- Watch history entries
- Streams, playlists and channels extracted on demand
"""

__version__ = "0.1.0"
__license__ = "MIT"

from mediabrowser.config import get_config, load_config

__all__ = [
    "__version__",
    "get_config",
    "load_config",
]
