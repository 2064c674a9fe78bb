"""
Test Fixtures

Shared test data factories.
"""

from .factories import (
    ChannelInfoFactory,
    PlaylistInfoFactory,
    StreamInfoFactory,
    StreamInfoItemFactory,
)

__all__ = [
    "ChannelInfoFactory",
    "PlaylistInfoFactory",
    "StreamInfoFactory",
    "StreamInfoItemFactory",
]
