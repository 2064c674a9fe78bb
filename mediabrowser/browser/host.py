"""
Interface between the playback preparer and the media session host.

The host owns the media session (error state shown to the user) and the
player. The preparer reaches it only through `PlaybackHost`.
"""

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Callable, Protocol

from mediabrowser.playqueue import PlayQueue


class ErrorCode(IntEnum):
    """Media session error codes reported with an error message."""

    APP_ERROR = 1
    NOT_SUPPORTED = 2


class PlaybackAction(IntFlag):
    """Media session play actions; the preparer declares only media IDs."""

    PLAY_FROM_MEDIA_ID = 1 << 10
    PLAY_FROM_SEARCH = 1 << 11
    PLAY_FROM_URI = 1 << 13


class PlaybackHost(Protocol):
    """Callbacks the preparer invokes on the media session host."""

    def set_error(self, message: str, code: ErrorCode) -> None: ...

    def clear_error(self) -> None: ...

    def start_playback(self, queue: PlayQueue, play_when_ready: bool) -> None: ...

    def prepare(self, play_when_ready: bool) -> None: ...


@dataclass
class CallbackHost:
    """
    PlaybackHost assembled from plain callables.

    Attributes:
        set_error: Called with the error message and code
        clear_error: Resets the session error state
        start_playback: Hands a queue to the player
        prepare: Generic prepare without a media ID, e.g. player.prepare()
    """

    set_error: Callable[[str, ErrorCode], None]
    clear_error: Callable[[], None]
    start_playback: Callable[[PlayQueue, bool], None]
    prepare: Callable[[bool], None]
