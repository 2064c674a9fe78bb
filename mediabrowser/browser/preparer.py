"""
Playback preparer for the media browser.

Receives the media IDs generated for the media browser and starts playback
of the corresponding streams or playlists. The media session host calls the
`prepare_*` entry points; results and errors flow back through the
`PlaybackHost` it was created with.
"""

import asyncio
import logging
from typing import Any, Optional

from mediabrowser.browser.host import ErrorCode, PlaybackAction, PlaybackHost
from mediabrowser.browser.media_ids import (
    HistoryRequest,
    InfoItemRequest,
    LocalPlaylistRequest,
    MediaIdRequest,
    PlaylistUrlRequest,
    RemotePlaylistRequest,
    UnsupportedMediaIdError,
    parse_media_id,
)
from mediabrowser.browser.sources import (
    HistorySource,
    LocalPlaylistSource,
    MetadataSource,
    RemotePlaylistSource,
)
from mediabrowser.config import PreparerConfig, get_config
from mediabrowser.extractor.exceptions import ContentNotAvailableError
from mediabrowser.extractor.models import InfoType, is_streams_tab
from mediabrowser.playqueue import (
    ChannelTabPlayQueue,
    PlaylistPlayQueue,
    PlayQueue,
    SinglePlayQueue,
)

logger = logging.getLogger(__name__)


class PlaybackPreparer:
    """
    Resolves media IDs into play queues and hands them to the host.

    At most one resolution is outstanding: a new `prepare_from_media_id`
    cancels the previous one, whose callbacks then never fire. The entry
    points must be called from the host's event loop; host callbacks run
    on that loop, while database and extraction I/O run in worker threads.

    Usage:
        preparer = PlaybackPreparer(host, local, remote, history, metadata)
        preparer.prepare_from_media_id("bookmarks/local/3/0", play_when_ready=True)
        ...
        preparer.dispose()
    """

    def __init__(
        self,
        host: PlaybackHost,
        local_playlists: LocalPlaylistSource,
        remote_playlists: RemotePlaylistSource,
        history: HistorySource,
        metadata: MetadataSource,
        preparer_config: Optional[PreparerConfig] = None,
    ):
        self._host = host
        self._local_playlists = local_playlists
        self._remote_playlists = remote_playlists
        self._history = history
        self._metadata = metadata
        self._config = preparer_config or get_config().preparer
        self._task: Optional[asyncio.Task] = None

    def dispose(self) -> None:
        """Cancel the outstanding resolution, if any."""
        self._cancel_pending()

    # ============ Media session entry points ============

    def get_supported_prepare_actions(self) -> PlaybackAction:
        return PlaybackAction.PLAY_FROM_MEDIA_ID

    def prepare(self, play_when_ready: bool) -> None:
        self._host.prepare(play_when_ready)

    def prepare_from_media_id(
        self,
        media_id: str,
        play_when_ready: bool,
        extras: Optional[dict[str, Any]] = None,
    ) -> asyncio.Task:
        """
        Start resolving a media ID, superseding any resolution in progress.

        Args:
            media_id: Media ID picked in the media browser
            play_when_ready: Start playing as soon as the queue is loaded
            extras: Session extras, unused

        Returns:
            The task performing the resolution
        """
        logger.debug(f"prepare_from_media_id({media_id}, {play_when_ready}, {extras})")

        self._cancel_pending()
        self._task = asyncio.get_running_loop().create_task(
            self._prepare_from_media_id(media_id, play_when_ready)
        )
        return self._task

    def prepare_from_search(
        self,
        query: str,
        play_when_ready: bool,
        extras: Optional[dict[str, Any]] = None,
    ) -> None:
        self._on_unsupported_error()

    def prepare_from_uri(
        self,
        uri: str,
        play_when_ready: bool,
        extras: Optional[dict[str, Any]] = None,
    ) -> None:
        self._on_unsupported_error()

    def on_command(self, command: str, extras: Optional[dict[str, Any]] = None) -> bool:
        return False

    # ============ Resolution ============

    async def resolve(self, media_id: str) -> PlayQueue:
        """
        Resolve a media ID into a play queue.

        Raises:
            ContentNotAvailableError: The media ID is invalid or its content
                could not be loaded
        """
        return await self._resolve_request(parse_media_id(media_id))

    async def _prepare_from_media_id(self, media_id: str, play_when_ready: bool) -> None:
        try:
            queue = await self.resolve(media_id)
        except asyncio.CancelledError:
            logger.debug(f"Preparing media ID [{media_id}] was cancelled")
            raise
        except UnsupportedMediaIdError as e:
            logger.error(f"Failed to start playback of media ID [{media_id}]: {e}")
            self._on_unsupported_error()
            return
        except Exception:
            logger.exception(f"Failed to start playback of media ID [{media_id}]")
            self._on_prepare_error()
            return
        finally:
            if self._task is asyncio.current_task():
                self._task = None

        self._host.clear_error()
        self._host.start_playback(queue, play_when_ready)

    async def _resolve_request(self, request: MediaIdRequest) -> PlayQueue:
        if isinstance(request, LocalPlaylistRequest):
            return await self._extract_local_play_queue(request.playlist_id, request.index)
        if isinstance(request, RemotePlaylistRequest):
            return await self._extract_remote_play_queue(request.playlist_id, request.index)
        if isinstance(request, PlaylistUrlRequest):
            info = await self._metadata.get_playlist_info(request.service_id, request.url)
            return PlaylistPlayQueue.from_info(info)
        if isinstance(request, HistoryRequest):
            return await self._extract_history_play_queue(request.stream_id)
        if isinstance(request, InfoItemRequest):
            return await self._extract_info_item_play_queue(request)
        raise TypeError(f"Unexpected media ID request: {request!r}")

    async def _extract_local_play_queue(self, playlist_id: int, index: int) -> PlayQueue:
        items = await self._local_playlists.get_playlist_streams(playlist_id)
        return SinglePlayQueue.of(items, index)

    async def _extract_remote_play_queue(self, playlist_id: int, index: int) -> PlayQueue:
        playlist = await self._remote_playlists.get_playlist(playlist_id)
        info = await self._metadata.get_playlist_info(playlist.service_id, playlist.url)
        # info.errors (items that failed to extract) are ignored: the browsing
        # surface has nowhere to show them
        return PlaylistPlayQueue.from_info(info, index)

    async def _extract_history_play_queue(self, stream_id: int) -> PlayQueue:
        entries = await self._history.get_history()
        items = [entry.item for entry in entries if entry.stream_id == stream_id]
        return SinglePlayQueue.of(items, 0)

    async def _extract_info_item_play_queue(self, request: InfoItemRequest) -> PlayQueue:
        if request.info_type == InfoType.STREAM:
            info = await self._metadata.get_stream_info(request.service_id, request.url)
            return SinglePlayQueue.of(info)

        if request.info_type == InfoType.PLAYLIST:
            info = await self._metadata.get_playlist_info(request.service_id, request.url)
            return PlaylistPlayQueue.from_info(info)

        if request.info_type == InfoType.CHANNEL:
            info = await self._metadata.get_channel_info(request.service_id, request.url)
            playable_tab = next((tab for tab in info.tabs if is_streams_tab(tab)), None)
            if playable_tab is None:
                raise ContentNotAvailableError("No streams tab found")
            return ChannelTabPlayQueue.for_tab(request.service_id, playable_tab)

        raise ContentNotAvailableError(f"Unsupported info item type: {request.info_type}")

    def _cancel_pending(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    # ============ Errors ============

    def _on_unsupported_error(self) -> None:
        self._host.set_error(self._config.content_not_supported_message, ErrorCode.NOT_SUPPORTED)

    def _on_prepare_error(self) -> None:
        self._host.set_error(self._config.prepare_error_message, ErrorCode.APP_ERROR)
