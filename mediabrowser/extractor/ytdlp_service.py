"""
Metadata source backed by yt-dlp.

Extracts stream, playlist and channel metadata for the streaming services in
`StreamingService`. Extraction is blocking, so it runs in the event loop's
default executor.
"""

import asyncio
import logging
from pathlib import Path
from typing import Any, Optional
from urllib.parse import urlsplit

import yt_dlp

from mediabrowser.config import ExtractorConfig
from mediabrowser.extractor.exceptions import ContentNotAvailableError, ExtractionError
from mediabrowser.extractor.models import (
    ChannelInfo,
    ChannelTabs,
    ListLinkHandler,
    PlaylistInfo,
    StreamInfo,
    StreamInfoItem,
    StreamType,
)
from mediabrowser.extractor.services import StreamingService

logger = logging.getLogger(__name__)

# Last URL path segment of a channel tab -> content filter
TAB_SUFFIXES = {
    "videos": ChannelTabs.VIDEOS,
    "shorts": ChannelTabs.SHORTS,
    "streams": ChannelTabs.LIVESTREAMS,
    "live": ChannelTabs.LIVESTREAMS,
    "tracks": ChannelTabs.TRACKS,
    "playlists": ChannelTabs.PLAYLISTS,
    "podcasts": ChannelTabs.PLAYLISTS,
    "sets": ChannelTabs.PLAYLISTS,
    "releases": ChannelTabs.ALBUMS,
    "albums": ChannelTabs.ALBUMS,
    "channels": ChannelTabs.CHANNELS,
    "likes": ChannelTabs.LIKES,
}


class YtDlpMetadataService:
    """
    Metadata source using yt-dlp.

    Features:
    - Flat extraction for playlists and channels (no per-item requests)
    - Cookie support for authenticated content
    - Per-item failures in playlists are collected, not raised
    - yt-dlp errors are translated into ExtractionError
    """

    def __init__(
        self,
        cookies_file: Optional[str] = None,
        socket_timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
    ):
        """
        Initialize the service.

        Args:
            cookies_file: Path to a cookies file (Netscape format)
            socket_timeout: Socket timeout in seconds, None for yt-dlp's default
            user_agent: Override the HTTP user agent
        """
        self.cookies_file = cookies_file
        self.socket_timeout = socket_timeout
        self.user_agent = user_agent

    @classmethod
    def from_config(cls, extractor_config: ExtractorConfig) -> "YtDlpMetadataService":
        return cls(
            cookies_file=extractor_config.cookies_file or None,
            socket_timeout=extractor_config.socket_timeout,
            user_agent=extractor_config.user_agent,
        )

    async def get_stream_info(self, service_id: int, url: str) -> StreamInfo:
        service = _get_service(service_id, url)
        info = await self._extract(service_id, url, flat=False)

        return StreamInfo(
            service_id=service_id,
            url=info.get("webpage_url") or url,
            id=str(info.get("id") or ""),
            name=info.get("title") or "",
            stream_type=_stream_type(service, info),
            duration=_duration(info),
            thumbnail_url=_thumbnail(info),
            uploader_name=info.get("uploader") or info.get("channel"),
            uploader_url=info.get("uploader_url") or info.get("channel_url"),
            view_count=info.get("view_count") or -1,
        )

    async def get_playlist_info(self, service_id: int, url: str) -> PlaylistInfo:
        service = _get_service(service_id, url)
        info = await self._extract(service_id, url, flat=True)

        items: list[StreamInfoItem] = []
        errors: list[Exception] = []
        for position, entry in enumerate(info.get("entries") or []):
            if not entry or not (entry.get("webpage_url") or entry.get("url")):
                errors.append(
                    ContentNotAvailableError(f"Playlist item {position} of {url} is unavailable")
                )
                continue
            items.append(_to_stream_info_item(service, entry))

        if errors:
            logger.debug(f"Skipped {len(errors)} unavailable items in playlist {url}")

        return PlaylistInfo(
            service_id=service_id,
            url=info.get("webpage_url") or url,
            id=str(info.get("id") or ""),
            name=info.get("title") or "",
            related_items=items,
            uploader_name=info.get("uploader") or info.get("channel"),
            thumbnail_url=_thumbnail(info),
            stream_count=info.get("playlist_count") or len(items),
            errors=errors,
        )

    async def get_channel_info(self, service_id: int, url: str) -> ChannelInfo:
        service = _get_service(service_id, url)
        info = await self._extract(service_id, url, flat=True)

        channel_url = info.get("channel_url") or info.get("uploader_url") or info.get("webpage_url") or url
        channel_id = str(info.get("channel_id") or info.get("uploader_id") or info.get("id") or "")

        return ChannelInfo(
            service_id=service_id,
            url=channel_url,
            id=channel_id,
            name=info.get("channel") or info.get("uploader") or info.get("title") or "",
            tabs=_channel_tabs(service, url, channel_id, info),
            avatar_url=_thumbnail(info),
            subscriber_count=info.get("channel_follower_count") or -1,
            description=info.get("description"),
        )

    async def _extract(self, service_id: int, url: str, flat: bool) -> dict[str, Any]:
        loop = asyncio.get_running_loop()
        try:
            info = await loop.run_in_executor(None, self._extract_info, url, flat)
        except yt_dlp.utils.YoutubeDLError as e:
            raise ExtractionError(
                _describe_error(e, url),
                service_id=service_id,
                url=url,
                original_error=e,
            ) from e

        if not info:
            raise ExtractionError(f"No info extracted for {url}", service_id=service_id, url=url)

        return info

    def _extract_info(self, url: str, flat: bool) -> dict[str, Any]:
        """
        Extract info using yt-dlp (blocking, run in executor).
        """
        with yt_dlp.YoutubeDL(self._build_options(flat)) as ydl:
            return ydl.extract_info(url, download=False)

    def _build_options(self, flat: bool) -> dict[str, Any]:
        ydl_opts: dict[str, Any] = {
            "quiet": True,
            "no_warnings": True,
            "skip_download": True,
            "ignore_no_formats_error": True,
            "extract_flat": "in_playlist" if flat else False,
        }

        if self.cookies_file and Path(self.cookies_file).exists():
            ydl_opts["cookiefile"] = self.cookies_file
        if self.socket_timeout is not None:
            ydl_opts["socket_timeout"] = self.socket_timeout
        if self.user_agent:
            ydl_opts["http_headers"] = {"User-Agent": self.user_agent}

        return ydl_opts


def _get_service(service_id: int, url: str) -> StreamingService:
    try:
        return StreamingService(service_id)
    except ValueError as e:
        raise ExtractionError(
            f"There is no service with the id {service_id}",
            service_id=service_id,
            url=url,
            original_error=e,
        ) from e


def _describe_error(error: Exception, url: str) -> str:
    error_msg = str(error).lower()

    if "private" in error_msg:
        return f"Content is private: {url}"
    if "unavailable" in error_msg or "not available" in error_msg:
        return f"Content unavailable: {url}"
    if "sign in" in error_msg or "confirm your age" in error_msg:
        return f"Authentication required: {url}"
    if "too many requests" in error_msg or "rate limit" in error_msg:
        return f"Rate limited while extracting: {url}"
    if "unsupported url" in error_msg:
        return f"Unsupported URL: {url}"
    return f"Failed to extract info for {url}: {error}"


def _stream_type(service: StreamingService, info: dict[str, Any]) -> StreamType:
    live_status = info.get("live_status")
    if live_status == "is_live" or info.get("is_live"):
        return StreamType.AUDIO_LIVE_STREAM if service.is_audio_only else StreamType.LIVE_STREAM
    if live_status in ("was_live", "post_live"):
        return StreamType.POST_LIVE_AUDIO_STREAM if service.is_audio_only else StreamType.POST_LIVE_STREAM
    return StreamType.AUDIO_STREAM if service.is_audio_only else StreamType.VIDEO_STREAM


def _duration(info: dict[str, Any]) -> int:
    duration = info.get("duration")
    return int(duration) if duration is not None else -1


def _thumbnail(info: dict[str, Any]) -> Optional[str]:
    if info.get("thumbnail"):
        return info["thumbnail"]
    thumbnails = info.get("thumbnails") or []
    # yt-dlp sorts thumbnails by preference, best last
    for thumbnail in reversed(thumbnails):
        if thumbnail.get("url"):
            return thumbnail["url"]
    return None


def _to_stream_info_item(service: StreamingService, entry: dict[str, Any]) -> StreamInfoItem:
    return StreamInfoItem(
        service_id=int(service),
        url=entry.get("webpage_url") or entry["url"],
        name=entry.get("title") or "",
        stream_type=_stream_type(service, entry),
        duration=_duration(entry),
        thumbnail_url=_thumbnail(entry),
        uploader_name=entry.get("uploader") or entry.get("channel"),
        uploader_url=entry.get("uploader_url") or entry.get("channel_url"),
        view_count=entry.get("view_count") or -1,
    )


def _tab_filter(url: str) -> Optional[str]:
    segments = [segment for segment in urlsplit(url).path.split("/") if segment]
    if not segments:
        return None
    return TAB_SUFFIXES.get(segments[-1].lower())


def _channel_tabs(
    service: StreamingService,
    url: str,
    channel_id: str,
    info: dict[str, Any],
) -> list[ListLinkHandler]:
    """
    Build tab link handlers for a channel.

    A channel extracted without an explicit tab comes back as a playlist of
    tab playlists; otherwise the result itself is a single tab.
    """
    tabs = []
    for entry in info.get("entries") or []:
        tab_url = (entry or {}).get("url")
        content_filter = _tab_filter(tab_url) if tab_url else None
        if content_filter is None:
            continue
        tabs.append(
            ListLinkHandler(
                original_url=tab_url,
                url=tab_url,
                id=channel_id,
                content_filters=(content_filter,),
            )
        )

    if tabs:
        return tabs

    content_filter = _tab_filter(url)
    if content_filter is None:
        content_filter = ChannelTabs.TRACKS if service.is_audio_only else ChannelTabs.VIDEOS

    return [
        ListLinkHandler(
            original_url=url,
            url=info.get("webpage_url") or url,
            id=channel_id,
            content_filters=(content_filter,),
        )
    ]
