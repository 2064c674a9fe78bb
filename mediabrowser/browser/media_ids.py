"""
Media ID grammar.

Media IDs are the opaque strings the media browser publishes for every
playable node and hands back when the user picks one. They are percent-encoded
URIs whose path is a tag chain, optionally preceded by an authority:

    bookmarks/local/<playlistId>/<index>
    bookmarks/remote/<playlistId>/<index>
    bookmarks/url/<serviceId>?url=<url>
    history/<streamId>
    info-item/<stream|playlist|channel>/<serviceId>?url=<url>

`parse_media_id` turns one into a request description without touching any
data source; the builders produce IDs in exactly the format it accepts.
"""

import re
from dataclasses import dataclass
from typing import Callable, Optional, Union
from urllib.parse import parse_qs, quote, unquote, urlencode, urlsplit, urlunsplit

from mediabrowser.extractor.exceptions import ContentNotAvailableError
from mediabrowser.extractor.models import InfoType

# Root tags
ID_BOOKMARKS = "bookmarks"
ID_HISTORY = "history"
ID_INFO_ITEM = "info-item"

# Bookmark types
ID_LOCAL = "local"
ID_REMOTE = "remote"
ID_URL = "url"

# Info item types
ID_STREAM = "stream"
ID_PLAYLIST = "playlist"
ID_CHANNEL = "channel"

# Query parameter carrying the content URL
QUERY_URL = "url"

_INFO_ITEM_TYPES = {
    ID_STREAM: InfoType.STREAM,
    ID_PLAYLIST: InfoType.PLAYLIST,
    ID_CHANNEL: InfoType.CHANNEL,
}

_NUMBER_PATTERN = re.compile(r"[+-]?[0-9]+")


class MediaIdError(ContentNotAvailableError):
    """A media ID could not be turned into a request."""

    def __init__(self, message: str, media_id: str):
        super().__init__(message)
        self.media_id = media_id


class MalformedMediaIdError(MediaIdError):
    """Wrong number of segments, bad number or missing url."""


class UnsupportedMediaIdError(MediaIdError):
    """Well-formed media ID naming a kind of content that cannot be played."""


@dataclass(frozen=True)
class LocalPlaylistRequest:
    playlist_id: int
    index: int


@dataclass(frozen=True)
class RemotePlaylistRequest:
    playlist_id: int
    index: int


@dataclass(frozen=True)
class PlaylistUrlRequest:
    service_id: int
    url: str


@dataclass(frozen=True)
class HistoryRequest:
    stream_id: int


@dataclass(frozen=True)
class InfoItemRequest:
    info_type: InfoType
    service_id: int
    url: str


MediaIdRequest = Union[
    LocalPlaylistRequest,
    RemotePlaylistRequest,
    PlaylistUrlRequest,
    HistoryRequest,
    InfoItemRequest,
]


def parse_media_id(media_id: str) -> MediaIdRequest:
    """
    Parse a media ID into a request description.

    Args:
        media_id: Media ID as published by the media browser

    Returns:
        One of the MediaIdRequest variants

    Raises:
        MalformedMediaIdError: Segment count, numbers or url are invalid
        UnsupportedMediaIdError: The tag chain names unknown content
    """
    # urlsplit silently drops tabs and newlines
    if any(ord(char) < 0x20 or char == "\x7f" for char in media_id):
        raise MalformedMediaIdError(f"Control character in media ID: {media_id!r}", media_id)

    try:
        parts = urlsplit(media_id)
    except ValueError as e:
        raise MalformedMediaIdError(f"Could not parse media ID: {media_id}", media_id) from e

    if parts.scheme:
        raise UnsupportedMediaIdError(f"Unexpected scheme {parts.scheme!r}: {media_id}", media_id)

    path = [unquote(segment) for segment in parts.path.split("/") if segment]
    if not path:
        raise MalformedMediaIdError(f"Empty media ID path: {media_id}", media_id)

    url = parse_qs(parts.query, keep_blank_values=True).get(QUERY_URL, [None])[0]

    root = path.pop(0)
    parser = _ROOT_PARSERS.get(root)
    if parser is None:
        raise UnsupportedMediaIdError(f"Unknown media ID type {root!r}: {media_id}", media_id)

    return parser(media_id, path, url)


def _parse_bookmarks(media_id: str, path: list[str], url: Optional[str]) -> MediaIdRequest:
    if not path:
        raise MalformedMediaIdError(f"Missing playlist type: {media_id}", media_id)

    playlist_type = path.pop(0)
    if playlist_type in (ID_LOCAL, ID_REMOTE):
        if len(path) != 2:
            raise MalformedMediaIdError(f"Expected playlist id and index: {media_id}", media_id)
        playlist_id = _parse_long(media_id, path[0])
        index = _parse_int(media_id, path[1])
        if playlist_type == ID_LOCAL:
            return LocalPlaylistRequest(playlist_id=playlist_id, index=index)
        return RemotePlaylistRequest(playlist_id=playlist_id, index=index)

    if playlist_type == ID_URL:
        if len(path) != 1 or url is None:
            raise MalformedMediaIdError(f"Expected service id and url: {media_id}", media_id)
        return PlaylistUrlRequest(service_id=_parse_int(media_id, path[0]), url=url)

    raise UnsupportedMediaIdError(f"Unknown playlist type {playlist_type!r}: {media_id}", media_id)


def _parse_history(media_id: str, path: list[str], url: Optional[str]) -> MediaIdRequest:
    if len(path) != 1:
        raise MalformedMediaIdError(f"Expected stream id: {media_id}", media_id)
    return HistoryRequest(stream_id=_parse_long(media_id, path[0]))


def _parse_info_item(media_id: str, path: list[str], url: Optional[str]) -> MediaIdRequest:
    if url is None:
        raise MalformedMediaIdError(f"Missing url: {media_id}", media_id)
    if len(path) != 2:
        raise MalformedMediaIdError(f"Expected info item type and service id: {media_id}", media_id)

    service_id = _parse_int(media_id, path[1])
    info_type = _INFO_ITEM_TYPES.get(path[0])
    if info_type is None:
        raise UnsupportedMediaIdError(f"Unknown info item type {path[0]!r}: {media_id}", media_id)

    return InfoItemRequest(info_type=info_type, service_id=service_id, url=url)


_ROOT_PARSERS: dict[str, Callable[[str, list[str], Optional[str]], MediaIdRequest]] = {
    ID_BOOKMARKS: _parse_bookmarks,
    ID_HISTORY: _parse_history,
    ID_INFO_ITEM: _parse_info_item,
}


def _parse_number(media_id: str, value: str, bits: int) -> int:
    if not _NUMBER_PATTERN.fullmatch(value):
        raise MalformedMediaIdError(f"Not a number {value!r}: {media_id}", media_id)

    number = int(value)
    limit = 1 << (bits - 1)
    if not -limit <= number < limit:
        raise MalformedMediaIdError(f"Number out of range {value!r}: {media_id}", media_id)
    return number


def _parse_int(media_id: str, value: str) -> int:
    return _parse_number(media_id, value, 32)


def _parse_long(media_id: str, value: str) -> int:
    return _parse_number(media_id, value, 64)


# ============ Builders ============


def build_media_id(
    *segments: Union[str, int],
    url: Optional[str] = None,
    authority: Optional[str] = None,
) -> str:
    """
    Build a media ID from path segments and an optional content url.

    Args:
        segments: Tag chain and arguments, each percent-encoded separately
        url: Content URL for the `url` query parameter
        authority: Optional authority prefix (`//<authority>/...`)
    """
    path = "/".join(quote(str(segment), safe="") for segment in segments)
    query = urlencode({QUERY_URL: url}) if url is not None else ""

    if authority:
        return urlunsplit(("", authority, "/" + path, query, ""))
    return urlunsplit(("", "", path, query, ""))


def local_playlist_media_id(playlist_id: int, index: int, authority: Optional[str] = None) -> str:
    return build_media_id(ID_BOOKMARKS, ID_LOCAL, playlist_id, index, authority=authority)


def remote_playlist_media_id(playlist_id: int, index: int, authority: Optional[str] = None) -> str:
    return build_media_id(ID_BOOKMARKS, ID_REMOTE, playlist_id, index, authority=authority)


def playlist_url_media_id(service_id: int, url: str, authority: Optional[str] = None) -> str:
    return build_media_id(ID_BOOKMARKS, ID_URL, service_id, url=url, authority=authority)


def history_media_id(stream_id: int, authority: Optional[str] = None) -> str:
    return build_media_id(ID_HISTORY, stream_id, authority=authority)


def info_item_media_id(
    info_type: InfoType,
    service_id: int,
    url: str,
    authority: Optional[str] = None,
) -> str:
    """
    Build the media ID of a stream, playlist or channel.

    Raises:
        ValueError: For info types that have no media ID (comments)
    """
    for tag, known_type in _INFO_ITEM_TYPES.items():
        if known_type == info_type:
            return build_media_id(ID_INFO_ITEM, tag, service_id, url=url, authority=authority)
    raise ValueError(f"Unexpected info item type: {info_type}")
