"""
Unit tests for media ID parsing and building.
"""

import pytest

from mediabrowser.browser.media_ids import (
    HistoryRequest,
    InfoItemRequest,
    LocalPlaylistRequest,
    MalformedMediaIdError,
    MediaIdError,
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
from mediabrowser.extractor import ContentNotAvailableError, InfoType

PLAYLIST_URL = "https://www.youtube.com/playlist?list=PL1"
ENCODED_PLAYLIST_URL = "https%3A%2F%2Fwww.youtube.com%2Fplaylist%3Flist%3DPL1"


@pytest.mark.unit
class TestParseMediaId:
    """Tests for parse_media_id on valid media IDs."""

    def test_local_playlist(self):
        assert parse_media_id("bookmarks/local/3/7") == LocalPlaylistRequest(playlist_id=3, index=7)

    def test_remote_playlist(self):
        assert parse_media_id("bookmarks/remote/12/0") == RemotePlaylistRequest(playlist_id=12, index=0)

    def test_playlist_url(self):
        request = parse_media_id(f"bookmarks/url/0?url={ENCODED_PLAYLIST_URL}")

        assert request == PlaylistUrlRequest(service_id=0, url=PLAYLIST_URL)

    def test_history(self):
        assert parse_media_id("history/42") == HistoryRequest(stream_id=42)

    @pytest.mark.parametrize(
        "tag,info_type",
        [
            ("stream", InfoType.STREAM),
            ("playlist", InfoType.PLAYLIST),
            ("channel", InfoType.CHANNEL),
        ],
    )
    def test_info_item(self, tag, info_type):
        request = parse_media_id(f"info-item/{tag}/1?url=https%3A%2F%2Fsoundcloud.com%2Fx")

        assert request == InfoItemRequest(
            info_type=info_type,
            service_id=1,
            url="https://soundcloud.com/x",
        )

    def test_authority_prefix_is_ignored(self):
        request = parse_media_id("//org.example.app/bookmarks/local/3/7")

        assert request == LocalPlaylistRequest(playlist_id=3, index=7)

    def test_segments_are_percent_decoded(self):
        assert parse_media_id("history/%34%32") == HistoryRequest(stream_id=42)

    def test_first_url_parameter_wins(self):
        request = parse_media_id("info-item/stream/0?url=https%3A%2F%2Fa&url=https%3A%2F%2Fb")

        assert request.url == "https://a"

    def test_empty_url_parameter_is_accepted(self):
        request = parse_media_id("info-item/stream/0?url=")

        assert request == InfoItemRequest(info_type=InfoType.STREAM, service_id=0, url="")

    def test_signed_numbers(self):
        assert parse_media_id("bookmarks/local/+5/-1") == LocalPlaylistRequest(playlist_id=5, index=-1)

    def test_number_limits(self):
        request = parse_media_id("bookmarks/local/9223372036854775807/2147483647")

        assert request.playlist_id == 2**63 - 1
        assert request.index == 2**31 - 1

    def test_url_is_not_required_for_history(self):
        assert parse_media_id("history/1?url=ignored") == HistoryRequest(stream_id=1)


@pytest.mark.unit
class TestParseMediaIdErrors:
    """Tests for rejected media IDs."""

    @pytest.mark.parametrize(
        "media_id",
        [
            "",
            "/",
            "bookmarks",
            "bookmarks/local/3",
            "bookmarks/local/3/7/1",
            "bookmarks/remote/3",
            "bookmarks/local/x/0",
            "bookmarks/local/3/1.5",
            "bookmarks/local/3/2147483648",
            "bookmarks/url/0",
            "bookmarks/url?url=https%3A%2F%2Fa",
            "bookmarks/url/zero?url=https%3A%2F%2Fa",
            "history",
            "history/1/2",
            "history/abc",
            "history/ 1",
            "history/9223372036854775808",
            "info-item/stream/0",
            "info-item/stream?url=https%3A%2F%2Fa",
            "info-item/stream/0/1?url=https%3A%2F%2Fa",
            "info-item/stream/x?url=https%3A%2F%2Fa",
            "//[bad/history/1",
            "history/1\n2",
            "his\ttory/5",
            "bookmarks/local/3/\r0",
            "history/7\x00",
        ],
    )
    def test_malformed(self, media_id):
        with pytest.raises(MalformedMediaIdError) as exc_info:
            parse_media_id(media_id)

        assert exc_info.value.media_id == media_id

    @pytest.mark.parametrize(
        "media_id",
        [
            "podcasts/1",
            "playlists/local/1/0",
            "bookmarks/smart/1/0",
            "info-item/comment/0?url=https%3A%2F%2Fa",
            "info-item/unknown/0?url=https%3A%2F%2Fa",
        ],
    )
    def test_unsupported(self, media_id):
        with pytest.raises(UnsupportedMediaIdError):
            parse_media_id(media_id)

    @pytest.mark.parametrize("media_id", ["history:5", "content://history/5"])
    def test_scheme_is_unsupported(self, media_id):
        with pytest.raises(UnsupportedMediaIdError, match="Unexpected scheme"):
            parse_media_id(media_id)

    def test_missing_url_checked_before_info_type(self):
        with pytest.raises(MalformedMediaIdError):
            parse_media_id("info-item/unknown/0")

    def test_service_id_checked_before_info_type(self):
        with pytest.raises(MalformedMediaIdError):
            parse_media_id("info-item/unknown/x?url=https%3A%2F%2Fa")

    def test_errors_are_content_not_available(self):
        assert issubclass(MediaIdError, ContentNotAvailableError)
        assert issubclass(MalformedMediaIdError, MediaIdError)
        assert issubclass(UnsupportedMediaIdError, MediaIdError)


@pytest.mark.unit
class TestBuildMediaId:
    """Tests for the media ID builders."""

    def test_local_playlist(self):
        assert local_playlist_media_id(3, 7) == "bookmarks/local/3/7"

    def test_local_playlist_with_authority(self):
        media_id = local_playlist_media_id(3, 7, authority="org.example.app")

        assert media_id == "//org.example.app/bookmarks/local/3/7"

    def test_remote_playlist(self):
        assert remote_playlist_media_id(5, 2) == "bookmarks/remote/5/2"

    def test_playlist_url(self):
        media_id = playlist_url_media_id(0, PLAYLIST_URL)

        assert media_id == f"bookmarks/url/0?url={ENCODED_PLAYLIST_URL}"

    def test_history(self):
        assert history_media_id(42) == "history/42"

    def test_info_item(self):
        media_id = info_item_media_id(InfoType.CHANNEL, 1, "https://soundcloud.com/artist")

        assert media_id == "info-item/channel/1?url=https%3A%2F%2Fsoundcloud.com%2Fartist"

    def test_info_item_comment_has_no_media_id(self):
        with pytest.raises(ValueError):
            info_item_media_id(InfoType.COMMENT, 0, "https://www.youtube.com/watch?v=x")

    def test_segments_are_encoded_separately(self):
        assert build_media_id("history", "a/b") == "history/a%2Fb"

    def test_built_ids_parse_back(self):
        url = "https://example.org/a b?x=1&url=2"

        assert parse_media_id(playlist_url_media_id(4, url)) == PlaylistUrlRequest(service_id=4, url=url)
        assert parse_media_id(
            info_item_media_id(InfoType.STREAM, 2, url, authority="org.example.app")
        ) == InfoItemRequest(info_type=InfoType.STREAM, service_id=2, url=url)
