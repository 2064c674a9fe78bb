"""
Playlist and history managers.

Async data access over the local database. These implement the data source
protocols of `mediabrowser.browser.sources`.
"""

import logging
from datetime import datetime, timezone
from typing import Iterable, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from mediabrowser.browser.sources import HistoryEntry, RemotePlaylist
from mediabrowser.database.models import (
    PlaylistEntity,
    PlaylistRemoteEntity,
    PlaylistStreamEntity,
    StreamEntity,
    StreamHistoryEntity,
)
from mediabrowser.extractor.exceptions import ContentNotAvailableError
from mediabrowser.extractor.models import StreamInfoItem

logger = logging.getLogger(__name__)


async def _upsert_stream(session: AsyncSession, item: StreamInfoItem) -> StreamEntity:
    """Return the stored stream for (service_id, url), inserting it if needed."""
    stream = await session.scalar(
        select(StreamEntity).where(
            StreamEntity.service_id == item.service_id,
            StreamEntity.url == item.url,
        )
    )
    if stream is None:
        stream = StreamEntity.from_stream_info_item(item)
        session.add(stream)
        await session.flush()
    return stream


class LocalPlaylistManager:
    """Local playlists and their streams."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def get_playlist_streams(self, playlist_id: int) -> list[StreamInfoItem]:
        """
        Get the streams of a playlist in playlist order.

        An unknown playlist has no streams.
        """
        async with self._session_factory() as session:
            entries = await session.scalars(
                select(PlaylistStreamEntity)
                .where(PlaylistStreamEntity.playlist_id == playlist_id)
                .order_by(PlaylistStreamEntity.join_index)
            )
            return [entry.stream.to_stream_info_item() for entry in entries]

    async def create_playlist(self, name: str, items: Iterable[StreamInfoItem]) -> int:
        """
        Create a playlist holding the given streams.

        Returns:
            The new playlist id
        """
        async with self._session_factory() as session:
            playlist = PlaylistEntity(name=name)
            session.add(playlist)
            await session.flush()

            await self._append(session, playlist.uid, items, start_index=0)
            await session.commit()

            logger.info(f"Created local playlist {playlist.uid} ({name})")
            return playlist.uid

    async def append_to_playlist(self, playlist_id: int, items: Iterable[StreamInfoItem]) -> None:
        async with self._session_factory() as session:
            last_index = await session.scalar(
                select(func.max(PlaylistStreamEntity.join_index)).where(
                    PlaylistStreamEntity.playlist_id == playlist_id
                )
            )
            start_index = 0 if last_index is None else last_index + 1

            await self._append(session, playlist_id, items, start_index)
            await session.commit()

    async def _append(
        self,
        session: AsyncSession,
        playlist_id: int,
        items: Iterable[StreamInfoItem],
        start_index: int,
    ) -> None:
        for offset, item in enumerate(items):
            stream = await _upsert_stream(session, item)
            session.add(
                PlaylistStreamEntity(
                    playlist_id=playlist_id,
                    join_index=start_index + offset,
                    stream_id=stream.uid,
                )
            )


class RemotePlaylistManager:
    """Bookmarked playlists of streaming services."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def get_playlist(self, playlist_id: int) -> RemotePlaylist:
        """
        Get a bookmarked playlist.

        Raises:
            ContentNotAvailableError: No bookmark with this id
        """
        async with self._session_factory() as session:
            playlist = await session.get(PlaylistRemoteEntity, playlist_id)
            if playlist is None:
                raise ContentNotAvailableError(f"Remote playlist {playlist_id} not found")

            return RemotePlaylist(
                playlist_id=playlist.uid,
                service_id=playlist.service_id,
                url=playlist.url,
                name=playlist.name,
            )

    async def bookmark(
        self,
        service_id: int,
        url: str,
        name: str = "",
        thumbnail_url: Optional[str] = None,
        uploader: Optional[str] = None,
        stream_count: Optional[int] = None,
    ) -> int:
        """
        Bookmark a playlist, or return the existing bookmark for the same url.

        Returns:
            The bookmark id
        """
        async with self._session_factory() as session:
            existing = await session.scalar(
                select(PlaylistRemoteEntity).where(
                    PlaylistRemoteEntity.service_id == service_id,
                    PlaylistRemoteEntity.url == url,
                )
            )
            if existing is not None:
                return existing.uid

            playlist = PlaylistRemoteEntity(
                service_id=service_id,
                url=url,
                name=name,
                thumbnail_url=thumbnail_url,
                uploader=uploader,
                stream_count=stream_count,
            )
            session.add(playlist)
            await session.commit()
            return playlist.uid


class StreamHistoryManager:
    """Watch history."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def get_history(self) -> list[HistoryEntry]:
        """Get all history entries, most recently accessed first."""
        async with self._session_factory() as session:
            rows = await session.scalars(
                select(StreamHistoryEntity).order_by(StreamHistoryEntity.access_date.desc())
            )
            return [
                HistoryEntry(stream_id=row.stream_id, item=row.stream.to_stream_info_item())
                for row in rows
            ]

    async def mark_as_watched(
        self,
        item: StreamInfoItem,
        access_date: Optional[datetime] = None,
    ) -> int:
        """
        Record an access of a stream.

        Updates the latest history row of the stream if there is one,
        otherwise adds a row.

        Returns:
            The stream id
        """
        # Stored as naive UTC
        access_date = access_date or datetime.now(timezone.utc).replace(tzinfo=None)

        async with self._session_factory() as session:
            stream = await _upsert_stream(session, item)

            latest = await session.scalar(
                select(StreamHistoryEntity)
                .where(StreamHistoryEntity.stream_id == stream.uid)
                .order_by(StreamHistoryEntity.access_date.desc())
                .limit(1)
            )
            if latest is None:
                session.add(StreamHistoryEntity(stream_id=stream.uid, access_date=access_date))
            else:
                latest.access_date = access_date
                latest.repeat_count += 1

            await session.commit()
            return stream.uid
