"""
Playlist Database Models

Defines local playlists, their stream entries, and bookmarked remote playlists.
"""

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from mediabrowser.database.models.base import Base
from mediabrowser.database.models.stream import StreamEntity


class PlaylistEntity(Base):
    """
    A playlist created locally by the user.
    """

    __tablename__ = "playlists"

    uid: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    thumbnail_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Manual ordering in the playlist list, -1 = unordered
    display_index: Mapped[int] = mapped_column(Integer, nullable=False, default=-1)

    entries: Mapped[list["PlaylistStreamEntity"]] = relationship(
        "PlaylistStreamEntity",
        back_populates="playlist",
        cascade="all, delete-orphan",
        order_by="PlaylistStreamEntity.join_index",
    )

    def __repr__(self) -> str:
        return f"<PlaylistEntity {self.name}>"


class PlaylistStreamEntity(Base):
    """
    Stream at a position of a local playlist.

    The same stream may appear at several positions.
    """

    __tablename__ = "playlist_stream_join"

    playlist_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("playlists.uid", ondelete="CASCADE"),
        primary_key=True,
    )
    join_index: Mapped[int] = mapped_column(Integer, primary_key=True)
    stream_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("streams.uid", ondelete="CASCADE"),
        nullable=False,
    )

    playlist: Mapped["PlaylistEntity"] = relationship(
        "PlaylistEntity",
        back_populates="entries",
    )
    stream: Mapped[StreamEntity] = relationship(StreamEntity, lazy="joined")

    def __repr__(self) -> str:
        return f"<PlaylistStreamEntity {self.playlist_id}:{self.join_index} -> {self.stream_id}>"


class PlaylistRemoteEntity(Base):
    """
    A playlist of a streaming service bookmarked by the user.

    Only the reference is stored; items are extracted on demand.
    """

    __tablename__ = "remote_playlists"

    uid: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    service_id: Mapped[int] = mapped_column(Integer, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    url: Mapped[str] = mapped_column(Text, nullable=False)
    thumbnail_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    uploader: Mapped[str | None] = mapped_column(String(255), nullable=True)
    stream_count: Mapped[int | None] = mapped_column(Integer, nullable=True)
    display_index: Mapped[int] = mapped_column(Integer, nullable=False, default=-1)

    def __repr__(self) -> str:
        return f"<PlaylistRemoteEntity {self.name}>"
