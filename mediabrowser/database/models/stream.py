"""
Stream Database Model

Streams referenced by local playlists and the watch history.
"""

from sqlalchemy import Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from mediabrowser.database.models.base import Base
from mediabrowser.extractor.models import StreamInfoItem, StreamType


class StreamEntity(Base):
    """
    A stream known to the local database.

    One row per (service_id, url); playlists and history refer to it by uid.
    """

    __tablename__ = "streams"
    __table_args__ = (UniqueConstraint("service_id", "url"),)

    uid: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    service_id: Mapped[int] = mapped_column(Integer, nullable=False)
    url: Mapped[str] = mapped_column(Text, nullable=False)
    title: Mapped[str] = mapped_column(String(500), nullable=False)

    # StreamType value
    stream_type: Mapped[str] = mapped_column(
        String(30), nullable=False, default=StreamType.VIDEO_STREAM.value
    )
    duration: Mapped[int] = mapped_column(Integer, nullable=False, default=-1)

    uploader: Mapped[str | None] = mapped_column(String(255), nullable=True)
    uploader_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    thumbnail_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    view_count: Mapped[int | None] = mapped_column(Integer, nullable=True)
    textual_upload_date: Mapped[str | None] = mapped_column(String(100), nullable=True)

    def __repr__(self) -> str:
        return f"<StreamEntity {self.uid}: {self.title[:30]}>"

    def to_stream_info_item(self) -> StreamInfoItem:
        return StreamInfoItem(
            service_id=self.service_id,
            url=self.url,
            name=self.title,
            stream_type=StreamType(self.stream_type),
            duration=self.duration,
            thumbnail_url=self.thumbnail_url,
            uploader_name=self.uploader,
            uploader_url=self.uploader_url,
            view_count=self.view_count if self.view_count is not None else -1,
            textual_upload_date=self.textual_upload_date,
        )

    @classmethod
    def from_stream_info_item(cls, item: StreamInfoItem) -> "StreamEntity":
        return cls(
            service_id=item.service_id,
            url=item.url,
            title=item.name,
            stream_type=item.stream_type.value,
            duration=item.duration,
            uploader=item.uploader_name,
            uploader_url=item.uploader_url,
            thumbnail_url=item.thumbnail_url,
            view_count=item.view_count if item.view_count >= 0 else None,
            textual_upload_date=item.textual_upload_date,
        )
