"""
Stream History Database Model
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from mediabrowser.database.models.base import Base
from mediabrowser.database.models.stream import StreamEntity


class StreamHistoryEntity(Base):
    """
    One access of a stream.

    A stream accessed again updates its row (access_date, repeat_count)
    instead of adding a new one.
    """

    __tablename__ = "stream_history"

    stream_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("streams.uid", ondelete="CASCADE"),
        primary_key=True,
    )
    access_date: Mapped[datetime] = mapped_column(DateTime, primary_key=True)
    repeat_count: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    stream: Mapped[StreamEntity] = relationship(StreamEntity, lazy="joined")

    def __repr__(self) -> str:
        return f"<StreamHistoryEntity {self.stream_id} @ {self.access_date}>"
