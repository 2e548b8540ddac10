from sqlalchemy import Column, DateTime, ForeignKey, Uuid
from videotube.db.database import Base
from videotube.utility.time import utc_now


class WatchHistoryModel(Base):
    """Set of videos a user has watched. A row's presence is the whole meaning."""
    __tablename__ = "watch_history"

    user_id = Column(Uuid, ForeignKey("users.id"), primary_key=True)
    video_id = Column(Uuid, ForeignKey("videos.id"), primary_key=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
