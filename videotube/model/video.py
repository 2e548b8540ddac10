import uuid
from sqlalchemy import Column, Integer, Float, String, Text, Boolean, DateTime, ForeignKey, Uuid, text
from videotube.db.database import Base
from videotube.utility.time import utc_now


class VideoModel(Base):
    """Uploaded video with its provider-hosted media and thumbnail references"""
    __tablename__ = "videos"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    owner_id = Column(Uuid, ForeignKey("users.id"), nullable=True, index=True)
    title = Column(String, nullable=False, index=True)
    description = Column(Text, nullable=False)
    video_file = Column(String, nullable=False)  # provider URL
    video_public_id = Column(String, nullable=False)
    thumbnail = Column(String, nullable=False)  # provider URL
    thumbnail_public_id = Column(String, nullable=False)
    duration = Column(Float, nullable=True)  # seconds, as reported by the upload provider
    views = Column(Integer, nullable=False, default=0, server_default=text("0"))
    is_published = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)
