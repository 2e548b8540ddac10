import uuid
from sqlalchemy import Column, Text, DateTime, ForeignKey, Uuid
from videotube.db.database import Base
from videotube.utility.time import utc_now


class CommentModel(Base):
    __tablename__ = "comments"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    video_id = Column(Uuid, ForeignKey("videos.id"), nullable=False, index=True)
    owner_id = Column(Uuid, ForeignKey("users.id"), nullable=True)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)
