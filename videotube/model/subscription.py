import uuid
from sqlalchemy import Column, DateTime, ForeignKey, Uuid, UniqueConstraint
from videotube.db.database import Base
from videotube.utility.time import utc_now


class SubscriptionModel(Base):
    """subscriber follows channel (the owner of videos)"""
    __tablename__ = "subscriptions"
    __table_args__ = (
        UniqueConstraint("subscriber_id", "channel_id", name="uq_subscription_pair"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    subscriber_id = Column(Uuid, ForeignKey("users.id"), nullable=False, index=True)
    channel_id = Column(Uuid, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
