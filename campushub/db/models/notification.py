from sqlalchemy import Column, String, Boolean, ForeignKey, Uuid, Index

from campushub.db.base import BaseModel


class Notification(BaseModel):
    __tablename__ = "notifications"
    __table_args__ = (
        Index("ix_notifications_recipient_created", "recipient_id", "created_at"),
    )

    recipient_id = Column(Uuid(as_uuid=True), ForeignKey("users.uuid"), nullable=False)
    sender_id = Column(Uuid(as_uuid=True), ForeignKey("users.uuid"), nullable=True)
    type = Column(String(50), nullable=False)
    title = Column(String(200), nullable=False)
    message = Column(String(500), nullable=False)
    related_entity_id = Column(Uuid(as_uuid=True), nullable=True)
    is_read = Column(Boolean, default=False, nullable=False)
