import uuid
from datetime import datetime
from enum import Enum
from typing import Optional, Dict, Any


class NotificationType(str, Enum):
    COLLABORATION_REQUEST_ACCEPTED = "collaboration_request_accepted"
    COLLABORATION_REQUEST_REJECTED = "collaboration_request_rejected"


class Notification:
    """Уведомление для получателя"""

    def __init__(
        self,
        recipient_id: uuid.UUID,
        sender_id: Optional[uuid.UUID],
        type: str,
        title: str,
        message: str,
        related_entity_id: Optional[uuid.UUID] = None,
        is_read: bool = False,
        id: Optional[uuid.UUID] = None,
        created_at: Optional[datetime] = None
    ):
        self.id = id or uuid.uuid4()
        self.recipient_id = recipient_id
        self.sender_id = sender_id
        self.type = type
        self.title = title
        self.message = message
        self.related_entity_id = related_entity_id
        self.is_read = is_read
        self.created_at = created_at or datetime.utcnow()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": str(self.id),
            "recipient_id": str(self.recipient_id),
            "sender_id": str(self.sender_id) if self.sender_id else None,
            "type": self.type,
            "title": self.title,
            "message": self.message,
            "related_entity_id": str(self.related_entity_id) if self.related_entity_id else None,
            "is_read": self.is_read,
            "created_at": self.created_at.isoformat()
        }

    def __repr__(self) -> str:
        return f"Notification(id={self.id}, recipient={self.recipient_id}, type={self.type})"
