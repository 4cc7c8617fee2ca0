from pydantic import BaseModel, ConfigDict
from typing import Optional, List
import uuid
from datetime import datetime


class NotificationResponse(BaseModel):
    """Схема для ответа с данными уведомления"""
    id: uuid.UUID
    recipient_id: uuid.UUID
    sender_id: Optional[uuid.UUID] = None
    type: str
    title: str
    message: str
    related_entity_id: Optional[uuid.UUID] = None
    is_read: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class NotificationListResponse(BaseModel):
    """Схема для списка уведомлений"""
    notifications: List[NotificationResponse]
    total: int
    page: int
    limit: int
    pages: int


class UnreadCountResponse(BaseModel):
    unread_count: int


class MarkAllReadResponse(BaseModel):
    message: str
    updated: int
