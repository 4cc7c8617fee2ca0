from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
import uuid

from campushub.core.auth import get_current_user_id
from campushub.core.db import get_db
from campushub.domains.notifications.schemas import (
    NotificationResponse, NotificationListResponse, UnreadCountResponse, MarkAllReadResponse
)
from campushub.domains.notifications.services import NotificationService

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=NotificationListResponse)
async def get_notifications(
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    unread_only: bool = Query(False, alias="unreadOnly"),
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """Уведомления текущего пользователя"""
    notifications, total, pages = await NotificationService(db).list_notifications(
        user_id, page=page, limit=limit, unread_only=unread_only
    )

    return NotificationListResponse(
        notifications=[NotificationResponse.model_validate(item) for item in notifications],
        total=total,
        page=page,
        limit=limit,
        pages=pages
    )


@router.get("/unread-count", response_model=UnreadCountResponse)
async def get_unread_count(
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    count = await NotificationService(db).unread_count(user_id)
    return UnreadCountResponse(unread_count=count)


@router.put("/mark-all-read", response_model=MarkAllReadResponse)
async def mark_all_notifications_read(
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    updated = await NotificationService(db).mark_all_as_read(user_id)
    return MarkAllReadResponse(message="All notifications marked as read", updated=updated)


@router.put("/{notification_id}/read", response_model=NotificationResponse)
async def mark_notification_read(
    notification_id: uuid.UUID,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """Отметка уведомления прочитанным"""
    notification = await NotificationService(db).mark_as_read(notification_id, user_id)
    return NotificationResponse.model_validate(notification)


@router.put("/{notification_id}/unread", response_model=NotificationResponse)
async def mark_notification_unread(
    notification_id: uuid.UUID,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    notification = await NotificationService(db).mark_as_unread(notification_id, user_id)
    return NotificationResponse.model_validate(notification)
