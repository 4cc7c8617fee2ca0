import logging
import math
import uuid
from typing import Optional, List, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from campushub.core.exceptions import NotFoundError
from campushub.db.repositories.notification_repository import NotificationRepository
from campushub.domains.notifications.entities import Notification

logger = logging.getLogger(__name__)


class NotificationEmitter:
    """Запись уведомлений по принципу fire-and-forget.

    Ошибка сохранения не отменяет основную операцию вызывающего: она
    логируется, а ``emit`` возвращает None.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.notification_repository = NotificationRepository(session)

    async def emit(
        self,
        recipient_id: uuid.UUID,
        sender_id: Optional[uuid.UUID],
        type: str,
        title: str,
        message: str,
        related_entity_id: Optional[uuid.UUID] = None
    ) -> Optional[Notification]:
        notification = Notification(
            recipient_id=recipient_id,
            sender_id=sender_id,
            type=type,
            title=title,
            message=message,
            related_entity_id=related_entity_id
        )

        try:
            created = await self.notification_repository.create(notification)
        except Exception:
            await self.session.rollback()
            logger.exception(f"Error creating {type} notification for {recipient_id}")
            return None

        logger.info(f"Notification {created.id} ({type}) sent to {recipient_id}")
        return created


class NotificationService:
    """Чтение уведомлений получателем и отметка о прочтении"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.notification_repository = NotificationRepository(session)

    async def list_notifications(
        self,
        recipient_id: uuid.UUID,
        page: int = 1,
        limit: int = 20,
        unread_only: bool = False
    ) -> Tuple[List[Notification], int, int]:
        """Страница уведомлений, общее число и число страниц"""
        offset = (page - 1) * limit
        notifications = await self.notification_repository.get_by_recipient(
            recipient_id, limit=limit, offset=offset, unread_only=unread_only
        )
        total = await self.notification_repository.count_by_recipient(recipient_id, unread_only=unread_only)
        return notifications, total, math.ceil(total / limit) if limit else 0

    async def mark_as_read(self, notification_id: uuid.UUID, recipient_id: uuid.UUID) -> Notification:
        return await self._set_read(notification_id, recipient_id, True)

    async def mark_as_unread(self, notification_id: uuid.UUID, recipient_id: uuid.UUID) -> Notification:
        return await self._set_read(notification_id, recipient_id, False)

    async def mark_all_as_read(self, recipient_id: uuid.UUID) -> int:
        updated = await self.notification_repository.mark_all_as_read(recipient_id)
        logger.info(f"Marked {updated} notifications as read for {recipient_id}")
        return updated

    async def unread_count(self, recipient_id: uuid.UUID) -> int:
        return await self.notification_repository.count_by_recipient(recipient_id, unread_only=True)

    async def _set_read(self, notification_id: uuid.UUID, recipient_id: uuid.UUID, is_read: bool) -> Notification:
        notification = await self.notification_repository.set_read(notification_id, recipient_id, is_read)
        if notification is None:
            raise NotFoundError("Notification not found")
        return notification
