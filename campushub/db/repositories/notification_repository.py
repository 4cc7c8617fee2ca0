from typing import Optional, List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, func, and_
import uuid

from campushub.db.models.notification import Notification as NotificationModel
from campushub.domains.notifications.entities import Notification


class NotificationRepository:
    """Репозиторий для работы с уведомлениями"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, notification: Notification) -> Notification:
        """Создание уведомления"""
        db_notification = NotificationModel(
            uuid=notification.id,
            recipient_id=notification.recipient_id,
            sender_id=notification.sender_id,
            type=notification.type,
            title=notification.title,
            message=notification.message,
            related_entity_id=notification.related_entity_id,
            is_read=notification.is_read,
            created_at=notification.created_at
        )

        self.session.add(db_notification)
        await self.session.commit()
        await self.session.refresh(db_notification)
        return self._to_domain(db_notification)

    def _recipient_filter(self, recipient_id: uuid.UUID, unread_only: bool):
        conditions = [NotificationModel.recipient_id == recipient_id]
        if unread_only:
            conditions.append(NotificationModel.is_read == False)  # noqa: E712
        return and_(*conditions)

    async def get_by_recipient(
        self,
        recipient_id: uuid.UUID,
        limit: int = 20,
        offset: int = 0,
        unread_only: bool = False
    ) -> List[Notification]:
        """Уведомления получателя, новые сначала"""
        result = await self.session.execute(
            select(NotificationModel)
            .where(self._recipient_filter(recipient_id, unread_only))
            .order_by(NotificationModel.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        return [self._to_domain(row) for row in result.scalars().all()]

    async def count_by_recipient(self, recipient_id: uuid.UUID, unread_only: bool = False) -> int:
        result = await self.session.execute(
            select(func.count(NotificationModel.uuid))
            .where(self._recipient_filter(recipient_id, unread_only))
        )
        return result.scalar() or 0

    async def set_read(
        self,
        notification_id: uuid.UUID,
        recipient_id: uuid.UUID,
        is_read: bool = True
    ) -> Optional[Notification]:
        """Переключение флага прочтения; только для своего уведомления"""
        stmt = (
            update(NotificationModel)
            .where(
                NotificationModel.uuid == notification_id,
                NotificationModel.recipient_id == recipient_id
            )
            .values(is_read=is_read)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()

        if result.rowcount == 0:
            return None

        row = await self.session.execute(
            select(NotificationModel)
            .where(NotificationModel.uuid == notification_id)
            .execution_options(populate_existing=True)
        )
        return self._to_domain(row.scalar_one())

    async def mark_all_as_read(self, recipient_id: uuid.UUID) -> int:
        stmt = (
            update(NotificationModel)
            .where(self._recipient_filter(recipient_id, unread_only=True))
            .values(is_read=True)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount

    def _to_domain(self, db_notification: NotificationModel) -> Notification:
        """Преобразование модели БД в доменную сущность"""
        return Notification(
            id=db_notification.uuid,
            recipient_id=db_notification.recipient_id,
            sender_id=db_notification.sender_id,
            type=db_notification.type,
            title=db_notification.title,
            message=db_notification.message,
            related_entity_id=db_notification.related_entity_id,
            is_read=db_notification.is_read,
            created_at=db_notification.created_at
        )
