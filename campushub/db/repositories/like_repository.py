import uuid
from typing import List

from sqlalchemy import select, insert, delete, func, and_
from sqlalchemy.ext.asyncio import AsyncSession

from campushub.db.models.engagement import Like as LikeModel
from campushub.domains.engagement.entities import Like
from campushub.domains.entities.content import EntityKind


class LikeRepository:
    """Репозиторий множества лайков.

    Вставка и удаление адресуются парой (сущность, пользователь); уникальный
    индекс ``uq_likes_entity_user`` не дает появиться второму лайку.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    def _matches(self, kind: EntityKind, entity_id: uuid.UUID):
        return and_(LikeModel.entity_kind == kind.value, LikeModel.entity_id == entity_id)

    async def remove(self, kind: EntityKind, entity_id: uuid.UUID, user_id: uuid.UUID) -> bool:
        """Удаление лайка, если он есть"""
        stmt = (
            delete(LikeModel)
            .where(self._matches(kind, entity_id), LikeModel.user_id == user_id)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount > 0

    async def add(self, kind: EntityKind, entity_id: uuid.UUID, user_id: uuid.UUID) -> None:
        """Вставка лайка; при дубликате - IntegrityError"""
        await self.session.execute(
            insert(LikeModel).values(
                uuid=uuid.uuid4(),
                entity_kind=kind.value,
                entity_id=entity_id,
                user_id=user_id
            )
        )

    async def delete_by_entity(self, kind: EntityKind, entity_id: uuid.UUID) -> int:
        """Удаление всех лайков сущности"""
        stmt = (
            delete(LikeModel)
            .where(self._matches(kind, entity_id))
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount

    async def count(self, kind: EntityKind, entity_id: uuid.UUID) -> int:
        result = await self.session.execute(
            select(func.count(LikeModel.uuid)).where(self._matches(kind, entity_id))
        )
        return result.scalar() or 0

    async def has_liked(self, kind: EntityKind, entity_id: uuid.UUID, user_id: uuid.UUID) -> bool:
        result = await self.session.execute(
            select(LikeModel.uuid).where(self._matches(kind, entity_id), LikeModel.user_id == user_id)
        )
        return result.scalar_one_or_none() is not None

    async def get_by_entity(self, kind: EntityKind, entity_id: uuid.UUID) -> List[Like]:
        """Лайки сущности от старых к новым"""
        result = await self.session.execute(
            select(LikeModel)
            .where(self._matches(kind, entity_id))
            .order_by(LikeModel.created_at.asc())
        )
        return [Like(user_id=row.user_id, liked_at=row.created_at) for row in result.scalars().all()]
