import logging
import uuid
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from campushub.core.config import settings
from campushub.core.exceptions import ConflictError, NotFoundError
from campushub.db.repositories.content_repository import ContentRepository, NOT_FOUND_MESSAGES
from campushub.db.repositories.like_repository import LikeRepository
from campushub.domains.engagement.entities import LikeResult, LikeSummary
from campushub.domains.entities.content import EntityKind

logger = logging.getLogger(__name__)


class EngagementService:
    """Сервис лайков обсуждений, проектов и обновлений проектов.

    Лайк переключается атомарной операцией над множеством, а не
    перезаписью документа сущности: удаление по паре (сущность, пользователь),
    а если удалять нечего - вставка под уникальным индексом.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.content_repository = ContentRepository(session)
        self.like_repository = LikeRepository(session)

    async def toggle_like(self, kind: EntityKind, entity_id: uuid.UUID, user_id: uuid.UUID) -> LikeResult:
        """Поставить лайк, если его нет, иначе снять"""
        if not await self.content_repository.exists(kind, entity_id):
            raise NotFoundError(NOT_FOUND_MESSAGES[kind])

        attempts = settings.like_retry_attempts
        for attempt in range(1, attempts + 1):
            try:
                removed = await self.like_repository.remove(kind, entity_id, user_id)
                if not removed:
                    await self.like_repository.add(kind, entity_id, user_id)
                await self.session.commit()
            except IntegrityError:
                # Параллельный запрос того же пользователя успел вставить лайк
                await self.session.rollback()
                logger.info(
                    f"Concurrent like on {kind.value} {entity_id} by {user_id}, attempt {attempt}/{attempts}"
                )
                continue

            like_count = await self.like_repository.count(kind, entity_id)
            logger.info(
                f"User {user_id} {'unliked' if removed else 'liked'} {kind.value} {entity_id} ({like_count} likes)"
            )
            return LikeResult(liked=not removed, like_count=like_count)

        raise ConflictError(f"Could not toggle like on {kind.value} {entity_id}")

    async def clear_likes(self, kind: EntityKind, entity_id: uuid.UUID) -> int:
        """Удаление лайков вместе с сущностью; вызывается кодом, удаляющим сущность"""
        removed = await self.like_repository.delete_by_entity(kind, entity_id)
        await self.session.commit()
        logger.info(f"Removed {removed} likes of {kind.value} {entity_id}")
        return removed

    async def get_like_summary(
        self,
        kind: EntityKind,
        entity_id: uuid.UUID,
        viewer_id: Optional[uuid.UUID] = None
    ) -> LikeSummary:
        """Лайки сущности и отметка текущего пользователя"""
        if not await self.content_repository.exists(kind, entity_id):
            raise NotFoundError(NOT_FOUND_MESSAGES[kind])

        likes = await self.like_repository.get_by_entity(kind, entity_id)
        return LikeSummary(
            like_count=len(likes),
            liked_by_viewer=any(like.user_id == viewer_id for like in likes),
            likes=likes
        )
