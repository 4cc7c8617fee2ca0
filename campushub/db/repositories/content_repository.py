import logging
import uuid
from datetime import datetime
from typing import Callable, Dict, Tuple, TypeVar

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from campushub.core.config import settings
from campushub.core.exceptions import ConflictError, NotFoundError
from campushub.db.models.content import (
    Discussion as DiscussionModel,
    Project as ProjectModel,
    ProjectUpdate as ProjectUpdateModel
)
from campushub.domains.collaboration.entities import CollaborationRequest, ProjectTeam, TeamMember
from campushub.domains.comments.entities import COMMENT_POLICIES, CommentTree
from campushub.domains.entities.content import ContentDocument, EntityKind

logger = logging.getLogger(__name__)

T = TypeVar("T")

CONTENT_MODELS: Dict[EntityKind, type] = {
    EntityKind.DISCUSSION: DiscussionModel,
    EntityKind.PROJECT: ProjectModel,
    EntityKind.PROJECT_UPDATE: ProjectUpdateModel,
}

NOT_FOUND_MESSAGES = {
    EntityKind.DISCUSSION: "Discussion not found",
    EntityKind.PROJECT: "Project not found",
    EntityKind.PROJECT_UPDATE: "Project update not found",
}


class ContentRepository:
    """Репозиторий документов сущностей.

    Документ читается и записывается целиком. Запись условная: она проходит,
    только если ``version`` в базе совпадает с прочитанной, иначе
    ``ConflictError`` и цикл чтение-изменение-запись повторяется.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def exists(self, kind: EntityKind, entity_id: uuid.UUID) -> bool:
        """Проверка существования сущности"""
        model = CONTENT_MODELS[kind]
        result = await self.session.execute(select(model.uuid).where(model.uuid == entity_id))
        return result.scalar_one_or_none() is not None

    async def load(self, kind: EntityKind, entity_id: uuid.UUID) -> ContentDocument:
        """Загрузка документа сущности"""
        model = CONTENT_MODELS[kind]
        result = await self.session.execute(
            select(model)
            .where(model.uuid == entity_id)
            .execution_options(populate_existing=True)
        )
        db_entity = result.scalar_one_or_none()
        if db_entity is None:
            raise NotFoundError(NOT_FOUND_MESSAGES[kind])
        return self._to_domain(kind, db_entity)

    async def persist(self, document: ContentDocument) -> ContentDocument:
        """Условная запись документа целиком"""
        model = CONTENT_MODELS[document.kind]
        values = {
            "comments": document.comments.to_list(),
            "version": document.version + 1,
            "updated_at": datetime.utcnow()
        }
        if document.team is not None:
            values["team_members"] = document.team.members_to_list()
            values["collaboration_requests"] = document.team.requests_to_list()

        stmt = (
            update(model)
            .where(model.uuid == document.id, model.version == document.version)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)

        if result.rowcount != 1:
            await self.session.rollback()
            raise ConflictError(f"{document.kind.value} {document.id} was modified concurrently")

        await self.session.commit()
        document.version += 1
        return document

    async def mutate(
        self,
        kind: EntityKind,
        entity_id: uuid.UUID,
        mutation: Callable[[ContentDocument], T]
    ) -> Tuple[ContentDocument, T]:
        """Чтение, изменение и условная запись с повторами при конфликте.

        Исключения из ``mutation`` пробрасываются без записи.
        """
        attempts = settings.optimistic_retry_attempts
        for attempt in range(1, attempts + 1):
            document = await self.load(kind, entity_id)
            outcome = mutation(document)
            try:
                await self.persist(document)
            except ConflictError:
                logger.warning(
                    f"Version conflict on {kind.value} {entity_id}, attempt {attempt}/{attempts}"
                )
                continue
            return document, outcome

        raise ConflictError(f"Could not update {kind.value} {entity_id} after {attempts} attempts")

    def _to_domain(self, kind: EntityKind, db_entity) -> ContentDocument:
        """Преобразование модели БД в документ"""
        team = None
        if kind == EntityKind.PROJECT:
            team = ProjectTeam(
                project_id=db_entity.uuid,
                owner_id=db_entity.owner_id,
                looking_for_teammates=bool(db_entity.looking_for_teammates),
                members=[TeamMember.from_dict(item) for item in db_entity.team_members or []],
                requests=[CollaborationRequest.from_dict(item) for item in db_entity.collaboration_requests or []]
            )

        return ContentDocument(
            kind=kind,
            id=db_entity.uuid,
            title=db_entity.title,
            version=db_entity.version,
            comments=CommentTree.from_list(db_entity.comments, COMMENT_POLICIES[kind].max_depth),
            team=team
        )
