import logging
import uuid
from typing import Optional, List

from sqlalchemy.ext.asyncio import AsyncSession

from campushub.core.exceptions import AuthorizationDenied
from campushub.db.repositories.content_repository import ContentRepository
from campushub.domains.collaboration.entities import (
    CollaborationRequest, ProjectTeam, RequestAction, RequestStatus
)
from campushub.domains.entities.content import EntityKind
from campushub.domains.notifications.entities import NotificationType
from campushub.domains.notifications.services import NotificationEmitter

logger = logging.getLogger(__name__)


class CollaborationService:
    """Сервис заявок в команду проекта.

    Каждый переход записывается условной записью документа проекта, поэтому
    из двух параллельных решений по одной заявке проходит только одно.
    Уведомление отправляется после успешной записи и ровно один раз.
    """

    def __init__(self, session: AsyncSession, emitter: Optional[NotificationEmitter] = None):
        self.session = session
        self.content_repository = ContentRepository(session)
        self.emitter = emitter or NotificationEmitter(session)

    async def send_request(
        self,
        project_id: uuid.UUID,
        user_id: uuid.UUID,
        message: Optional[str] = None
    ) -> CollaborationRequest:
        """Отправка заявки на участие в проекте"""
        _, request = await self.content_repository.mutate(
            EntityKind.PROJECT, project_id, lambda document: document.team.submit_request(user_id, message)
        )
        logger.info(f"Collaboration request {request.id} sent by {user_id} to project {project_id}")
        return request

    async def handle_request(
        self,
        project_id: uuid.UUID,
        request_id: uuid.UUID,
        actor_id: uuid.UUID,
        action: RequestAction
    ) -> CollaborationRequest:
        """Принятие или отклонение заявки владельцем проекта"""
        document, request = await self.content_repository.mutate(
            EntityKind.PROJECT,
            project_id,
            lambda document: document.team.resolve_request(actor_id, request_id, action)
        )
        logger.info(
            f"Collaboration request {request_id} on project {project_id} is now {request.status.value}"
        )

        if request.status == RequestStatus.ACCEPTED:
            await self.emitter.emit(
                request.user_id,
                actor_id,
                NotificationType.COLLABORATION_REQUEST_ACCEPTED.value,
                "Collaboration Request Accepted",
                f'Your collaboration request for "{document.title}" has been accepted!',
                project_id
            )
        else:
            await self.emitter.emit(
                request.user_id,
                actor_id,
                NotificationType.COLLABORATION_REQUEST_REJECTED.value,
                "Collaboration Request Rejected",
                f'Your collaboration request for "{document.title}" has been rejected.',
                project_id
            )

        return request

    async def accept_request(self, project_id: uuid.UUID, request_id: uuid.UUID, actor_id: uuid.UUID) -> CollaborationRequest:
        return await self.handle_request(project_id, request_id, actor_id, RequestAction.ACCEPT)

    async def reject_request(self, project_id: uuid.UUID, request_id: uuid.UUID, actor_id: uuid.UUID) -> CollaborationRequest:
        return await self.handle_request(project_id, request_id, actor_id, RequestAction.REJECT)

    async def leave_project(self, project_id: uuid.UUID, user_id: uuid.UUID) -> None:
        """Выход участника из команды; заявки не меняются"""
        await self.content_repository.mutate(
            EntityKind.PROJECT, project_id, lambda document: document.team.remove_member(user_id)
        )
        logger.info(f"User {user_id} left project {project_id}")

    async def get_team(self, project_id: uuid.UUID) -> ProjectTeam:
        document = await self.content_repository.load(EntityKind.PROJECT, project_id)
        return document.team

    async def list_requests(
        self,
        project_id: uuid.UUID,
        actor_id: uuid.UUID,
        status: Optional[RequestStatus] = None
    ) -> List[CollaborationRequest]:
        """Заявки проекта; доступны только владельцу"""
        team = await self.get_team(project_id)
        if not team.is_owner(actor_id):
            raise AuthorizationDenied("Only the project owner can view collaboration requests")

        return [request for request in team.requests if status is None or request.status == status]
