from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
import uuid

from campushub.core.auth import get_current_user_id
from campushub.core.db import get_db
from campushub.domains.collaboration.entities import RequestStatus
from campushub.domains.collaboration.schemas import (
    CollaborationRequestCreate, CollaborationRequestDecision, CollaborationRequestResponse,
    CollaborationRequestListResponse, TeamMemberResponse, TeamResponse
)
from campushub.domains.collaboration.services import CollaborationService
from campushub.domains.comments.schemas import CommentCreate, CommentResponse, CommentThreadResponse
from campushub.domains.comments.services import CommentService
from campushub.domains.engagement.schemas import LikeToggleResponse, LikeSummaryResponse
from campushub.domains.engagement.services import EngagementService
from campushub.domains.entities.content import EntityKind

router = APIRouter(prefix="/projects", tags=["projects"])


@router.post("/{project_id}/like", response_model=LikeToggleResponse)
async def toggle_project_like(
    project_id: uuid.UUID,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """Лайк или снятие лайка с проекта"""
    result = await EngagementService(db).toggle_like(EntityKind.PROJECT, project_id, user_id)

    return LikeToggleResponse(
        liked=result.liked,
        like_count=result.like_count,
        message="Project liked" if result.liked else "Project unliked"
    )


@router.get("/{project_id}/likes", response_model=LikeSummaryResponse)
async def get_project_likes(
    project_id: uuid.UUID,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    summary = await EngagementService(db).get_like_summary(EntityKind.PROJECT, project_id, user_id)
    return LikeSummaryResponse.model_validate(summary)


@router.post("/{project_id}/comments", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
async def add_project_comment(
    project_id: uuid.UUID,
    comment_data: CommentCreate,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """Добавление комментария к проекту"""
    comment = await CommentService(db).add_root_comment(
        EntityKind.PROJECT, project_id, user_id, comment_data.content
    )
    return CommentResponse.model_validate(comment)


@router.get("/{project_id}/comments", response_model=CommentThreadResponse)
async def get_project_comments(
    project_id: uuid.UUID,
    db: AsyncSession = Depends(get_db)
):
    return await CommentService(db).get_comment_thread(EntityKind.PROJECT, project_id)


@router.post(
    "/{project_id}/collaborate",
    response_model=CollaborationRequestResponse,
    status_code=status.HTTP_201_CREATED
)
async def send_collaboration_request(
    project_id: uuid.UUID,
    request_data: CollaborationRequestCreate,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """Заявка на участие в команде проекта"""
    request = await CollaborationService(db).send_request(project_id, user_id, request_data.message)
    return CollaborationRequestResponse.model_validate(request)


@router.get("/{project_id}/requests", response_model=CollaborationRequestListResponse)
async def list_collaboration_requests(
    project_id: uuid.UUID,
    request_status: Optional[RequestStatus] = Query(None, alias="status"),
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """Заявки проекта (только для владельца)"""
    requests = await CollaborationService(db).list_requests(project_id, user_id, request_status)

    return CollaborationRequestListResponse(
        project_id=project_id,
        requests=[CollaborationRequestResponse.model_validate(request) for request in requests]
    )


@router.put("/{project_id}/requests/{request_id}", response_model=CollaborationRequestResponse)
async def handle_collaboration_request(
    project_id: uuid.UUID,
    request_id: uuid.UUID,
    decision: CollaborationRequestDecision,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """Принятие или отклонение заявки владельцем"""
    request = await CollaborationService(db).handle_request(
        project_id, request_id, user_id, decision.to_action()
    )
    return CollaborationRequestResponse.model_validate(request)


@router.post("/{project_id}/leave", status_code=status.HTTP_204_NO_CONTENT)
async def leave_project(
    project_id: uuid.UUID,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """Выход из команды проекта"""
    await CollaborationService(db).leave_project(project_id, user_id)


@router.get("/{project_id}/team", response_model=TeamResponse)
async def get_project_team(
    project_id: uuid.UUID,
    db: AsyncSession = Depends(get_db)
):
    """Текущий состав команды"""
    team = await CollaborationService(db).get_team(project_id)

    return TeamResponse(
        project_id=team.project_id,
        owner_id=team.owner_id,
        looking_for_teammates=team.looking_for_teammates,
        members=[TeamMemberResponse.model_validate(member) for member in team.members]
    )
