from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
import uuid

from campushub.core.auth import get_current_user_id
from campushub.core.db import get_db
from campushub.domains.comments.schemas import CommentCreate, CommentResponse, CommentThreadResponse
from campushub.domains.comments.services import CommentService
from campushub.domains.engagement.schemas import LikeToggleResponse
from campushub.domains.engagement.services import EngagementService
from campushub.domains.entities.content import EntityKind

router = APIRouter(prefix="/projects/{project_id}/updates", tags=["project updates"])


@router.post("/{update_id}/like", response_model=LikeToggleResponse)
async def toggle_update_like(
    project_id: uuid.UUID,
    update_id: uuid.UUID,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """Лайк или снятие лайка с обновления проекта"""
    result = await EngagementService(db).toggle_like(EntityKind.PROJECT_UPDATE, update_id, user_id)

    return LikeToggleResponse(
        liked=result.liked,
        like_count=result.like_count,
        message="Update liked" if result.liked else "Update unliked"
    )


@router.post("/{update_id}/comments", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
async def add_update_comment(
    project_id: uuid.UUID,
    update_id: uuid.UUID,
    comment_data: CommentCreate,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """Комментарий к обновлению проекта"""
    comment = await CommentService(db).add_root_comment(
        EntityKind.PROJECT_UPDATE, update_id, user_id, comment_data.content
    )
    return CommentResponse.model_validate(comment)


@router.get("/{update_id}/comments", response_model=CommentThreadResponse)
async def get_update_comments(
    project_id: uuid.UUID,
    update_id: uuid.UUID,
    db: AsyncSession = Depends(get_db)
):
    return await CommentService(db).get_comment_thread(EntityKind.PROJECT_UPDATE, update_id)
