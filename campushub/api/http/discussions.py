from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
import uuid

from campushub.core.auth import get_current_user_id
from campushub.core.db import get_db
from campushub.domains.comments.schemas import CommentCreate, CommentResponse, CommentThreadResponse
from campushub.domains.comments.services import CommentService
from campushub.domains.engagement.schemas import LikeToggleResponse, LikeSummaryResponse
from campushub.domains.engagement.services import EngagementService
from campushub.domains.entities.content import EntityKind

router = APIRouter(prefix="/discussions", tags=["discussions"])


@router.post("/{discussion_id}/like", response_model=LikeToggleResponse)
async def toggle_discussion_like(
    discussion_id: uuid.UUID,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """Лайк или снятие лайка с обсуждения"""
    result = await EngagementService(db).toggle_like(EntityKind.DISCUSSION, discussion_id, user_id)

    return LikeToggleResponse(
        liked=result.liked,
        like_count=result.like_count,
        message="Discussion liked" if result.liked else "Discussion unliked"
    )


@router.get("/{discussion_id}/likes", response_model=LikeSummaryResponse)
async def get_discussion_likes(
    discussion_id: uuid.UUID,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """Список лайков обсуждения"""
    summary = await EngagementService(db).get_like_summary(EntityKind.DISCUSSION, discussion_id, user_id)
    return LikeSummaryResponse.model_validate(summary)


@router.post("/{discussion_id}/comments", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
async def add_discussion_comment(
    discussion_id: uuid.UUID,
    comment_data: CommentCreate,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """Добавление комментария к обсуждению"""
    comment = await CommentService(db).add_root_comment(
        EntityKind.DISCUSSION, discussion_id, user_id, comment_data.content
    )
    return CommentResponse.model_validate(comment)


@router.post(
    "/{discussion_id}/comments/{comment_id}/replies",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED
)
async def add_discussion_reply(
    discussion_id: uuid.UUID,
    comment_id: uuid.UUID,
    comment_data: CommentCreate,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """Ответ на комментарий или ответ любой глубины"""
    reply = await CommentService(db).add_reply(
        EntityKind.DISCUSSION, discussion_id, comment_id, user_id, comment_data.content
    )
    return CommentResponse.model_validate(reply)


@router.get("/{discussion_id}/comments", response_model=CommentThreadResponse)
async def get_discussion_comments(
    discussion_id: uuid.UUID,
    db: AsyncSession = Depends(get_db)
):
    """Дерево комментариев обсуждения"""
    return await CommentService(db).get_comment_thread(EntityKind.DISCUSSION, discussion_id)
