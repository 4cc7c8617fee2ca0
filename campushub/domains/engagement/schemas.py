from pydantic import BaseModel, ConfigDict
from typing import List
import uuid
from datetime import datetime


class LikeToggleResponse(BaseModel):
    """Схема ответа на переключение лайка"""
    liked: bool
    like_count: int
    message: str


class LikeResponse(BaseModel):
    user_id: uuid.UUID
    liked_at: datetime

    model_config = ConfigDict(from_attributes=True)


class LikeSummaryResponse(BaseModel):
    """Схема для списка лайков сущности"""
    like_count: int
    liked_by_viewer: bool
    likes: List[LikeResponse]

    model_config = ConfigDict(from_attributes=True)
