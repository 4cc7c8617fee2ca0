import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import List


@dataclass(frozen=True)
class Like:
    user_id: uuid.UUID
    liked_at: datetime


@dataclass(frozen=True)
class LikeResult:
    """Состояние сразу после переключения лайка"""
    liked: bool
    like_count: int


@dataclass
class LikeSummary:
    like_count: int
    liked_by_viewer: bool
    likes: List[Like] = field(default_factory=list)
