from campushub.db.repositories.user_repository import UserRepository
from campushub.db.repositories.content_repository import ContentRepository, CONTENT_MODELS
from campushub.db.repositories.like_repository import LikeRepository
from campushub.db.repositories.notification_repository import NotificationRepository

__all__ = [
    "UserRepository",
    "ContentRepository",
    "CONTENT_MODELS",
    "LikeRepository",
    "NotificationRepository"
]
