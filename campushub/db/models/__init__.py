from campushub.db.models.user import User
from campushub.db.models.content import Discussion, Project, ProjectUpdate
from campushub.db.models.engagement import Like
from campushub.db.models.notification import Notification

__all__ = [
    "User",
    "Discussion",
    "Project",
    "ProjectUpdate",
    "Like",
    "Notification"
]
