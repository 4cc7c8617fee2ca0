from campushub.domains.notifications.entities import Notification, NotificationType
from campushub.domains.notifications.schemas import (
    NotificationResponse, NotificationListResponse, UnreadCountResponse, MarkAllReadResponse
)

__all__ = [
    "Notification", "NotificationType",
    "NotificationResponse", "NotificationListResponse", "UnreadCountResponse", "MarkAllReadResponse"
]
