import uuid

import pytest

from campushub.core.exceptions import NotFoundError
from campushub.domains.notifications.entities import NotificationType
from campushub.domains.notifications.services import NotificationEmitter, NotificationService


@pytest.fixture
def emit(session, owner_id):
    async def _emit(recipient_id: uuid.UUID, title: str = "Collaboration Request Accepted"):
        return await NotificationEmitter(session).emit(
            recipient_id,
            owner_id,
            NotificationType.COLLABORATION_REQUEST_ACCEPTED.value,
            title,
            "Your collaboration request has been accepted!"
        )
    return _emit


class TestNotificationService:

    async def test_emit_persists_unread_notification(self, session, make_user, emit):
        recipient = await make_user("Ben")

        notification = await emit(recipient)

        assert notification is not None
        assert notification.is_read is False
        assert await NotificationService(session).unread_count(recipient) == 1

    async def test_list_is_newest_first_and_paginated(self, session, make_user, emit):
        recipient = await make_user("Ben")
        for title in ("first", "second", "third"):
            await emit(recipient, title)

        service = NotificationService(session)
        page, total, pages = await service.list_notifications(recipient, page=1, limit=2)

        assert [item.title for item in page] == ["third", "second"]
        assert total == 3
        assert pages == 2

    async def test_mark_read_and_unread(self, session, make_user, emit):
        recipient = await make_user("Ben")
        notification = await emit(recipient)
        service = NotificationService(session)

        read = await service.mark_as_read(notification.id, recipient)
        assert read.is_read is True
        assert await service.unread_count(recipient) == 0

        unread = await service.mark_as_unread(notification.id, recipient)
        assert unread.is_read is False

    async def test_cannot_mark_someone_elses_notification(self, session, make_user, emit):
        recipient = await make_user("Ben")
        stranger = await make_user("Chen")
        notification = await emit(recipient)

        with pytest.raises(NotFoundError):
            await NotificationService(session).mark_as_read(notification.id, stranger)

    async def test_mark_all_as_read(self, session, make_user, emit):
        recipient = await make_user("Ben")
        await emit(recipient)
        await emit(recipient)
        service = NotificationService(session)

        assert await service.mark_all_as_read(recipient) == 2
        assert await service.unread_count(recipient) == 0

        _, unread_total, _ = await service.list_notifications(recipient, unread_only=True)
        assert unread_total == 0
