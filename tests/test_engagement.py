import asyncio
import uuid

import pytest

from campushub.core.exceptions import NotFoundError
from campushub.domains.engagement.services import EngagementService
from campushub.domains.entities.content import EntityKind


class TestToggleLike:

    async def test_like_then_unlike(self, session, discussion_id, make_user):
        user_id = await make_user("Ben")
        service = EngagementService(session)

        liked = await service.toggle_like(EntityKind.DISCUSSION, discussion_id, user_id)
        assert liked.liked is True
        assert liked.like_count == 1

        unliked = await service.toggle_like(EntityKind.DISCUSSION, discussion_id, user_id)
        assert unliked.liked is False
        assert unliked.like_count == 0

    async def test_likes_are_scoped_per_entity(self, session, discussion_id, project_id, owner_id):
        service = EngagementService(session)

        await service.toggle_like(EntityKind.DISCUSSION, discussion_id, owner_id)
        result = await service.toggle_like(EntityKind.PROJECT, project_id, owner_id)

        assert result.like_count == 1

    async def test_project_update_can_be_liked(self, session, project_update_id, owner_id):
        result = await EngagementService(session).toggle_like(
            EntityKind.PROJECT_UPDATE, project_update_id, owner_id
        )
        assert result.liked is True

    async def test_unknown_entity(self, session, owner_id):
        with pytest.raises(NotFoundError):
            await EngagementService(session).toggle_like(EntityKind.DISCUSSION, uuid.uuid4(), owner_id)

    async def test_concurrent_likes_from_distinct_users(self, session_factory, discussion_id, make_user):
        user_ids = [await make_user(f"User{index}") for index in range(4)]

        async def like(user_id):
            async with session_factory() as session:
                return await EngagementService(session).toggle_like(EntityKind.DISCUSSION, discussion_id, user_id)

        results = await asyncio.gather(*(like(user_id) for user_id in user_ids))

        assert all(result.liked for result in results)
        async with session_factory() as session:
            summary = await EngagementService(session).get_like_summary(EntityKind.DISCUSSION, discussion_id)
        assert summary.like_count == 4


class TestClearLikes:

    async def test_clear_removes_only_that_entity(self, session, discussion_id, project_id, make_user):
        users = [await make_user(name) for name in ("Ben", "Chen")]
        service = EngagementService(session)
        for user_id in users:
            await service.toggle_like(EntityKind.DISCUSSION, discussion_id, user_id)
        await service.toggle_like(EntityKind.PROJECT, project_id, users[0])

        assert await service.clear_likes(EntityKind.DISCUSSION, discussion_id) == 2

        discussion = await service.get_like_summary(EntityKind.DISCUSSION, discussion_id)
        project = await service.get_like_summary(EntityKind.PROJECT, project_id)
        assert discussion.like_count == 0
        assert project.like_count == 1


class TestLikeSummary:

    async def test_summary_marks_viewer(self, session, discussion_id, owner_id, make_user):
        other = await make_user("Chen")
        service = EngagementService(session)
        await service.toggle_like(EntityKind.DISCUSSION, discussion_id, owner_id)

        mine = await service.get_like_summary(EntityKind.DISCUSSION, discussion_id, owner_id)
        theirs = await service.get_like_summary(EntityKind.DISCUSSION, discussion_id, other)

        assert mine.like_count == 1
        assert mine.liked_by_viewer is True
        assert [like.user_id for like in mine.likes] == [owner_id]
        assert theirs.liked_by_viewer is False

    async def test_summary_unknown_entity(self, session):
        with pytest.raises(NotFoundError):
            await EngagementService(session).get_like_summary(EntityKind.PROJECT, uuid.uuid4())
