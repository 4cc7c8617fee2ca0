import logging
import uuid
from typing import Dict, List

from sqlalchemy.ext.asyncio import AsyncSession

from campushub.db.repositories.content_repository import ContentRepository
from campushub.db.repositories.user_repository import UserRepository
from campushub.domains.comments.entities import COMMENT_POLICIES, CommentNode
from campushub.domains.comments.schemas import CommentAuthor, CommentThreadNode, CommentThreadResponse
from campushub.domains.entities.content import EntityKind
from campushub.domains.entities.user import UserEntity

logger = logging.getLogger(__name__)


class CommentService:
    """Сервис дерева комментариев сущности"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.content_repository = ContentRepository(session)
        self.user_repository = UserRepository(session)

    async def add_root_comment(
        self,
        kind: EntityKind,
        entity_id: uuid.UUID,
        author_id: uuid.UUID,
        content: str
    ) -> CommentNode:
        """Добавление корневого комментария"""
        text = COMMENT_POLICIES[kind].clean_content(content, is_reply=False)

        _, comment = await self.content_repository.mutate(
            kind, entity_id, lambda document: document.comments.add_root(author_id, text)
        )
        logger.info(f"Comment {comment.id} added to {kind.value} {entity_id} by {author_id}")
        return comment

    async def add_reply(
        self,
        kind: EntityKind,
        entity_id: uuid.UUID,
        target_id: uuid.UUID,
        author_id: uuid.UUID,
        content: str
    ) -> CommentNode:
        """Добавление ответа к комментарию на любой глубине"""
        text = COMMENT_POLICIES[kind].clean_content(content, is_reply=True)

        _, reply = await self.content_repository.mutate(
            kind, entity_id, lambda document: document.comments.add_reply(target_id, author_id, text)
        )
        logger.info(f"Reply {reply.id} added to comment {target_id} on {kind.value} {entity_id}")
        return reply

    async def get_comment_thread(self, kind: EntityKind, entity_id: uuid.UUID) -> CommentThreadResponse:
        """Дерево комментариев с данными авторов"""
        document = await self.content_repository.load(kind, entity_id)
        tree = document.comments
        authors = await self.user_repository.get_many(tree.author_ids())

        return CommentThreadResponse(
            entity_id=entity_id,
            max_depth=tree.max_depth,
            total=len(tree),
            comments=self._render(tree.roots, authors, 0, tree.max_depth)
        )

    def _render(
        self,
        nodes: List[CommentNode],
        authors: Dict[uuid.UUID, UserEntity],
        depth: int,
        max_depth: int
    ) -> List[CommentThreadNode]:
        if depth >= max_depth:
            return []

        rendered = []
        for node in nodes:
            author = authors.get(node.author_id)
            rendered.append(CommentThreadNode(
                id=node.id,
                author_id=node.author_id,
                content=node.content,
                created_at=node.created_at,
                author=CommentAuthor.model_validate(author) if author else None,
                replies=self._render(node.replies, authors, depth + 1, max_depth)
            ))
        return rendered
