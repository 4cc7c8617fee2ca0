import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, List, Dict, Any, Iterator, Tuple

from campushub.core.exceptions import NotFoundError, ValidationError, DepthLimitExceeded
from campushub.domains.entities.content import EntityKind


@dataclass(frozen=True)
class CommentPolicy:
    """Ограничения дерева комментариев для типа сущности.

    ``max_depth`` - число уровней: узел на глубине ``max_depth - 1`` не
    принимает ответов.
    """
    max_depth: int
    root_max_length: int
    reply_max_length: int

    def clean_content(self, content: str, is_reply: bool) -> str:
        """Проверка текста комментария"""
        text = (content or "").strip()
        if not text:
            raise ValidationError("Comment content cannot be empty")

        limit = self.reply_max_length if is_reply else self.root_max_length
        if len(text) > limit:
            raise ValidationError(f"Comment content exceeds {limit} characters")
        return text


COMMENT_POLICIES: Dict[EntityKind, CommentPolicy] = {
    EntityKind.DISCUSSION: CommentPolicy(max_depth=3, root_max_length=1000, reply_max_length=500),
    EntityKind.PROJECT: CommentPolicy(max_depth=1, root_max_length=500, reply_max_length=500),
    EntityKind.PROJECT_UPDATE: CommentPolicy(max_depth=1, root_max_length=500, reply_max_length=500),
}


class CommentNode:
    """Комментарий или ответ внутри дерева"""

    def __init__(
        self,
        author_id: uuid.UUID,
        content: str,
        id: Optional[uuid.UUID] = None,
        created_at: Optional[datetime] = None,
        replies: Optional[List["CommentNode"]] = None
    ):
        self.id = id or uuid.uuid4()
        self.author_id = author_id
        self.content = content
        self.created_at = created_at or datetime.utcnow()
        self.replies: List[CommentNode] = replies or []

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация узла вместе с ответами"""
        return {
            "id": str(self.id),
            "author_id": str(self.author_id),
            "content": self.content,
            "created_at": self.created_at.isoformat(),
            "replies": [reply.to_dict() for reply in self.replies]
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CommentNode":
        return cls(
            id=uuid.UUID(data["id"]),
            author_id=uuid.UUID(data["author_id"]),
            content=data["content"],
            created_at=datetime.fromisoformat(data["created_at"]),
            replies=[cls.from_dict(reply) for reply in data.get("replies") or []]
        )

    def __repr__(self) -> str:
        return f"CommentNode(id={self.id}, author={self.author_id}, replies={len(self.replies)})"


class CommentTree:
    """Упорядоченный список корневых комментариев сущности.

    Родительских ссылок и индекса путей нет: узел ищется обходом в глубину
    в порядке документа.
    """

    def __init__(self, roots: Optional[List[CommentNode]] = None, max_depth: int = 3):
        self.roots: List[CommentNode] = roots or []
        self.max_depth = max_depth

    def walk(self) -> Iterator[Tuple[CommentNode, int]]:
        """Обход (узел, глубина) в порядке документа, не глубже ``max_depth``"""
        stack = [(node, 0) for node in reversed(self.roots)]
        while stack:
            node, depth = stack.pop()
            yield node, depth
            if depth + 1 < self.max_depth:
                stack.extend((reply, depth + 1) for reply in reversed(node.replies))

    def find(self, node_id: uuid.UUID) -> Optional[Tuple[CommentNode, int]]:
        """Первый узел с данным id и его глубина"""
        for node, depth in self.walk():
            if node.id == node_id:
                return node, depth
        return None

    def add_root(self, author_id: uuid.UUID, content: str) -> CommentNode:
        node = CommentNode(author_id=author_id, content=content)
        self.roots.append(node)
        return node

    def add_reply(self, target_id: uuid.UUID, author_id: uuid.UUID, content: str) -> CommentNode:
        """Добавление ответа последним потомком узла ``target_id``"""
        found = self.find(target_id)
        if found is None:
            raise NotFoundError("Comment not found")

        target, depth = found
        if depth >= self.max_depth - 1:
            raise DepthLimitExceeded(f"Replies are limited to {self.max_depth} levels")

        reply = CommentNode(author_id=author_id, content=content)
        target.replies.append(reply)
        return reply

    def author_ids(self) -> set:
        return {node.author_id for node, _ in self.walk()}

    def to_list(self) -> List[Dict[str, Any]]:
        return [node.to_dict() for node in self.roots]

    @classmethod
    def from_list(cls, data: Optional[List[Dict[str, Any]]], max_depth: int) -> "CommentTree":
        return cls(roots=[CommentNode.from_dict(item) for item in data or []], max_depth=max_depth)

    def __len__(self) -> int:
        return sum(1 for _ in self.walk())

    def __repr__(self) -> str:
        return f"CommentTree(roots={len(self.roots)}, max_depth={self.max_depth})"
