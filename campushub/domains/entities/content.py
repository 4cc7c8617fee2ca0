from dataclasses import dataclass
from enum import Enum
from uuid import UUID
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from campushub.domains.comments.entities import CommentTree
    from campushub.domains.collaboration.entities import ProjectTeam


class EntityKind(str, Enum):
    """Типы сущностей, которые можно лайкать и комментировать"""
    DISCUSSION = "discussion"
    PROJECT = "project"
    PROJECT_UPDATE = "project_update"


@dataclass
class ContentDocument:
    """Документ сущности, загружаемый и сохраняемый целиком.

    ``version`` - ревизия, с которой документ был прочитан; запись проходит
    только если в базе та же ревизия.
    """
    kind: EntityKind
    id: UUID
    title: str
    version: int
    comments: "CommentTree"
    # Только у проектов
    team: Optional["ProjectTeam"] = None
