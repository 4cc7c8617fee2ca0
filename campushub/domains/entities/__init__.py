from campushub.domains.entities.content import EntityKind, ContentDocument
from campushub.domains.entities.user import UserEntity

__all__ = ["EntityKind", "ContentDocument", "UserEntity"]
