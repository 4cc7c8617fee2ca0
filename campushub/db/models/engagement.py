from sqlalchemy import Column, String, Uuid, UniqueConstraint

from campushub.db.base import BaseModel


class Like(BaseModel):
    __tablename__ = "likes"
    __table_args__ = (
        # Один лайк на пару (сущность, пользователь)
        UniqueConstraint("entity_kind", "entity_id", "user_id", name="uq_likes_entity_user"),
    )

    entity_kind = Column(String(20), nullable=False)
    entity_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    user_id = Column(Uuid(as_uuid=True), nullable=False)
