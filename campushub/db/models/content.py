from sqlalchemy import Column, String, Text, Integer, Boolean, ForeignKey, JSON, Uuid

from campushub.db.base import BaseModel


class EngageableMixin:
    """Колонки сущности, у которой есть лайки и дерево комментариев.

    Дерево комментариев хранится целиком в JSON и переписывается только
    условной записью по ``version``.
    """

    comments = Column(JSON, nullable=False, default=list)
    version = Column(Integer, nullable=False, default=1)


class Discussion(EngageableMixin, BaseModel):
    __tablename__ = "discussions"

    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=False)
    author_id = Column(Uuid(as_uuid=True), ForeignKey("users.uuid"), nullable=False)
    category = Column(String(50), default="general")


class Project(EngageableMixin, BaseModel):
    __tablename__ = "projects"

    title = Column(String(100), nullable=False)
    description = Column(Text, nullable=False)
    owner_id = Column(Uuid(as_uuid=True), ForeignKey("users.uuid"), nullable=False)
    looking_for_teammates = Column(Boolean, default=False, nullable=False)
    team_members = Column(JSON, nullable=False, default=list)
    collaboration_requests = Column(JSON, nullable=False, default=list)


class ProjectUpdate(EngageableMixin, BaseModel):
    __tablename__ = "project_updates"

    project_id = Column(Uuid(as_uuid=True), ForeignKey("projects.uuid"), nullable=False, index=True)
    author_id = Column(Uuid(as_uuid=True), ForeignKey("users.uuid"), nullable=False)
    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=False)
    update_type = Column(String(20), default="status")
