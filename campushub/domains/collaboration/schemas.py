from pydantic import BaseModel, Field, ConfigDict
from typing import Optional, List, Literal
import uuid
from datetime import datetime

from campushub.domains.collaboration.entities import RequestAction, RequestStatus, TeamRole


class CollaborationRequestCreate(BaseModel):
    """Схема для отправки заявки в команду"""
    message: Optional[str] = Field(None, max_length=300)


class CollaborationRequestDecision(BaseModel):
    """Решение владельца по заявке"""
    action: Literal["accept", "reject"]

    def to_action(self) -> RequestAction:
        return RequestAction(self.action)


class CollaborationRequestResponse(BaseModel):
    id: uuid.UUID
    user_id: uuid.UUID
    message: Optional[str] = None
    status: RequestStatus
    created_at: datetime
    resolved_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class CollaborationRequestListResponse(BaseModel):
    project_id: uuid.UUID
    requests: List[CollaborationRequestResponse]


class TeamMemberResponse(BaseModel):
    user_id: uuid.UUID
    role: TeamRole
    joined_at: datetime

    model_config = ConfigDict(from_attributes=True)


class TeamResponse(BaseModel):
    """Схема для состава команды проекта"""
    project_id: uuid.UUID
    owner_id: uuid.UUID
    looking_for_teammates: bool
    members: List[TeamMemberResponse]
