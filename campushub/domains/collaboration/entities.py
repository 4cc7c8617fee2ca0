import uuid
from datetime import datetime
from enum import Enum
from typing import Optional, List, Dict, Any

from campushub.core.exceptions import (
    AuthorizationDenied, InvalidStateError, NotFoundError, OwnerCannotLeave
)


class RequestStatus(str, Enum):
    """Статусы заявки на участие в проекте"""
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class RequestAction(str, Enum):
    """Переходы, которые можно запросить для заявки"""
    SUBMIT = "submit"
    ACCEPT = "accept"
    REJECT = "reject"


class TeamRole(str, Enum):
    OWNER = "Owner"
    MEMBER = "Member"


# Разрешенные переходы; все остальные пары (статус, действие) отклоняются
_TRANSITIONS = {
    (None, RequestAction.SUBMIT): RequestStatus.PENDING,
    (RequestStatus.PENDING, RequestAction.ACCEPT): RequestStatus.ACCEPTED,
    (RequestStatus.PENDING, RequestAction.REJECT): RequestStatus.REJECTED,
}


def next_status(current: Optional[RequestStatus], action: RequestAction) -> RequestStatus:
    """Статус после перехода ``action`` из ``current`` (None - заявки еще нет)"""
    try:
        return _TRANSITIONS[(current, action)]
    except KeyError:
        state = current.value if current else "none"
        raise InvalidStateError(f"Cannot {action.value} a collaboration request in state '{state}'")


class TeamMember:
    """Участник команды проекта"""

    def __init__(self, user_id: uuid.UUID, role: TeamRole = TeamRole.MEMBER, joined_at: Optional[datetime] = None):
        self.user_id = user_id
        self.role = role
        self.joined_at = joined_at or datetime.utcnow()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "user_id": str(self.user_id),
            "role": self.role.value,
            "joined_at": self.joined_at.isoformat()
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TeamMember":
        return cls(
            user_id=uuid.UUID(data["user_id"]),
            role=TeamRole(data.get("role", TeamRole.MEMBER.value)),
            joined_at=datetime.fromisoformat(data["joined_at"])
        )

    def __repr__(self) -> str:
        return f"TeamMember(user={self.user_id}, role={self.role.value})"


class CollaborationRequest:
    """Заявка пользователя на вступление в команду проекта"""

    def __init__(
        self,
        user_id: uuid.UUID,
        message: Optional[str] = None,
        status: RequestStatus = RequestStatus.PENDING,
        id: Optional[uuid.UUID] = None,
        created_at: Optional[datetime] = None,
        resolved_at: Optional[datetime] = None
    ):
        self.id = id or uuid.uuid4()
        self.user_id = user_id
        self.message = message
        self.status = status
        self.created_at = created_at or datetime.utcnow()
        self.resolved_at = resolved_at

    def apply(self, action: RequestAction) -> RequestStatus:
        """Применение перехода к заявке"""
        self.status = next_status(self.status, action)
        self.resolved_at = datetime.utcnow()
        return self.status

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": str(self.id),
            "user_id": str(self.user_id),
            "message": self.message,
            "status": self.status.value,
            "created_at": self.created_at.isoformat(),
            "resolved_at": self.resolved_at.isoformat() if self.resolved_at else None
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CollaborationRequest":
        return cls(
            id=uuid.UUID(data["id"]),
            user_id=uuid.UUID(data["user_id"]),
            message=data.get("message"),
            status=RequestStatus(data["status"]),
            created_at=datetime.fromisoformat(data["created_at"]),
            resolved_at=datetime.fromisoformat(data["resolved_at"]) if data.get("resolved_at") else None
        )

    def __repr__(self) -> str:
        return f"CollaborationRequest(id={self.id}, user={self.user_id}, status={self.status.value})"


class ProjectTeam:
    """Команда проекта и заявки в нее.

    ``members`` - единственный источник текущего членства; принятая заявка
    остается историческим фактом и после выхода участника.
    """

    def __init__(
        self,
        project_id: uuid.UUID,
        owner_id: uuid.UUID,
        looking_for_teammates: bool = False,
        members: Optional[List[TeamMember]] = None,
        requests: Optional[List[CollaborationRequest]] = None
    ):
        self.project_id = project_id
        self.owner_id = owner_id
        self.looking_for_teammates = looking_for_teammates
        self.members: List[TeamMember] = members or []
        self.requests: List[CollaborationRequest] = requests or []

    def is_owner(self, user_id: uuid.UUID) -> bool:
        return user_id == self.owner_id

    def is_member(self, user_id: uuid.UUID) -> bool:
        return any(member.user_id == user_id for member in self.members)

    def find_request(self, request_id: uuid.UUID) -> Optional[CollaborationRequest]:
        return next((request for request in self.requests if request.id == request_id), None)

    def latest_request_for(self, user_id: uuid.UUID) -> Optional[CollaborationRequest]:
        """Последняя заявка пользователя"""
        user_requests = [request for request in self.requests if request.user_id == user_id]
        return user_requests[-1] if user_requests else None

    def submit_request(self, user_id: uuid.UUID, message: Optional[str] = None) -> CollaborationRequest:
        """Создание заявки в статусе pending"""
        if not self.looking_for_teammates:
            raise InvalidStateError("Project is not looking for teammates")

        if self.is_owner(user_id) or self.is_member(user_id):
            raise AuthorizationDenied("You are already a member of this project")

        existing = self.latest_request_for(user_id)
        if existing is not None and existing.status == RequestStatus.PENDING:
            raise AuthorizationDenied("Collaboration request already sent")

        status = next_status(existing.status if existing else None, RequestAction.SUBMIT)
        request = CollaborationRequest(user_id=user_id, message=message, status=status)
        self.requests.append(request)
        return request

    def resolve_request(
        self,
        actor_id: uuid.UUID,
        request_id: uuid.UUID,
        action: RequestAction
    ) -> CollaborationRequest:
        """Принятие или отклонение заявки владельцем проекта"""
        if not self.is_owner(actor_id):
            raise AuthorizationDenied("Only the project owner can handle collaboration requests")

        request = self.find_request(request_id)
        if request is None:
            raise NotFoundError("Collaboration request not found")

        request.apply(action)

        if request.status == RequestStatus.ACCEPTED and not self.is_member(request.user_id):
            self.members.append(TeamMember(user_id=request.user_id, role=TeamRole.MEMBER))

        return request

    def remove_member(self, user_id: uuid.UUID) -> TeamMember:
        """Выход участника из команды"""
        if self.is_owner(user_id):
            raise OwnerCannotLeave()

        member = next((member for member in self.members if member.user_id == user_id), None)
        if member is None:
            raise NotFoundError("You are not a member of this project")

        self.members.remove(member)
        return member

    def members_to_list(self) -> List[Dict[str, Any]]:
        return [member.to_dict() for member in self.members]

    def requests_to_list(self) -> List[Dict[str, Any]]:
        return [request.to_dict() for request in self.requests]

    def __repr__(self) -> str:
        return f"ProjectTeam(project={self.project_id}, members={len(self.members)}, requests={len(self.requests)})"
