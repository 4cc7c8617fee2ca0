from campushub.domains.collaboration.entities import (
    RequestStatus, RequestAction, TeamRole, TeamMember, CollaborationRequest,
    ProjectTeam, next_status
)
from campushub.domains.collaboration.schemas import (
    CollaborationRequestCreate, CollaborationRequestDecision, CollaborationRequestResponse,
    CollaborationRequestListResponse, TeamMemberResponse, TeamResponse
)

__all__ = [
    "RequestStatus", "RequestAction", "TeamRole", "TeamMember", "CollaborationRequest",
    "ProjectTeam", "next_status",
    "CollaborationRequestCreate", "CollaborationRequestDecision", "CollaborationRequestResponse",
    "CollaborationRequestListResponse", "TeamMemberResponse", "TeamResponse"
]
