import uuid

import pytest

from campushub.core.exceptions import (
    AuthorizationDenied, InvalidStateError, NotFoundError, OwnerCannotLeave
)
from campushub.domains.collaboration.entities import (
    ProjectTeam, RequestAction, RequestStatus, TeamMember, TeamRole, next_status
)

OWNER = uuid.uuid4()
APPLICANT = uuid.uuid4()


def make_team(looking_for_teammates: bool = True) -> ProjectTeam:
    return ProjectTeam(
        project_id=uuid.uuid4(),
        owner_id=OWNER,
        looking_for_teammates=looking_for_teammates,
        members=[TeamMember(user_id=OWNER, role=TeamRole.OWNER)]
    )


class TestNextStatus:

    @pytest.mark.parametrize("current, action, expected", [
        (None, RequestAction.SUBMIT, RequestStatus.PENDING),
        (RequestStatus.PENDING, RequestAction.ACCEPT, RequestStatus.ACCEPTED),
        (RequestStatus.PENDING, RequestAction.REJECT, RequestStatus.REJECTED),
    ])
    def test_allowed_transitions(self, current, action, expected):
        assert next_status(current, action) == expected

    @pytest.mark.parametrize("current, action", [
        (None, RequestAction.ACCEPT),
        (None, RequestAction.REJECT),
        (RequestStatus.PENDING, RequestAction.SUBMIT),
        (RequestStatus.ACCEPTED, RequestAction.SUBMIT),
        (RequestStatus.ACCEPTED, RequestAction.ACCEPT),
        (RequestStatus.ACCEPTED, RequestAction.REJECT),
        (RequestStatus.REJECTED, RequestAction.SUBMIT),
        (RequestStatus.REJECTED, RequestAction.ACCEPT),
        (RequestStatus.REJECTED, RequestAction.REJECT),
    ])
    def test_every_other_pair_is_rejected(self, current, action):
        with pytest.raises(InvalidStateError):
            next_status(current, action)


class TestProjectTeam:

    def test_submit_creates_pending_request(self):
        team = make_team()

        request = team.submit_request(APPLICANT, "I can help with the backend")

        assert request.status == RequestStatus.PENDING
        assert team.requests == [request]
        assert not team.is_member(APPLICANT)

    def test_submit_requires_open_project(self):
        team = make_team(looking_for_teammates=False)

        with pytest.raises(InvalidStateError):
            team.submit_request(APPLICANT)
        assert team.requests == []

    def test_owner_and_duplicate_requests_are_denied(self):
        team = make_team()
        team.submit_request(APPLICANT)

        with pytest.raises(AuthorizationDenied):
            team.submit_request(OWNER)
        with pytest.raises(AuthorizationDenied):
            team.submit_request(APPLICANT)
        assert len(team.requests) == 1

    def test_member_cannot_request_again(self):
        team = make_team()
        request = team.submit_request(APPLICANT)
        team.resolve_request(OWNER, request.id, RequestAction.ACCEPT)

        with pytest.raises(AuthorizationDenied):
            team.submit_request(APPLICANT, "Once more")
        assert len(team.requests) == 1

    def test_rejected_applicant_cannot_resubmit(self):
        team = make_team()
        request = team.submit_request(APPLICANT)
        team.resolve_request(OWNER, request.id, RequestAction.REJECT)

        with pytest.raises(InvalidStateError):
            team.submit_request(APPLICANT)

    def test_accept_adds_member_once(self):
        team = make_team()
        request = team.submit_request(APPLICANT)

        team.resolve_request(OWNER, request.id, RequestAction.ACCEPT)

        assert request.status == RequestStatus.ACCEPTED
        assert request.resolved_at is not None
        assert [(member.user_id, member.role) for member in team.members] == [
            (OWNER, TeamRole.OWNER),
            (APPLICANT, TeamRole.MEMBER),
        ]

        with pytest.raises(InvalidStateError):
            team.resolve_request(OWNER, request.id, RequestAction.ACCEPT)
        assert len(team.members) == 2

    def test_only_owner_resolves(self):
        team = make_team()
        request = team.submit_request(APPLICANT)

        with pytest.raises(AuthorizationDenied):
            team.resolve_request(APPLICANT, request.id, RequestAction.ACCEPT)
        assert request.status == RequestStatus.PENDING

    def test_unknown_request(self):
        team = make_team()

        with pytest.raises(NotFoundError):
            team.resolve_request(OWNER, uuid.uuid4(), RequestAction.REJECT)

    def test_member_leaves_but_request_stays_accepted(self):
        team = make_team()
        request = team.submit_request(APPLICANT)
        team.resolve_request(OWNER, request.id, RequestAction.ACCEPT)

        team.remove_member(APPLICANT)

        assert not team.is_member(APPLICANT)
        assert request.status == RequestStatus.ACCEPTED

    def test_owner_cannot_leave(self):
        team = make_team()

        with pytest.raises(OwnerCannotLeave):
            team.remove_member(OWNER)
        assert team.is_member(OWNER)

    def test_non_member_cannot_leave(self):
        with pytest.raises(NotFoundError):
            make_team().remove_member(APPLICANT)
