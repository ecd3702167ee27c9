"""Proposal service: submission, acceptance and rejection.

Accepting a proposal touches three entities in sequence, each step committed
on its own (there is no cross-entity transaction):

1. the proposal becomes ``accepted``;
2. the project becomes ``in-progress`` with the proposal's freelancer assigned;
3. optionally, the project's other pending proposals become ``rejected``.

Notifications are written afterwards and are best-effort. Two concurrent
accepts on the same open project are not serialized: both may pass the
``open`` check and the last project write wins.
"""

import uuid
from typing import Sequence

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from app.config.settings import settings
from app.core.exceptions import (
    ForbiddenError,
    InvalidProjectStateError,
    InvalidProposalStateError,
    ProjectNotFoundException,
    ProposalNotFoundException,
)
from app.db.enums import NotificationType, ProjectStatus, ProposalStatus, UserRole
from app.db.models.project import Project
from app.db.models.proposal import Proposal
from app.db.models.user import User
from app.db.repositories.project import ProjectRepository
from app.db.repositories.proposal import ProposalRepository
from app.services.notification import NotificationSink
from app.services.project import project_url


class ProposalService:
    """Service layer for Proposal operations."""

    def __init__(self, session: AsyncSession, sink: NotificationSink | None = None):
        self.session = session
        self.repository = ProposalRepository(session)
        self.projects = ProjectRepository(session)
        self.sink = sink or NotificationSink()

    async def _get_project(self, project_id: uuid.UUID) -> Project:
        project = await self.projects.get_by_id(project_id)
        if project is None:
            raise ProjectNotFoundException(str(project_id))
        return project

    async def _get_owned_proposal(
        self,
        caller: User,
        proposal_id: uuid.UUID,
    ) -> tuple[Proposal, Project]:
        """Load a proposal and its project, checking the caller owns the project."""
        proposal = await self.repository.get_by_id(proposal_id)
        if proposal is None:
            raise ProposalNotFoundException(str(proposal_id))

        project = await self._get_project(proposal.project_id)
        if project.client_id != caller.id:
            raise ForbiddenError("Only the project owner can decide on its proposals")
        return proposal, project

    async def submit_proposal(
        self,
        caller: User,
        project_id: uuid.UUID,
        cover_letter: str,
        proposed_budget: float,
        timeline: str,
    ) -> Proposal:
        """Submit a pending bid on an open project and notify its client."""
        if not caller.has_role(UserRole.FREELANCER):
            raise ForbiddenError("Only freelancers can submit proposals")

        project = await self._get_project(project_id)
        if project.status != ProjectStatus.OPEN.value:
            raise InvalidProjectStateError(
                current=project.status,
                required=ProjectStatus.OPEN.value,
                action="submit a proposal",
            )

        proposal = await self.repository.create(
            Proposal(
                project_id=project.id,
                freelancer_id=caller.id,
                cover_letter=cover_letter,
                proposed_budget=proposed_budget,
                timeline=timeline,
                status=ProposalStatus.PENDING.value,
            )
        )
        await self.session.commit()
        logger.info(f"Proposal {proposal.id} submitted by {caller.id} on project {project.id}")

        await self.sink.append(
            user_id=project.client_id,
            type=NotificationType.PROPOSAL_RECEIVED,
            title="New Proposal Received",
            message=f'{caller.full_name} submitted a proposal for "{project.title}"',
            related_id=proposal.id,
            action_url=project_url(project.id),
        )
        return proposal

    async def accept_proposal(self, caller: User, proposal_id: uuid.UUID) -> Proposal:
        """Accept a pending proposal, assign its freelancer and start the project."""
        proposal, project = await self._get_owned_proposal(caller, proposal_id)

        if proposal.status != ProposalStatus.PENDING.value:
            raise InvalidProposalStateError(proposal.status, "accept")
        if project.status != ProjectStatus.OPEN.value:
            raise InvalidProjectStateError(
                current=project.status,
                required=ProjectStatus.OPEN.value,
                action="accept a proposal",
            )

        proposal.status = ProposalStatus.ACCEPTED.value
        proposal = await self.repository.update(proposal)
        await self.session.commit()

        project.status = ProjectStatus.IN_PROGRESS.value
        project.selected_freelancer_id = proposal.freelancer_id
        project = await self.projects.update(project)
        await self.session.commit()
        logger.info(
            f"Proposal {proposal.id} accepted; project {project.id} in progress "
            f"with freelancer {proposal.freelancer_id}"
        )

        rejected: list[Proposal] = []
        if settings.AUTO_REJECT_SIBLING_PROPOSALS:
            rejected = await self._reject_siblings(proposal)

        await self.sink.append(
            user_id=proposal.freelancer_id,
            type=NotificationType.PROPOSAL_ACCEPTED,
            title="Proposal Accepted!",
            message=f'Your proposal for "{project.title}" has been accepted.',
            related_id=project.id,
            action_url=project_url(project.id),
        )
        for sibling in rejected:
            await self._notify_rejected(sibling, project)
        return proposal

    async def _reject_siblings(self, accepted: Proposal) -> list[Proposal]:
        siblings = await self.repository.get_pending_siblings(accepted.project_id, accepted.id)
        for sibling in siblings:
            sibling.status = ProposalStatus.REJECTED.value
        if siblings:
            await self.session.commit()
            logger.info(
                f"Auto-rejected {len(siblings)} pending proposal(s) on project {accepted.project_id}"
            )
        return list(siblings)

    async def reject_proposal(self, caller: User, proposal_id: uuid.UUID) -> Proposal:
        """Reject a pending proposal. The project is left unchanged."""
        proposal, project = await self._get_owned_proposal(caller, proposal_id)

        if proposal.status != ProposalStatus.PENDING.value:
            raise InvalidProposalStateError(proposal.status, "reject")

        proposal.status = ProposalStatus.REJECTED.value
        proposal = await self.repository.update(proposal)
        await self.session.commit()
        logger.info(f"Proposal {proposal.id} rejected")

        await self._notify_rejected(proposal, project)
        return proposal

    async def _notify_rejected(self, proposal: Proposal, project: Project) -> None:
        await self.sink.append(
            user_id=proposal.freelancer_id,
            type=NotificationType.PROPOSAL_REJECTED,
            title="Proposal Rejected",
            message=f'Your proposal for "{project.title}" was not selected.',
            related_id=project.id,
            action_url=project_url(project.id),
        )

    async def list_for_project(self, caller: User, project_id: uuid.UUID) -> Sequence[Proposal]:
        """Proposals on a project, visible to its owning client."""
        project = await self._get_project(project_id)
        if project.client_id != caller.id:
            raise ForbiddenError("Only the project owner can view its proposals")
        return await self.repository.get_by_project(project.id)

    async def my_proposals(self, caller: User) -> Sequence[Proposal]:
        """Proposals the calling freelancer has submitted."""
        return await self.repository.get_by_freelancer(caller.id)
