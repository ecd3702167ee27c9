"""Proposal decision routes."""

import uuid

from fastapi import APIRouter, Depends
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import get_current_user, get_db
from app.api.schemas.common import APIResponse
from app.api.schemas.proposal import ProposalResponse
from app.db.models.user import User
from app.services.proposal import ProposalService

router = APIRouter(prefix="/proposals", tags=["Proposals"])


def get_proposal_service(db: AsyncSession = Depends(get_db)) -> ProposalService:
    return ProposalService(db)


@router.get("/my", response_model=APIResponse[list[ProposalResponse]])
async def my_proposals(
    current_user: User = Depends(get_current_user),
    service: ProposalService = Depends(get_proposal_service),
) -> APIResponse[list[ProposalResponse]]:
    """Proposals submitted by the caller."""
    proposals = await service.my_proposals(current_user)
    return APIResponse.ok([ProposalResponse.model_validate(p) for p in proposals])


@router.post("/{proposal_id}/accept", response_model=APIResponse[ProposalResponse])
async def accept_proposal(
    proposal_id: uuid.UUID,
    current_user: User = Depends(get_current_user),
    service: ProposalService = Depends(get_proposal_service),
) -> APIResponse[ProposalResponse]:
    """Accept a proposal; the project moves to in-progress."""
    logger.info(f"Accepting proposal: {proposal_id}")
    proposal = await service.accept_proposal(current_user, proposal_id)
    return APIResponse.ok(ProposalResponse.model_validate(proposal))


@router.post("/{proposal_id}/reject", response_model=APIResponse[ProposalResponse])
async def reject_proposal(
    proposal_id: uuid.UUID,
    current_user: User = Depends(get_current_user),
    service: ProposalService = Depends(get_proposal_service),
) -> APIResponse[ProposalResponse]:
    """Reject a proposal."""
    logger.info(f"Rejecting proposal: {proposal_id}")
    proposal = await service.reject_proposal(current_user, proposal_id)
    return APIResponse.ok(ProposalResponse.model_validate(proposal))
