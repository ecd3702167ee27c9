"""Project API routes."""

import uuid

from fastapi import APIRouter, Depends, Query, status
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import get_current_user, get_db
from app.api.schemas.common import APIResponse
from app.api.schemas.project import (
    Pagination,
    ProjectCreate,
    ProjectListResponse,
    ProjectResponse,
    ProjectStatusUpdate,
)
from app.api.schemas.proposal import ProposalCreate, ProposalResponse
from app.db.models.user import User
from app.services.project import ProjectService
from app.services.proposal import ProposalService

router = APIRouter(prefix="/projects", tags=["Projects"])

STATUS_PATTERN = "^(open|in-progress|completed|all)$"


def get_project_service(db: AsyncSession = Depends(get_db)) -> ProjectService:
    """Dependency for project service."""
    return ProjectService(db)


def get_proposal_service(db: AsyncSession = Depends(get_db)) -> ProposalService:
    """Dependency for proposal service."""
    return ProposalService(db)


@router.post("", response_model=APIResponse[ProjectResponse], status_code=status.HTTP_201_CREATED)
async def create_project(
    data: ProjectCreate,
    current_user: User = Depends(get_current_user),
    service: ProjectService = Depends(get_project_service),
) -> APIResponse[ProjectResponse]:
    """Post a new project."""
    logger.info(f"Creating project: {data.title}")
    project = await service.create_project(caller=current_user, **data.model_dump())
    logger.info(f"Project created successfully: {project.id}")
    return APIResponse.ok(ProjectResponse.model_validate(project))


@router.get("", response_model=APIResponse[ProjectListResponse])
async def search_projects(
    q: str | None = Query(default=None, max_length=200),
    category: str | None = Query(default=None),
    min_budget: float | None = Query(default=None, ge=0),
    max_budget: float | None = Query(default=None, ge=0),
    status: str | None = Query(default=None, pattern=STATUS_PATTERN),
    skills: str | None = Query(default=None, description="Comma-separated skills"),
    sort_by: str = Query(default="created_at", pattern="^(created_at|budget|title)$"),
    sort_order: str = Query(default="desc", pattern="^(asc|desc)$"),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
    service: ProjectService = Depends(get_project_service),
) -> APIResponse[ProjectListResponse]:
    """Search projects. Defaults to open projects, newest first."""
    result = await service.search_projects(
        q=q,
        category=category,
        min_budget=min_budget,
        max_budget=max_budget,
        status=status,
        skills=skills.split(",") if skills else None,
        sort_by=sort_by,
        sort_order=sort_order,
        page=page,
        limit=limit,
    )
    return APIResponse.ok(
        ProjectListResponse(
            projects=[ProjectResponse.model_validate(p) for p in result.items],
            pagination=Pagination(
                page=result.page,
                limit=result.limit,
                total=result.total,
                pages=result.pages,
            ),
        )
    )


@router.get("/my", response_model=APIResponse[list[ProjectResponse]])
async def my_projects(
    status: str | None = Query(default=None, pattern=STATUS_PATTERN),
    current_user: User = Depends(get_current_user),
    service: ProjectService = Depends(get_project_service),
) -> APIResponse[list[ProjectResponse]]:
    """Projects the caller owns (clients) or works on (freelancers)."""
    projects = await service.my_projects(current_user, status)
    return APIResponse.ok([ProjectResponse.model_validate(p) for p in projects])


@router.get("/{project_id}", response_model=APIResponse[ProjectResponse])
async def get_project(
    project_id: uuid.UUID,
    service: ProjectService = Depends(get_project_service),
) -> APIResponse[ProjectResponse]:
    """Get project by ID."""
    logger.debug(f"Fetching project: {project_id}")
    project = await service.get_project(project_id)
    return APIResponse.ok(ProjectResponse.model_validate(project))


@router.patch("/{project_id}", response_model=APIResponse[ProjectResponse])
async def update_project_status(
    project_id: uuid.UUID,
    data: ProjectStatusUpdate,
    current_user: User = Depends(get_current_user),
    service: ProjectService = Depends(get_project_service),
) -> APIResponse[ProjectResponse]:
    """Mark an in-progress project completed (assigned freelancer only)."""
    logger.info(f"Updating project {project_id} status to {data.status.value}")
    project = await service.update_status(current_user, project_id, data.status)
    return APIResponse.ok(ProjectResponse.model_validate(project))


@router.post(
    "/{project_id}/proposals",
    response_model=APIResponse[ProposalResponse],
    status_code=status.HTTP_201_CREATED,
)
async def submit_proposal(
    project_id: uuid.UUID,
    data: ProposalCreate,
    current_user: User = Depends(get_current_user),
    service: ProposalService = Depends(get_proposal_service),
) -> APIResponse[ProposalResponse]:
    """Submit a proposal on an open project."""
    proposal = await service.submit_proposal(
        caller=current_user,
        project_id=project_id,
        cover_letter=data.cover_letter,
        proposed_budget=data.proposed_budget,
        timeline=data.timeline,
    )
    return APIResponse.ok(ProposalResponse.model_validate(proposal))


@router.get("/{project_id}/proposals", response_model=APIResponse[list[ProposalResponse]])
async def list_project_proposals(
    project_id: uuid.UUID,
    current_user: User = Depends(get_current_user),
    service: ProposalService = Depends(get_proposal_service),
) -> APIResponse[list[ProposalResponse]]:
    """Proposals on a project, for its owner."""
    proposals = await service.list_for_project(current_user, project_id)
    return APIResponse.ok([ProposalResponse.model_validate(p) for p in proposals])
