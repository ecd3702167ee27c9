"""Review routes."""

import uuid

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import get_current_user, get_db
from app.api.schemas.common import APIResponse
from app.api.schemas.review import ReviewCreate, ReviewResponse
from app.db.models.user import User
from app.services.review import ReviewService

router = APIRouter(prefix="/reviews", tags=["Reviews"])


def get_review_service(db: AsyncSession = Depends(get_db)) -> ReviewService:
    return ReviewService(db)


@router.post("", response_model=APIResponse[ReviewResponse], status_code=status.HTTP_201_CREATED)
async def create_review(
    data: ReviewCreate,
    current_user: User = Depends(get_current_user),
    service: ReviewService = Depends(get_review_service),
) -> APIResponse[ReviewResponse]:
    review = await service.create_review(caller=current_user, **data.model_dump())
    return APIResponse.ok(ReviewResponse.model_validate(review))


@router.get("", response_model=APIResponse[list[ReviewResponse]])
async def list_reviews(
    project_id: uuid.UUID | None = Query(default=None),
    user_id: uuid.UUID | None = Query(default=None, description="Reviewee"),
    service: ReviewService = Depends(get_review_service),
) -> APIResponse[list[ReviewResponse]]:
    reviews = await service.list_reviews(project_id=project_id, user_id=user_id)
    return APIResponse.ok([ReviewResponse.model_validate(r) for r in reviews])
