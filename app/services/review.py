"""Review service."""

import uuid
from typing import Sequence

from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import (
    DuplicateReviewError,
    ProjectNotFoundException,
    ReviewValidationError,
    UserNotFoundException,
)
from app.db.enums import ReviewType
from app.db.models.review import Review
from app.db.models.user import User
from app.db.repositories.project import ProjectRepository
from app.db.repositories.review import ReviewRepository
from app.db.repositories.user import UserRepository


class ReviewService:
    """Service layer for Review operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.repository = ReviewRepository(session)
        self.projects = ProjectRepository(session)
        self.users = UserRepository(session)

    async def create_review(
        self,
        caller: User,
        project_id: uuid.UUID,
        reviewee_id: uuid.UUID,
        rating: int,
        comment: str,
        review_type: ReviewType,
    ) -> Review:
        """Leave one review per (project, reviewer, reviewee) and refresh the reviewee's rating."""
        if reviewee_id == caller.id:
            raise ReviewValidationError("You cannot review yourself")
        if not 1 <= rating <= 5:
            raise ReviewValidationError("Rating must be between 1 and 5")

        if await self.projects.get_by_id(project_id) is None:
            raise ProjectNotFoundException(str(project_id))
        reviewee = await self.users.get_by_id(reviewee_id)
        if reviewee is None:
            raise UserNotFoundException(str(reviewee_id))

        if await self.repository.get_by_triple(project_id, caller.id, reviewee_id) is not None:
            raise DuplicateReviewError()

        try:
            review = await self.repository.create(
                Review(
                    project_id=project_id,
                    reviewer_id=caller.id,
                    reviewee_id=reviewee_id,
                    rating=rating,
                    comment=comment.strip(),
                    review_type=review_type.value,
                )
            )
            await self.session.commit()
        except IntegrityError as e:
            # Lost a race against an identical review
            await self.session.rollback()
            raise DuplicateReviewError() from e
        logger.info(f"Review {review.id} left by {caller.id} for {reviewee_id}")

        average = await self.repository.average_rating(reviewee_id)
        if average is not None:
            reviewee.rating = round(average, 2)
            await self.users.update(reviewee)
            await self.session.commit()
        return review

    async def list_reviews(
        self,
        project_id: uuid.UUID | None = None,
        user_id: uuid.UUID | None = None,
    ) -> Sequence[Review]:
        return await self.repository.get_filtered(project_id=project_id, reviewee_id=user_id)
