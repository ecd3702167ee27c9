"""Review repository for database operations."""

import uuid
from typing import Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.review import Review


class ReviewRepository:
    """Repository for Review CRUD operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, review: Review) -> Review:
        """Create a new review."""
        self.session.add(review)
        await self.session.flush()
        await self.session.refresh(review)
        return review

    async def get_by_triple(
        self,
        project_id: uuid.UUID,
        reviewer_id: uuid.UUID,
        reviewee_id: uuid.UUID,
    ) -> Review | None:
        """Get the review for a (project, reviewer, reviewee) combination (duplicate detection)."""
        result = await self.session.execute(
            select(Review).where(
                Review.project_id == project_id,
                Review.reviewer_id == reviewer_id,
                Review.reviewee_id == reviewee_id,
            )
        )
        return result.scalar_one_or_none()

    async def get_filtered(
        self,
        project_id: uuid.UUID | None = None,
        reviewee_id: uuid.UUID | None = None,
    ) -> Sequence[Review]:
        """List reviews filtered by project and/or reviewee, newest first."""
        stmt = select(Review)
        if project_id is not None:
            stmt = stmt.where(Review.project_id == project_id)
        if reviewee_id is not None:
            stmt = stmt.where(Review.reviewee_id == reviewee_id)
        result = await self.session.execute(stmt.order_by(Review.created_at.desc()))
        return result.scalars().all()

    async def average_rating(self, reviewee_id: uuid.UUID) -> float | None:
        """Mean rating received by a user, or None without reviews."""
        result = await self.session.execute(
            select(func.avg(Review.rating)).where(Review.reviewee_id == reviewee_id)
        )
        value = result.scalar_one_or_none()
        return float(value) if value is not None else None
