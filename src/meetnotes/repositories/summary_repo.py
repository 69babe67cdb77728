"""Summary repository for database operations."""

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from meetnotes.domain.errors import StoreError
from meetnotes.domain.summary import Summary
from meetnotes.infrastructure.models import SummaryModel

# Driver-level connection failures (e.g. asyncpg refusing a connection) surface as OSError
STORE_FAILURES = (SQLAlchemyError, OSError)


class SummaryRepository:
    """Repository for Summary CRUD operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session."""
        self.session = session

    async def create(self, summary: Summary) -> SummaryModel:
        """Insert a new summary; id and created_at come from the model defaults."""
        model = SummaryModel(
            original_transcript=summary.original_transcript,
            custom_prompt=summary.custom_prompt,
            generated_summary=summary.generated_summary,
        )
        if summary.created_at is not None:
            model.created_at = summary.created_at

        try:
            self.session.add(model)
            await self.session.commit()
        except STORE_FAILURES as e:
            await self._rollback()
            raise StoreError("Failed to save summary.", e) from e
        return model

    async def list_newest_first(self) -> list[SummaryModel]:
        """List all summaries ordered by creation time, newest first."""
        stmt = select(SummaryModel).order_by(SummaryModel.created_at.desc())
        try:
            result = await self.session.execute(stmt)
        except STORE_FAILURES as e:
            raise StoreError("Failed to fetch summaries.", e) from e
        return list(result.scalars().all())

    async def get_by_id(self, summary_id: str) -> SummaryModel | None:
        """Get a summary by its ID."""
        try:
            return await self.session.get(SummaryModel, summary_id)
        except STORE_FAILURES as e:
            raise StoreError("Failed to fetch summary.", e) from e

    async def update_generated_summary(
        self, summary_id: str, generated_summary: str
    ) -> SummaryModel | None:
        """Replace the generated text of a summary.

        Returns:
            The updated model, or None if no summary has this ID
        """
        model = await self.get_by_id(summary_id)
        if model is None:
            return None

        try:
            model.generated_summary = generated_summary
            await self.session.commit()
        except STORE_FAILURES as e:
            await self._rollback()
            raise StoreError("Failed to update summary.", e) from e
        return model

    async def delete_by_id(self, summary_id: str) -> SummaryModel | None:
        """Delete a summary.

        Returns:
            The deleted model, or None if no summary has this ID
        """
        model = await self.get_by_id(summary_id)
        if model is None:
            return None

        try:
            await self.session.delete(model)
            await self.session.commit()
        except STORE_FAILURES as e:
            await self._rollback()
            raise StoreError("Failed to delete summary.", e) from e
        return model

    async def count(self) -> int:
        """Get total summary count."""
        stmt = select(func.count(SummaryModel.id))
        try:
            result = await self.session.execute(stmt)
        except STORE_FAILURES as e:
            raise StoreError("Failed to count summaries.", e) from e
        return result.scalar() or 0

    async def _rollback(self) -> None:
        try:
            await self.session.rollback()
        except STORE_FAILURES:
            # Connection already gone; the original error is what gets reported
            pass
