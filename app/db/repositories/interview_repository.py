import logging
from datetime import datetime, timezone
from typing import Optional, List, Dict, Any

from sqlalchemy import select, update, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.interview import Interview as InterviewModel
from app.domains.interviews.entities import Interview
from app.domains.ports import InterviewRepositoryPort

logger = logging.getLogger(__name__)


class InterviewRepository(InterviewRepositoryPort):
    """Interview storage backed by SQLAlchemy"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, interview: Interview) -> Interview:
        db_interview = InterviewModel(
            id=interview.id,
            user_id=interview.user_id,
            title=interview.title,
            description=interview.description,
            created_at=interview.created_at,
            updated_at=interview.updated_at
        )

        self.session.add(db_interview)
        await self.session.commit()
        await self.session.refresh(db_interview)
        return self._to_domain(db_interview)

    async def find_by_id(self, interview_id: str) -> Optional[Interview]:
        try:
            result = await self.session.execute(
                select(InterviewModel).where(InterviewModel.id == interview_id)
            )
            db_interview = result.scalar_one_or_none()
        except SQLAlchemyError:
            logger.exception("Failed to load interview %s", interview_id)
            await self.session.rollback()
            return None
        return self._to_domain(db_interview) if db_interview else None

    async def find_by_user_id(self, user_id: str) -> List[Interview]:
        """Interviews of a user, most recently updated first"""
        try:
            result = await self.session.execute(
                select(InterviewModel)
                .where(InterviewModel.user_id == user_id)
                .order_by(InterviewModel.updated_at.desc())
            )
            db_interviews = result.scalars().all()
        except SQLAlchemyError:
            logger.exception("Failed to list interviews of user %s", user_id)
            await self.session.rollback()
            return []
        return [self._to_domain(interview) for interview in db_interviews]

    async def update(self, interview_id: str, changes: Dict[str, Any]) -> Optional[Interview]:
        values = {key: changes[key] for key in ("title", "description") if key in changes}
        try:
            result = await self.session.execute(
                update(InterviewModel)
                .where(InterviewModel.id == interview_id)
                .values(**values, updated_at=datetime.now(timezone.utc))
            )
            await self.session.commit()
        except SQLAlchemyError:
            logger.exception("Failed to update interview %s", interview_id)
            await self.session.rollback()
            return None

        if result.rowcount == 0:
            return None
        return await self.find_by_id(interview_id)

    async def delete(self, interview_id: str) -> bool:
        try:
            result = await self.session.execute(
                delete(InterviewModel).where(InterviewModel.id == interview_id)
            )
            await self.session.commit()
        except SQLAlchemyError:
            logger.exception("Failed to delete interview %s", interview_id)
            await self.session.rollback()
            return False
        return result.rowcount > 0

    def _to_domain(self, db_interview: InterviewModel) -> Interview:
        """Map a database row to the domain entity"""
        return Interview(
            id=str(db_interview.id),
            user_id=str(db_interview.user_id),
            title=db_interview.title,
            description=db_interview.description,
            created_at=db_interview.created_at,
            updated_at=db_interview.updated_at
        )
