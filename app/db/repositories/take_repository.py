import logging
from datetime import datetime, timezone
from typing import Optional, List

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.take import Take as TakeModel
from app.domains.ports import TakeRepositoryPort
from app.domains.takes.entities import Take, TakeStage

logger = logging.getLogger(__name__)


class TakeRepository(TakeRepositoryPort):
    """Take storage backed by SQLAlchemy"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, take: Take) -> Take:
        db_take = TakeModel(
            id=take.id,
            interview_id=take.interview_id,
            stage=TakeStage(take.stage),
            created_at=take.created_at,
            updated_at=take.updated_at
        )

        self.session.add(db_take)
        await self.session.commit()
        await self.session.refresh(db_take)
        return self._to_domain(db_take)

    async def find_by_id(self, take_id: str) -> Optional[Take]:
        try:
            result = await self.session.execute(
                select(TakeModel).where(TakeModel.id == take_id)
            )
            db_take = result.scalar_one_or_none()
        except SQLAlchemyError:
            logger.exception("Failed to load take %s", take_id)
            await self.session.rollback()
            return None
        return self._to_domain(db_take) if db_take else None

    async def find_by_interview_id(self, interview_id: str) -> List[Take]:
        try:
            result = await self.session.execute(
                select(TakeModel)
                .where(TakeModel.interview_id == interview_id)
                .order_by(TakeModel.created_at.desc())
            )
            db_takes = result.scalars().all()
        except SQLAlchemyError:
            logger.exception("Failed to list takes of interview %s", interview_id)
            await self.session.rollback()
            return []
        return [self._to_domain(take) for take in db_takes]

    async def update_stage(self, take_id: str, stage: TakeStage) -> Optional[Take]:
        try:
            result = await self.session.execute(
                update(TakeModel)
                .where(TakeModel.id == take_id)
                .values(stage=TakeStage(stage), updated_at=datetime.now(timezone.utc))
            )
            await self.session.commit()
        except SQLAlchemyError:
            logger.exception("Failed to update stage of take %s", take_id)
            await self.session.rollback()
            return None

        if result.rowcount == 0:
            return None
        return await self.find_by_id(take_id)

    def _to_domain(self, db_take: TakeModel) -> Take:
        return Take(
            id=str(db_take.id),
            interview_id=str(db_take.interview_id),
            stage=TakeStage(db_take.stage),
            created_at=db_take.created_at,
            updated_at=db_take.updated_at
        )
