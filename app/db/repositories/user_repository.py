import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.user import User as UserModel
from app.domains.identity.entities import User
from app.domains.ports import UserRepositoryPort

logger = logging.getLogger(__name__)


class UserRepository(UserRepositoryPort):
    """User storage; used by the login collaborator only"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, user: User) -> User:
        """Create a new user"""
        db_user = UserModel(
            id=user.id,
            external_id=user.external_id,
            email=user.email,
            display_name=user.display_name,
            avatar_url=user.avatar_url,
            created_at=user.created_at
        )

        self.session.add(db_user)
        await self.session.commit()
        await self.session.refresh(db_user)
        return self._to_domain(db_user)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        return await self._find_one(UserModel.id == user_id)

    async def find_by_external_id(self, external_id: str) -> Optional[User]:
        return await self._find_one(UserModel.external_id == external_id)

    async def _find_one(self, condition) -> Optional[User]:
        try:
            result = await self.session.execute(select(UserModel).where(condition))
            db_user = result.scalar_one_or_none()
        except SQLAlchemyError:
            logger.exception("Failed to load user")
            await self.session.rollback()
            return None
        return self._to_domain(db_user) if db_user else None

    def _to_domain(self, db_user: UserModel) -> User:
        """Map a database row to the domain entity"""
        return User(
            id=str(db_user.id),
            external_id=db_user.external_id,
            email=db_user.email,
            display_name=db_user.display_name,
            avatar_url=db_user.avatar_url,
            created_at=db_user.created_at
        )
