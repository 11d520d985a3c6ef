import logging

from app.core.errors import UserNotFoundError
from app.core.security import SessionPayload, create_session_token
from app.domains.identity.entities import User
from app.domains.identity.schemas import ExternalIdentity
from app.domains.ports import UserRepositoryPort

logger = logging.getLogger(__name__)


class IdentityService:
    """Login collaborator: maps an external identity onto a local user.

    The OAuth callback lives outside this service. It calls ``sign_in``
    with the provider profile and ``issue_session_token`` for the user,
    then sets the session cookie that ``/auth/logout`` clears. No route
    here starts a login.
    """

    def __init__(self, user_repository: UserRepositoryPort):
        self.user_repository = user_repository

    async def sign_in(self, identity: ExternalIdentity) -> User:
        """Find the user by external id, creating it on first login"""
        user = await self.user_repository.find_by_external_id(identity.external_id)

        if user is not None:
            return user

        user = User.create_user(
            external_id=identity.external_id,
            email=identity.email,
            display_name=identity.display_name,
            avatar_url=identity.avatar_url
        )
        logger.info("Creating user for external id %s", identity.external_id)
        return await self.user_repository.create(user)

    async def get_user(self, user_id: str) -> User:
        user = await self.user_repository.find_by_id(user_id)

        if user is None:
            raise UserNotFoundError(user_id)

        return user

    def issue_session_token(self, user: User) -> str:
        """Signed session token for a signed-in user"""
        return create_session_token(
            SessionPayload(user_id=user.id, email=user.email, name=user.display_name)
        )
