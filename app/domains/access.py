import logging

from app.core.errors import InterviewNotFoundError, TakeNotFoundError, UnauthorizedError
from app.domains.interviews.entities import Interview
from app.domains.ports import InterviewRepositoryPort, TakeRepositoryPort
from app.domains.takes.entities import Take

logger = logging.getLogger(__name__)


class OwnershipVerifier:
    """Decides whether a user may act on an interview or anything below it.

    Documents, takes and messages are resolved to their parent interview
    first; the owner comparison itself only happens in
    ``verify_interview_access``.
    """

    def __init__(self, interview_repository: InterviewRepositoryPort):
        self.interview_repository = interview_repository

    async def verify_interview_access(self, interview_id: str, user_id: str) -> Interview:
        """Load the interview and check that user_id owns it"""
        interview = await self.interview_repository.find_by_id(interview_id)

        if interview is None:
            raise InterviewNotFoundError(interview_id)

        if not interview.is_owned_by(user_id):
            logger.warning("User %s denied access to interview %s", user_id, interview_id)
            raise UnauthorizedError("You do not have access to this interview")

        return interview

    async def verify_take_access(self, take_repository: TakeRepositoryPort, take_id: str, user_id: str) -> Take:
        """Resolve a take and check its parent interview"""
        take = await take_repository.find_by_id(take_id)

        if take is None:
            raise TakeNotFoundError(take_id)

        await self.verify_interview_access(take.interview_id, user_id)
        return take
