import logging
from typing import List, Optional

from app.core.errors import InterviewNotFoundError
from app.domains.access import OwnershipVerifier
from app.domains.interviews.entities import Interview
from app.domains.interviews.schemas import InterviewUpdate
from app.domains.ports import DocumentRepositoryPort, InterviewRepositoryPort

logger = logging.getLogger(__name__)


class InterviewService:
    """Authorized CRUD for interviews, including the document cascade on delete"""

    def __init__(
        self,
        interview_repository: InterviewRepositoryPort,
        document_repository: DocumentRepositoryPort
    ):
        self.interview_repository = interview_repository
        self.document_repository = document_repository
        self.verifier = OwnershipVerifier(interview_repository)

    async def create_interview(self, user_id: str, title: str, description: Optional[str] = None) -> Interview:
        """Create an interview owned by user_id"""
        interview = Interview.create_interview(user_id=user_id, title=title, description=description)
        return await self.interview_repository.create(interview)

    async def list_user_interviews(self, user_id: str) -> List[Interview]:
        """All interviews of user_id; the filter is the authorization"""
        return await self.interview_repository.find_by_user_id(user_id)

    async def get_interview(self, interview_id: str, user_id: str) -> Interview:
        return await self.verifier.verify_interview_access(interview_id, user_id)

    async def update_interview(self, interview_id: str, user_id: str, update_data: InterviewUpdate) -> Interview:
        """Apply a partial update to an owned interview"""
        await self.verifier.verify_interview_access(interview_id, user_id)

        updated = await self.interview_repository.update(interview_id, update_data.changes())

        # deleted between the check and the write
        if updated is None:
            raise InterviewNotFoundError(interview_id)

        return updated

    async def delete_interview(self, interview_id: str, user_id: str) -> None:
        """Delete an owned interview together with its documents.

        Documents are removed one by one before the interview; takes and
        messages are removed by the storage cascade. A failure midway may
        leave orphaned documents behind.
        """
        await self.verifier.verify_interview_access(interview_id, user_id)

        documents = await self.document_repository.find_by_interview_id(interview_id)
        for document in documents:
            await self.document_repository.delete(document.id)

        await self.interview_repository.delete(interview_id)
        logger.info("Deleted interview %s with %d documents", interview_id, len(documents))
