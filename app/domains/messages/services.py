from typing import List, Optional, Sequence

from app.core.errors import DocumentNotFoundError
from app.domains.access import OwnershipVerifier
from app.domains.messages.entities import Message, MessageRole
from app.domains.ports import (
    DocumentRepositoryPort, InterviewRepositoryPort, MessageRepositoryPort, TakeRepositoryPort
)


class MessageService:
    """Transcript messages of a take.

    Ownership runs Message -> Take -> Interview -> User. Enabled document
    ids are stored as given unless ``validate_enabled_documents`` is set,
    in which case each id must name a document of the take's interview.
    """

    def __init__(
        self,
        interview_repository: InterviewRepositoryPort,
        take_repository: TakeRepositoryPort,
        message_repository: MessageRepositoryPort,
        document_repository: Optional[DocumentRepositoryPort] = None,
        validate_enabled_documents: bool = False
    ):
        if validate_enabled_documents and document_repository is None:
            raise ValueError("document_repository is required to validate enabled documents")

        self.take_repository = take_repository
        self.message_repository = message_repository
        self.document_repository = document_repository
        self.validate_enabled_documents = validate_enabled_documents
        self.verifier = OwnershipVerifier(interview_repository)

    async def list_take_messages(self, take_id: str, user_id: str) -> List[Message]:
        """Messages of an owned take, oldest first"""
        await self.verifier.verify_take_access(self.take_repository, take_id, user_id)
        return await self.message_repository.find_by_take_id(take_id)

    async def create_message(
        self,
        take_id: str,
        user_id: str,
        role: MessageRole,
        content: str,
        enabled_document_ids: Sequence[str] = ()
    ) -> Message:
        """Append a message to an owned take"""
        take = await self.verifier.verify_take_access(self.take_repository, take_id, user_id)

        if self.validate_enabled_documents:
            await self._check_enabled_documents(take.interview_id, enabled_document_ids)

        message = Message.create_message(
            take_id=take_id,
            role=role,
            content=content,
            enabled_document_ids=list(enabled_document_ids)
        )
        return await self.message_repository.create(message)

    async def _check_enabled_documents(self, interview_id: str, document_ids: Sequence[str]) -> None:
        for document_id in document_ids:
            document = await self.document_repository.find_by_id(document_id)
            if document is None or document.interview_id != interview_id:
                raise DocumentNotFoundError(document_id)
