from typing import List

from app.core.errors import DocumentNotFoundError
from app.domains.access import OwnershipVerifier
from app.domains.documents.entities import Document
from app.domains.documents.schemas import DocumentUpdate
from app.domains.ports import DocumentRepositoryPort, InterviewRepositoryPort


class DocumentService:
    """Documents of an interview, checked against the interview owner"""

    def __init__(
        self,
        interview_repository: InterviewRepositoryPort,
        document_repository: DocumentRepositoryPort
    ):
        self.document_repository = document_repository
        self.verifier = OwnershipVerifier(interview_repository)

    async def _get_owned_document(self, document_id: str, user_id: str) -> Document:
        document = await self.document_repository.find_by_id(document_id)

        if document is None:
            raise DocumentNotFoundError(document_id)

        await self.verifier.verify_interview_access(document.interview_id, user_id)
        return document

    async def get_document(self, document_id: str, user_id: str) -> Document:
        """Get a document by id"""
        return await self._get_owned_document(document_id, user_id)

    async def list_interview_documents(self, interview_id: str, user_id: str) -> List[Document]:
        """List the documents of an owned interview"""
        await self.verifier.verify_interview_access(interview_id, user_id)
        return await self.document_repository.find_by_interview_id(interview_id)

    async def create_document(self, interview_id: str, user_id: str, title: str, content: str) -> Document:
        """Attach a new document to an owned interview"""
        await self.verifier.verify_interview_access(interview_id, user_id)

        document = Document.create_document(interview_id=interview_id, title=title, content=content)
        return await self.document_repository.create(document)

    async def update_document(self, document_id: str, user_id: str, update_data: DocumentUpdate) -> Document:
        """Partial update of title and/or content"""
        await self._get_owned_document(document_id, user_id)

        updated = await self.document_repository.update(document_id, update_data.changes())

        if updated is None:
            raise DocumentNotFoundError(document_id)

        return updated

    async def delete_document(self, document_id: str, user_id: str) -> None:
        """Delete a document"""
        await self._get_owned_document(document_id, user_id)

        if not await self.document_repository.delete(document_id):
            raise DocumentNotFoundError(document_id)
