import logging
from datetime import datetime, timezone
from typing import Optional, List, Dict, Any

from sqlalchemy import select, update, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.document import Document as DocumentModel
from app.domains.documents.entities import Document
from app.domains.ports import DocumentRepositoryPort

logger = logging.getLogger(__name__)


class DocumentRepository(DocumentRepositoryPort):
    """Document storage backed by SQLAlchemy"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, document: Document) -> Document:
        db_document = DocumentModel(
            id=document.id,
            interview_id=document.interview_id,
            title=document.title,
            content=document.content,
            created_at=document.created_at,
            updated_at=document.updated_at
        )

        self.session.add(db_document)
        await self.session.commit()
        await self.session.refresh(db_document)
        return self._to_domain(db_document)

    async def find_by_id(self, document_id: str) -> Optional[Document]:
        try:
            result = await self.session.execute(
                select(DocumentModel).where(DocumentModel.id == document_id)
            )
            db_document = result.scalar_one_or_none()
        except SQLAlchemyError:
            logger.exception("Failed to load document %s", document_id)
            await self.session.rollback()
            return None
        return self._to_domain(db_document) if db_document else None

    async def find_by_interview_id(self, interview_id: str) -> List[Document]:
        try:
            result = await self.session.execute(
                select(DocumentModel)
                .where(DocumentModel.interview_id == interview_id)
                .order_by(DocumentModel.created_at.asc())
            )
            db_documents = result.scalars().all()
        except SQLAlchemyError:
            logger.exception("Failed to list documents of interview %s", interview_id)
            await self.session.rollback()
            return []
        return [self._to_domain(doc) for doc in db_documents]

    async def update(self, document_id: str, changes: Dict[str, Any]) -> Optional[Document]:
        values = {key: changes[key] for key in ("title", "content") if key in changes}
        try:
            result = await self.session.execute(
                update(DocumentModel)
                .where(DocumentModel.id == document_id)
                .values(**values, updated_at=datetime.now(timezone.utc))
            )
            await self.session.commit()
        except SQLAlchemyError:
            logger.exception("Failed to update document %s", document_id)
            await self.session.rollback()
            return None

        if result.rowcount == 0:
            return None
        return await self.find_by_id(document_id)

    async def delete(self, document_id: str) -> bool:
        try:
            result = await self.session.execute(
                delete(DocumentModel).where(DocumentModel.id == document_id)
            )
            await self.session.commit()
        except SQLAlchemyError:
            logger.exception("Failed to delete document %s", document_id)
            await self.session.rollback()
            return False
        return result.rowcount > 0

    def _to_domain(self, db_document: DocumentModel) -> Document:
        return Document(
            id=str(db_document.id),
            interview_id=str(db_document.interview_id),
            title=db_document.title,
            content=db_document.content,
            created_at=db_document.created_at,
            updated_at=db_document.updated_at
        )
