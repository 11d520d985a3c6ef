from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.db import get_db
from app.db.repositories import (
    DocumentRepository, InterviewRepository, MessageRepository, TakeRepository, UserRepository
)
from app.domains.documents.services import DocumentService
from app.domains.identity.services import IdentityService
from app.domains.interviews.services import InterviewService
from app.domains.messages.services import MessageService
from app.domains.takes.services import TakeService


def get_interview_service(db: AsyncSession = Depends(get_db)) -> InterviewService:
    return InterviewService(InterviewRepository(db), DocumentRepository(db))


def get_document_service(db: AsyncSession = Depends(get_db)) -> DocumentService:
    return DocumentService(InterviewRepository(db), DocumentRepository(db))


def get_take_service(db: AsyncSession = Depends(get_db)) -> TakeService:
    return TakeService(
        InterviewRepository(db),
        TakeRepository(db),
        allow_stage_regression=settings.allow_stage_regression
    )


def get_message_service(db: AsyncSession = Depends(get_db)) -> MessageService:
    return MessageService(
        InterviewRepository(db),
        TakeRepository(db),
        MessageRepository(db),
        document_repository=DocumentRepository(db),
        validate_enabled_documents=settings.validate_enabled_documents
    )


def get_identity_service(db: AsyncSession = Depends(get_db)) -> IdentityService:
    return IdentityService(UserRepository(db))
