import pytest

from app.domains.documents.services import DocumentService
from app.domains.identity.services import IdentityService
from app.domains.interviews.services import InterviewService
from app.domains.messages.services import MessageService
from app.domains.takes.services import TakeService
from tests.fakes import (
    InMemoryDocumentRepository, InMemoryInterviewRepository, InMemoryMessageRepository,
    InMemoryStorage, InMemoryTakeRepository, InMemoryUserRepository
)


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def interview_repository(storage):
    return InMemoryInterviewRepository(storage)


@pytest.fixture
def document_repository(storage):
    return InMemoryDocumentRepository(storage)


@pytest.fixture
def take_repository(storage):
    return InMemoryTakeRepository(storage)


@pytest.fixture
def message_repository(storage):
    return InMemoryMessageRepository(storage)


@pytest.fixture
def interview_service(interview_repository, document_repository) -> InterviewService:
    return InterviewService(interview_repository, document_repository)


@pytest.fixture
def document_service(interview_repository, document_repository) -> DocumentService:
    return DocumentService(interview_repository, document_repository)


@pytest.fixture
def take_service(interview_repository, take_repository) -> TakeService:
    return TakeService(interview_repository, take_repository)


@pytest.fixture
def message_service(interview_repository, take_repository, message_repository, document_repository) -> MessageService:
    return MessageService(
        interview_repository,
        take_repository,
        message_repository,
        document_repository=document_repository
    )


@pytest.fixture
def identity_service(storage) -> IdentityService:
    return IdentityService(InMemoryUserRepository(storage))
