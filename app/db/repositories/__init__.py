from app.db.repositories.user_repository import UserRepository
from app.db.repositories.interview_repository import InterviewRepository
from app.db.repositories.document_repository import DocumentRepository
from app.db.repositories.take_repository import TakeRepository
from app.db.repositories.message_repository import MessageRepository

__all__ = [
    "UserRepository",
    "InterviewRepository",
    "DocumentRepository",
    "TakeRepository",
    "MessageRepository"
]
