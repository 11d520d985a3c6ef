"""In-memory implementations of the storage ports.

Interview deletion cascades to takes and messages like the database
foreign keys do; documents are deliberately left alone so the explicit
cascade in ``InterviewService`` is what removes them.
"""

from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from app.domains.documents.entities import Document
from app.domains.identity.entities import User
from app.domains.interviews.entities import Interview
from app.domains.messages.entities import Message
from app.domains.ports import (
    DocumentRepositoryPort, InterviewRepositoryPort, MessageRepositoryPort,
    TakeRepositoryPort, UserRepositoryPort
)
from app.domains.takes.entities import Take, TakeStage


class InMemoryStorage:
    def __init__(self):
        self.users: Dict[str, User] = {}
        self.interviews: Dict[str, Interview] = {}
        self.documents: Dict[str, Document] = {}
        self.takes: Dict[str, Take] = {}
        self.messages: Dict[str, Message] = {}


class InMemoryUserRepository(UserRepositoryPort):
    def __init__(self, storage: InMemoryStorage):
        self.storage = storage

    async def find_by_id(self, user_id: str) -> Optional[User]:
        return self.storage.users.get(user_id)

    async def find_by_external_id(self, external_id: str) -> Optional[User]:
        return next((u for u in self.storage.users.values() if u.external_id == external_id), None)

    async def create(self, user: User) -> User:
        self.storage.users[user.id] = user
        return user


class InMemoryInterviewRepository(InterviewRepositoryPort):
    def __init__(self, storage: InMemoryStorage):
        self.storage = storage

    async def find_by_id(self, interview_id: str) -> Optional[Interview]:
        return self.storage.interviews.get(interview_id)

    async def find_by_user_id(self, user_id: str) -> List[Interview]:
        return [i for i in self.storage.interviews.values() if i.user_id == user_id]

    async def create(self, interview: Interview) -> Interview:
        self.storage.interviews[interview.id] = interview
        return interview

    async def update(self, interview_id: str, changes: Dict[str, Any]) -> Optional[Interview]:
        existing = self.storage.interviews.get(interview_id)
        if existing is None:
            return None
        values = {key: changes[key] for key in ("title", "description") if key in changes}
        updated = replace(existing, **values, updated_at=datetime.now(timezone.utc))
        self.storage.interviews[interview_id] = updated
        return updated

    async def delete(self, interview_id: str) -> bool:
        if self.storage.interviews.pop(interview_id, None) is None:
            return False
        take_ids = [t.id for t in self.storage.takes.values() if t.interview_id == interview_id]
        for take_id in take_ids:
            del self.storage.takes[take_id]
        for message_id in [m.id for m in self.storage.messages.values() if m.take_id in take_ids]:
            del self.storage.messages[message_id]
        return True


class InMemoryDocumentRepository(DocumentRepositoryPort):
    def __init__(self, storage: InMemoryStorage):
        self.storage = storage

    async def find_by_id(self, document_id: str) -> Optional[Document]:
        return self.storage.documents.get(document_id)

    async def find_by_interview_id(self, interview_id: str) -> List[Document]:
        return [d for d in self.storage.documents.values() if d.interview_id == interview_id]

    async def create(self, document: Document) -> Document:
        self.storage.documents[document.id] = document
        return document

    async def update(self, document_id: str, changes: Dict[str, Any]) -> Optional[Document]:
        existing = self.storage.documents.get(document_id)
        if existing is None:
            return None
        values = {key: changes[key] for key in ("title", "content") if key in changes}
        updated = replace(existing, **values, updated_at=datetime.now(timezone.utc))
        self.storage.documents[document_id] = updated
        return updated

    async def delete(self, document_id: str) -> bool:
        return self.storage.documents.pop(document_id, None) is not None


class InMemoryTakeRepository(TakeRepositoryPort):
    def __init__(self, storage: InMemoryStorage):
        self.storage = storage

    async def find_by_id(self, take_id: str) -> Optional[Take]:
        return self.storage.takes.get(take_id)

    async def find_by_interview_id(self, interview_id: str) -> List[Take]:
        return [t for t in self.storage.takes.values() if t.interview_id == interview_id]

    async def create(self, take: Take) -> Take:
        self.storage.takes[take.id] = take
        return take

    async def update_stage(self, take_id: str, stage: TakeStage) -> Optional[Take]:
        existing = self.storage.takes.get(take_id)
        if existing is None:
            return None
        updated = replace(existing, stage=TakeStage(stage), updated_at=datetime.now(timezone.utc))
        self.storage.takes[take_id] = updated
        return updated


class InMemoryMessageRepository(MessageRepositoryPort):
    def __init__(self, storage: InMemoryStorage):
        self.storage = storage

    async def find_by_take_id(self, take_id: str) -> List[Message]:
        # sorted() is stable, so equal timestamps keep insertion order
        messages = [m for m in self.storage.messages.values() if m.take_id == take_id]
        return sorted(messages, key=lambda m: m.created_at)

    async def create(self, message: Message) -> Message:
        self.storage.messages[message.id] = message
        return message


OWNER = "user-1"
STRANGER = "user-2"
