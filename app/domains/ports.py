"""Storage contracts used by the domain services.

Implementations never raise for a missing row: lookups return ``None``
or an empty list, ``update`` returns ``None`` when the row is gone and
``delete`` returns ``False``. No authorization happens at this level.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from app.domains.documents.entities import Document
from app.domains.identity.entities import User
from app.domains.interviews.entities import Interview
from app.domains.messages.entities import Message
from app.domains.takes.entities import Take, TakeStage


class UserRepositoryPort(ABC):

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        ...

    @abstractmethod
    async def find_by_external_id(self, external_id: str) -> Optional[User]:
        ...

    @abstractmethod
    async def create(self, user: User) -> User:
        ...


class InterviewRepositoryPort(ABC):

    @abstractmethod
    async def find_by_id(self, interview_id: str) -> Optional[Interview]:
        ...

    @abstractmethod
    async def find_by_user_id(self, user_id: str) -> List[Interview]:
        ...

    @abstractmethod
    async def create(self, interview: Interview) -> Interview:
        ...

    @abstractmethod
    async def update(self, interview_id: str, changes: Dict[str, Any]) -> Optional[Interview]:
        """Apply a partial update (title/description) and refresh updated_at"""

    @abstractmethod
    async def delete(self, interview_id: str) -> bool:
        ...


class DocumentRepositoryPort(ABC):

    @abstractmethod
    async def find_by_id(self, document_id: str) -> Optional[Document]:
        ...

    @abstractmethod
    async def find_by_interview_id(self, interview_id: str) -> List[Document]:
        ...

    @abstractmethod
    async def create(self, document: Document) -> Document:
        ...

    @abstractmethod
    async def update(self, document_id: str, changes: Dict[str, Any]) -> Optional[Document]:
        """Apply a partial update (title/content) and refresh updated_at"""

    @abstractmethod
    async def delete(self, document_id: str) -> bool:
        ...


class TakeRepositoryPort(ABC):

    @abstractmethod
    async def find_by_id(self, take_id: str) -> Optional[Take]:
        ...

    @abstractmethod
    async def find_by_interview_id(self, interview_id: str) -> List[Take]:
        ...

    @abstractmethod
    async def create(self, take: Take) -> Take:
        ...

    @abstractmethod
    async def update_stage(self, take_id: str, stage: TakeStage) -> Optional[Take]:
        ...


class MessageRepositoryPort(ABC):

    @abstractmethod
    async def find_by_take_id(self, take_id: str) -> List[Message]:
        """Messages of a take, oldest first"""

    @abstractmethod
    async def create(self, message: Message) -> Message:
        ...
