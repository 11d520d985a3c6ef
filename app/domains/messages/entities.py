import enum
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MessageRole(str, enum.Enum):
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class Message:
    """Transcript entry of a take; immutable once created"""
    id: str
    take_id: str
    role: MessageRole
    content: str
    enabled_document_ids: List[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def create_message(
        cls,
        take_id: str,
        role: MessageRole,
        content: str,
        enabled_document_ids: List[str]
    ) -> "Message":
        return cls(
            id=str(uuid.uuid4()),
            take_id=take_id,
            role=MessageRole(role),
            content=content,
            enabled_document_ids=list(enabled_document_ids)
        )
