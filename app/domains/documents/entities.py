import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Document:
    """Reference material attached to an interview"""
    id: str
    interview_id: str
    title: str
    content: str = ""
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def create_document(cls, interview_id: str, title: str, content: str = "") -> "Document":
        now = _utcnow()
        return cls(
            id=str(uuid.uuid4()),
            interview_id=interview_id,
            title=title,
            content=content,
            created_at=now,
            updated_at=now
        )
