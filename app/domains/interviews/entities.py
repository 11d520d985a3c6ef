import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Interview:
    """Root of the nested resource tree; owned by exactly one user"""
    id: str
    user_id: str
    title: str
    description: Optional[str] = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def is_owned_by(self, user_id: str) -> bool:
        return self.user_id == user_id

    @classmethod
    def create_interview(cls, user_id: str, title: str, description: Optional[str] = None) -> "Interview":
        """Create a new interview owned by user_id"""
        now = _utcnow()
        return cls(
            id=str(uuid.uuid4()),
            user_id=user_id,
            title=title,
            description=description,
            created_at=now,
            updated_at=now
        )
