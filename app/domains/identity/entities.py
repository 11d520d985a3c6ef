import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional


@dataclass
class User:
    """Identity domain user; root of the ownership chain"""
    id: str
    external_id: str
    email: str
    display_name: str
    avatar_url: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create_user(
        cls,
        external_id: str,
        email: str,
        display_name: str,
        avatar_url: Optional[str] = None
    ) -> "User":
        """Create a user on first external login"""
        return cls(
            id=str(uuid.uuid4()),
            external_id=external_id,
            email=email,
            display_name=display_name,
            avatar_url=avatar_url
        )
