from app.domains.identity.entities import User
from app.domains.identity.schemas import (
    ExternalIdentity, UserResponse, CurrentUserResponse
)

__all__ = [
    "User",
    "ExternalIdentity", "UserResponse", "CurrentUserResponse"
]
