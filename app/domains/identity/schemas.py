from pydantic import BaseModel, ConfigDict, EmailStr
from typing import Optional
from datetime import datetime


class ExternalIdentity(BaseModel):
    """Profile returned by the external identity provider after login"""
    external_id: str
    email: EmailStr
    display_name: str
    avatar_url: Optional[str] = None


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    display_name: str
    avatar_url: Optional[str] = None
    created_at: datetime


class CurrentUserResponse(BaseModel):
    """Identity carried by the session token"""
    id: str
    email: str
    name: str
