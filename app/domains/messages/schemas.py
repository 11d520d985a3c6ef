from pydantic import BaseModel, Field, ConfigDict
from typing import List
from datetime import datetime

from app.domains.messages.entities import MessageRole


class MessageCreate(BaseModel):
    role: MessageRole
    content: str = Field(..., min_length=1)
    enabled_document_ids: List[str] = Field(default_factory=list)


class MessageResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    take_id: str
    role: MessageRole
    content: str
    enabled_document_ids: List[str]
    created_at: datetime


class MessageListResponse(BaseModel):
    messages: List[MessageResponse]
