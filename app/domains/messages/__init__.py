from app.domains.messages.entities import Message, MessageRole
from app.domains.messages.schemas import MessageCreate, MessageResponse, MessageListResponse

__all__ = [
    "Message", "MessageRole",
    "MessageCreate", "MessageResponse", "MessageListResponse"
]
