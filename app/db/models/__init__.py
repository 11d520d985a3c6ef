from app.db.models.user import User
from app.db.models.interview import Interview
from app.db.models.document import Document
from app.db.models.take import Take
from app.db.models.message import Message

__all__ = [
    "User",
    "Interview",
    "Document",
    "Take",
    "Message"
]
