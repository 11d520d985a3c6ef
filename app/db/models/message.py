from sqlalchemy import Column, Text, ForeignKey, Enum, UUID, BigInteger, Identity
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import relationship

from app.db.base import BaseModel
from app.domains.messages.entities import MessageRole


class Message(BaseModel):
    __tablename__ = "messages"

    take_id = Column(UUID(as_uuid=False), ForeignKey("takes.id", ondelete="CASCADE"), index=True, nullable=False)
    role = Column(
        Enum(MessageRole, name="message_role", values_callable=lambda e: [m.value for m in e]),
        nullable=False
    )
    content = Column(Text, nullable=False)
    enabled_document_ids = Column(ARRAY(Text), nullable=False, default=list)
    # insertion counter, breaks created_at ties when ordering a transcript
    seq = Column(BigInteger, Identity(), nullable=False)

    # Relationships
    take = relationship("Take", back_populates="messages")
