from sqlalchemy import Column, String, Text, ForeignKey, DateTime, UUID
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.db.base import BaseModel


class Document(BaseModel):
    __tablename__ = "documents"

    interview_id = Column(UUID(as_uuid=False), ForeignKey("interviews.id", ondelete="CASCADE"), index=True, nullable=False)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    # Relationships
    interview = relationship("Interview", back_populates="documents")
