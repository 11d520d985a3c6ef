from sqlalchemy import Column, String, Text, ForeignKey, DateTime, UUID
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.db.base import BaseModel


class Interview(BaseModel):
    __tablename__ = "interviews"

    user_id = Column(UUID(as_uuid=False), ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    # Relationships
    owner = relationship("User", back_populates="interviews")
    documents = relationship("Document", back_populates="interview", passive_deletes=True)
    takes = relationship("Take", back_populates="interview", passive_deletes=True)
