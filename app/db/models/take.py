from sqlalchemy import Column, ForeignKey, DateTime, Enum, UUID
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.db.base import BaseModel
from app.domains.takes.entities import TakeStage


class Take(BaseModel):
    __tablename__ = "takes"

    interview_id = Column(UUID(as_uuid=False), ForeignKey("interviews.id", ondelete="CASCADE"), index=True, nullable=False)
    stage = Column(
        Enum(TakeStage, name="take_stage", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=TakeStage.PRE_INTERVIEW
    )
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    # Relationships
    interview = relationship("Interview", back_populates="takes")
    messages = relationship("Message", back_populates="take", passive_deletes=True)
