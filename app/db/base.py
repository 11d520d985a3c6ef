import uuid

from sqlalchemy import Column, DateTime, UUID
from sqlalchemy.sql import func

from app.core.db import Base


class BaseModel(Base):
    """Common columns: string UUID primary key and timestamps"""
    __abstract__ = True

    id = Column(UUID(as_uuid=False), primary_key=True, default=lambda: str(uuid.uuid4()))
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
