from sqlalchemy import Column, String, Text
from sqlalchemy.orm import relationship

from app.db.base import BaseModel


class User(BaseModel):
    __tablename__ = "users"

    external_id = Column(String(255), unique=True, index=True, nullable=False)
    email = Column(String(255), nullable=False)
    display_name = Column(String(255), nullable=False)
    avatar_url = Column(Text, nullable=True)

    # Relationships
    interviews = relationship("Interview", back_populates="owner", passive_deletes=True)
