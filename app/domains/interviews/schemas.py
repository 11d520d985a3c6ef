from pydantic import BaseModel, Field, field_validator, ConfigDict
from typing import Optional, List
from datetime import datetime


class InterviewBase(BaseModel):
    """Base interview schema"""
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        if not v.strip():
            raise ValueError('Title cannot be empty')
        return v.strip()


class InterviewCreate(InterviewBase):
    pass


class InterviewUpdate(BaseModel):
    """Partial update; only fields that were sent are applied"""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        if v is not None and not v.strip():
            raise ValueError('Title cannot be empty')
        return v.strip() if v else v

    def changes(self) -> dict:
        """Fields explicitly set by the caller; description may be cleared to None"""
        data = self.model_dump(exclude_unset=True)
        if data.get("title") is None:
            data.pop("title", None)
        return data


class InterviewResponse(InterviewBase):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    created_at: datetime
    updated_at: datetime


class InterviewListResponse(BaseModel):
    interviews: List[InterviewResponse]
