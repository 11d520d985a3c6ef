from pydantic import BaseModel, ConfigDict
from typing import List
from datetime import datetime

from app.domains.takes.entities import TakeStage


class TakeStageUpdate(BaseModel):
    stage: TakeStage


class TakeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    interview_id: str
    stage: TakeStage
    created_at: datetime
    updated_at: datetime


class TakeListResponse(BaseModel):
    takes: List[TakeResponse]
