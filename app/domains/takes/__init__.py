from app.domains.takes.entities import Take, TakeStage
from app.domains.takes.schemas import TakeStageUpdate, TakeResponse, TakeListResponse

__all__ = [
    "Take", "TakeStage",
    "TakeStageUpdate", "TakeResponse", "TakeListResponse"
]
