import enum
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TakeStage(str, enum.Enum):
    PRE_INTERVIEW = "pre-interview"
    INTERVIEW = "interview"


# Forward order of the stage marker
STAGE_ORDER = (TakeStage.PRE_INTERVIEW, TakeStage.INTERVIEW)


@dataclass
class Take:
    """One attempt at an interview"""
    id: str
    interview_id: str
    stage: TakeStage = TakeStage.PRE_INTERVIEW
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def is_regression(self, new_stage: TakeStage) -> bool:
        """True when new_stage lies before the current stage"""
        return STAGE_ORDER.index(TakeStage(new_stage)) < STAGE_ORDER.index(TakeStage(self.stage))

    @classmethod
    def create_take(cls, interview_id: str) -> "Take":
        """New takes always start in the pre-interview stage"""
        now = _utcnow()
        return cls(
            id=str(uuid.uuid4()),
            interview_id=interview_id,
            stage=TakeStage.PRE_INTERVIEW,
            created_at=now,
            updated_at=now
        )
