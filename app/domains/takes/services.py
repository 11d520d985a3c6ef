import logging
from typing import List

from app.core.errors import StageTransitionError, TakeNotFoundError
from app.domains.access import OwnershipVerifier
from app.domains.ports import InterviewRepositoryPort, TakeRepositoryPort
from app.domains.takes.entities import Take, TakeStage

logger = logging.getLogger(__name__)


class TakeService:
    """Takes of an interview and their stage marker.

    ``allow_stage_regression`` decides whether ``interview`` may be moved
    back to ``pre-interview``. When it is off such a request raises
    ``StageTransitionError``; re-setting the current stage is always fine.
    """

    def __init__(
        self,
        interview_repository: InterviewRepositoryPort,
        take_repository: TakeRepositoryPort,
        allow_stage_regression: bool = True
    ):
        self.take_repository = take_repository
        self.verifier = OwnershipVerifier(interview_repository)
        self.allow_stage_regression = allow_stage_regression

    async def get_take(self, take_id: str, user_id: str) -> Take:
        return await self.verifier.verify_take_access(self.take_repository, take_id, user_id)

    async def list_interview_takes(self, interview_id: str, user_id: str) -> List[Take]:
        await self.verifier.verify_interview_access(interview_id, user_id)
        return await self.take_repository.find_by_interview_id(interview_id)

    async def create_take(self, interview_id: str, user_id: str) -> Take:
        """Start a new take in the pre-interview stage"""
        await self.verifier.verify_interview_access(interview_id, user_id)
        return await self.take_repository.create(Take.create_take(interview_id))

    async def update_stage(self, take_id: str, user_id: str, stage: TakeStage) -> Take:
        """Move a take to another stage"""
        take = await self.verifier.verify_take_access(self.take_repository, take_id, user_id)

        if not self.allow_stage_regression and take.is_regression(stage):
            current, requested = TakeStage(take.stage).value, TakeStage(stage).value
            logger.warning("Rejected stage regression of take %s: %s -> %s", take_id, current, requested)
            raise StageTransitionError(take_id, current, requested)

        updated = await self.take_repository.update_stage(take_id, TakeStage(stage))

        if updated is None:
            raise TakeNotFoundError(take_id)

        return updated
