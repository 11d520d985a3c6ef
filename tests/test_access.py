import pytest
import pytest_asyncio

from app.core.errors import InterviewNotFoundError, TakeNotFoundError, UnauthorizedError
from app.domains.access import OwnershipVerifier
from app.domains.interviews.entities import Interview
from app.domains.takes.entities import Take
from tests.fakes import OWNER, STRANGER


@pytest_asyncio.fixture
async def interview(interview_repository):
    return await interview_repository.create(Interview.create_interview(OWNER, "My Interview"))


@pytest.mark.asyncio
async def test_owner_gets_interview_back(interview_repository, interview):
    verifier = OwnershipVerifier(interview_repository)

    result = await verifier.verify_interview_access(interview.id, OWNER)

    assert result == interview


@pytest.mark.asyncio
async def test_other_user_is_rejected(interview_repository, interview):
    verifier = OwnershipVerifier(interview_repository)

    with pytest.raises(UnauthorizedError) as exc_info:
        await verifier.verify_interview_access(interview.id, STRANGER)

    assert exc_info.value.message == "You do not have access to this interview"


@pytest.mark.asyncio
async def test_missing_interview_wins_over_unauthorized(interview_repository):
    verifier = OwnershipVerifier(interview_repository)

    with pytest.raises(InterviewNotFoundError) as exc_info:
        await verifier.verify_interview_access("missing-id", STRANGER)

    assert exc_info.value.interview_id == "missing-id"


@pytest.mark.asyncio
async def test_take_access_walks_up_to_interview(interview_repository, take_repository, interview):
    verifier = OwnershipVerifier(interview_repository)
    take = await take_repository.create(Take.create_take(interview.id))

    assert await verifier.verify_take_access(take_repository, take.id, OWNER) == take

    with pytest.raises(UnauthorizedError):
        await verifier.verify_take_access(take_repository, take.id, STRANGER)

    with pytest.raises(TakeNotFoundError):
        await verifier.verify_take_access(take_repository, "missing-take", OWNER)


@pytest.mark.asyncio
async def test_take_with_dangling_interview(interview_repository, take_repository):
    verifier = OwnershipVerifier(interview_repository)
    take = await take_repository.create(Take.create_take("gone-interview"))

    with pytest.raises(InterviewNotFoundError) as exc_info:
        await verifier.verify_take_access(take_repository, take.id, OWNER)

    assert exc_info.value.interview_id == "gone-interview"
