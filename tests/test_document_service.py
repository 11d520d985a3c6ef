import asyncio
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio

from app.core.errors import DocumentNotFoundError, InterviewNotFoundError, UnauthorizedError
from app.domains.documents.entities import Document
from app.domains.documents.schemas import DocumentResponse, DocumentUpdate
from tests.fakes import OWNER, STRANGER


@pytest_asyncio.fixture
async def interview(interview_service):
    return await interview_service.create_interview(OWNER, "My Interview", None)


@pytest.mark.asyncio
async def test_stranger_cannot_read_document(document_service, interview):
    document = await document_service.create_document(interview.id, OWNER, "D", "c")

    with pytest.raises(UnauthorizedError):
        await document_service.get_document(document.id, STRANGER)


@pytest.mark.asyncio
async def test_missing_document_is_not_found(document_service, interview):
    with pytest.raises(DocumentNotFoundError) as exc_info:
        await document_service.get_document("missing-id", OWNER)

    assert exc_info.value.document_id == "missing-id"


@pytest.mark.asyncio
async def test_missing_document_is_not_found_for_stranger_too(document_service):
    with pytest.raises(DocumentNotFoundError):
        await document_service.get_document("missing-id", STRANGER)


@pytest.mark.asyncio
async def test_create_and_list(document_service, interview, interview_service):
    first = await document_service.create_document(interview.id, OWNER, "Resume", "my resume")
    second = await document_service.create_document(interview.id, OWNER, "Job", "job posting")
    other = await interview_service.create_interview(OWNER, "Other")
    await document_service.create_document(other.id, OWNER, "Elsewhere", "x")

    documents = await document_service.list_interview_documents(interview.id, OWNER)

    assert [d.id for d in documents] == [first.id, second.id]
    assert first.interview_id == interview.id
    assert first.content == "my resume"


@pytest.mark.asyncio
async def test_create_under_foreign_interview(document_service, interview, storage):
    with pytest.raises(UnauthorizedError):
        await document_service.create_document(interview.id, STRANGER, "D", "c")

    assert storage.documents == {}


@pytest.mark.asyncio
async def test_create_under_missing_interview(document_service):
    with pytest.raises(InterviewNotFoundError):
        await document_service.create_document("missing-interview", OWNER, "D", "c")


@pytest.mark.asyncio
async def test_list_foreign_interview(document_service, interview):
    with pytest.raises(UnauthorizedError):
        await document_service.list_interview_documents(interview.id, STRANGER)


@pytest.mark.asyncio
async def test_title_update_preserves_content(document_service, interview):
    document = await document_service.create_document(interview.id, OWNER, "Old", "body")
    await asyncio.sleep(0.001)

    updated = await document_service.update_document(document.id, OWNER, DocumentUpdate(title="New"))

    assert updated.title == "New"
    assert updated.content == "body"
    assert updated.created_at == document.created_at
    assert updated.updated_at > document.updated_at


@pytest.mark.asyncio
async def test_update_by_stranger(document_service, interview):
    document = await document_service.create_document(interview.id, OWNER, "Old", "body")

    with pytest.raises(UnauthorizedError):
        await document_service.update_document(document.id, STRANGER, DocumentUpdate(content="mine"))

    assert (await document_service.get_document(document.id, OWNER)).content == "body"


@pytest.mark.asyncio
async def test_update_race_collapses_to_not_found(document_service, document_repository, interview):
    document = await document_service.create_document(interview.id, OWNER, "Old", "body")
    document_repository.update = AsyncMock(return_value=None)

    with pytest.raises(DocumentNotFoundError) as exc_info:
        await document_service.update_document(document.id, OWNER, DocumentUpdate(title="New"))

    assert exc_info.value.document_id == document.id


@pytest.mark.asyncio
async def test_delete(document_service, interview):
    document = await document_service.create_document(interview.id, OWNER, "D", "c")

    with pytest.raises(UnauthorizedError):
        await document_service.delete_document(document.id, STRANGER)

    await document_service.delete_document(document.id, OWNER)

    with pytest.raises(DocumentNotFoundError):
        await document_service.get_document(document.id, OWNER)
    with pytest.raises(DocumentNotFoundError):
        await document_service.delete_document(document.id, OWNER)


@pytest.mark.asyncio
async def test_document_with_dangling_interview(document_service, storage, interview):
    document = await document_service.create_document(interview.id, OWNER, "D", "c")
    del storage.interviews[interview.id]

    with pytest.raises(InterviewNotFoundError):
        await document_service.get_document(document.id, OWNER)


def test_document_shape_matches_response():
    document = Document.create_document("interview-1", "Notes", "some content")

    dumped = DocumentResponse.model_validate(document).model_dump()

    assert set(dumped) == {"id", "interview_id", "title", "content", "created_at", "updated_at"}
    assert set(vars(document)) == set(dumped)
