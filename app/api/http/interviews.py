from fastapi import APIRouter, Depends, status

from app.api.http.dependencies import (
    get_document_service, get_interview_service, get_take_service
)
from app.core.auth import get_current_user
from app.core.security import SessionPayload
from app.domains.documents.schemas import (
    DocumentCreate, DocumentListResponse, DocumentResponse
)
from app.domains.documents.services import DocumentService
from app.domains.interviews.schemas import (
    InterviewCreate, InterviewListResponse, InterviewResponse, InterviewUpdate
)
from app.domains.interviews.services import InterviewService
from app.domains.takes.schemas import TakeListResponse, TakeResponse
from app.domains.takes.services import TakeService

router = APIRouter(prefix="/interviews", tags=["interviews"])


@router.get("/", response_model=InterviewListResponse)
async def list_interviews(
    current_user: SessionPayload = Depends(get_current_user),
    interview_service: InterviewService = Depends(get_interview_service)
):
    """Interviews of the current user"""
    interviews = await interview_service.list_user_interviews(current_user.user_id)
    return InterviewListResponse(
        interviews=[InterviewResponse.model_validate(interview) for interview in interviews]
    )


@router.post("/", response_model=InterviewResponse, status_code=status.HTTP_201_CREATED)
async def create_interview(
    interview_data: InterviewCreate,
    current_user: SessionPayload = Depends(get_current_user),
    interview_service: InterviewService = Depends(get_interview_service)
):
    interview = await interview_service.create_interview(
        current_user.user_id,
        interview_data.title,
        interview_data.description
    )
    return InterviewResponse.model_validate(interview)


@router.get("/{interview_id}", response_model=InterviewResponse)
async def get_interview(
    interview_id: str,
    current_user: SessionPayload = Depends(get_current_user),
    interview_service: InterviewService = Depends(get_interview_service)
):
    interview = await interview_service.get_interview(interview_id, current_user.user_id)
    return InterviewResponse.model_validate(interview)


@router.patch("/{interview_id}", response_model=InterviewResponse)
async def update_interview(
    interview_id: str,
    update_data: InterviewUpdate,
    current_user: SessionPayload = Depends(get_current_user),
    interview_service: InterviewService = Depends(get_interview_service)
):
    interview = await interview_service.update_interview(interview_id, current_user.user_id, update_data)
    return InterviewResponse.model_validate(interview)


@router.delete("/{interview_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_interview(
    interview_id: str,
    current_user: SessionPayload = Depends(get_current_user),
    interview_service: InterviewService = Depends(get_interview_service)
):
    """Delete an interview and everything below it"""
    await interview_service.delete_interview(interview_id, current_user.user_id)


# Documents of an interview
@router.get("/{interview_id}/documents", response_model=DocumentListResponse)
async def list_interview_documents(
    interview_id: str,
    current_user: SessionPayload = Depends(get_current_user),
    document_service: DocumentService = Depends(get_document_service)
):
    documents = await document_service.list_interview_documents(interview_id, current_user.user_id)
    return DocumentListResponse(
        documents=[DocumentResponse.model_validate(document) for document in documents]
    )


@router.post(
    "/{interview_id}/documents",
    response_model=DocumentResponse,
    status_code=status.HTTP_201_CREATED
)
async def create_interview_document(
    interview_id: str,
    document_data: DocumentCreate,
    current_user: SessionPayload = Depends(get_current_user),
    document_service: DocumentService = Depends(get_document_service)
):
    document = await document_service.create_document(
        interview_id,
        current_user.user_id,
        document_data.title,
        document_data.content
    )
    return DocumentResponse.model_validate(document)


# Takes of an interview
@router.get("/{interview_id}/takes", response_model=TakeListResponse)
async def list_interview_takes(
    interview_id: str,
    current_user: SessionPayload = Depends(get_current_user),
    take_service: TakeService = Depends(get_take_service)
):
    takes = await take_service.list_interview_takes(interview_id, current_user.user_id)
    return TakeListResponse(takes=[TakeResponse.model_validate(take) for take in takes])


@router.post(
    "/{interview_id}/takes",
    response_model=TakeResponse,
    status_code=status.HTTP_201_CREATED
)
async def create_interview_take(
    interview_id: str,
    current_user: SessionPayload = Depends(get_current_user),
    take_service: TakeService = Depends(get_take_service)
):
    """Start a new take in the pre-interview stage"""
    take = await take_service.create_take(interview_id, current_user.user_id)
    return TakeResponse.model_validate(take)
