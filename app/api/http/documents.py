from fastapi import APIRouter, Depends, status

from app.api.http.dependencies import get_document_service
from app.core.auth import get_current_user
from app.core.security import SessionPayload
from app.domains.documents.schemas import DocumentResponse, DocumentUpdate
from app.domains.documents.services import DocumentService

router = APIRouter(prefix="/documents", tags=["documents"])


@router.get("/{document_id}", response_model=DocumentResponse)
async def get_document(
    document_id: str,
    current_user: SessionPayload = Depends(get_current_user),
    document_service: DocumentService = Depends(get_document_service)
):
    document = await document_service.get_document(document_id, current_user.user_id)
    return DocumentResponse.model_validate(document)


@router.patch("/{document_id}", response_model=DocumentResponse)
async def update_document(
    document_id: str,
    update_data: DocumentUpdate,
    current_user: SessionPayload = Depends(get_current_user),
    document_service: DocumentService = Depends(get_document_service)
):
    document = await document_service.update_document(document_id, current_user.user_id, update_data)
    return DocumentResponse.model_validate(document)


@router.delete("/{document_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_document(
    document_id: str,
    current_user: SessionPayload = Depends(get_current_user),
    document_service: DocumentService = Depends(get_document_service)
):
    await document_service.delete_document(document_id, current_user.user_id)
