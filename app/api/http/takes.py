from fastapi import APIRouter, Depends, status

from app.api.http.dependencies import get_message_service, get_take_service
from app.core.auth import get_current_user
from app.core.security import SessionPayload
from app.domains.messages.schemas import MessageCreate, MessageListResponse, MessageResponse
from app.domains.messages.services import MessageService
from app.domains.takes.schemas import TakeResponse, TakeStageUpdate
from app.domains.takes.services import TakeService

router = APIRouter(prefix="/takes", tags=["takes"])


@router.get("/{take_id}", response_model=TakeResponse)
async def get_take(
    take_id: str,
    current_user: SessionPayload = Depends(get_current_user),
    take_service: TakeService = Depends(get_take_service)
):
    take = await take_service.get_take(take_id, current_user.user_id)
    return TakeResponse.model_validate(take)


@router.patch("/{take_id}", response_model=TakeResponse)
async def update_take_stage(
    take_id: str,
    stage_data: TakeStageUpdate,
    current_user: SessionPayload = Depends(get_current_user),
    take_service: TakeService = Depends(get_take_service)
):
    """Move a take between pre-interview and interview"""
    take = await take_service.update_stage(take_id, current_user.user_id, stage_data.stage)
    return TakeResponse.model_validate(take)


# Transcript of a take
@router.get("/{take_id}/messages", response_model=MessageListResponse)
async def list_take_messages(
    take_id: str,
    current_user: SessionPayload = Depends(get_current_user),
    message_service: MessageService = Depends(get_message_service)
):
    messages = await message_service.list_take_messages(take_id, current_user.user_id)
    return MessageListResponse(messages=[MessageResponse.model_validate(message) for message in messages])


@router.post("/{take_id}/messages", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def create_take_message(
    take_id: str,
    message_data: MessageCreate,
    current_user: SessionPayload = Depends(get_current_user),
    message_service: MessageService = Depends(get_message_service)
):
    message = await message_service.create_message(
        take_id,
        current_user.user_id,
        message_data.role,
        message_data.content,
        message_data.enabled_document_ids
    )
    return MessageResponse.model_validate(message)
