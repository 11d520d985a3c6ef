from fastapi import APIRouter, Depends, Response

from app.api.http.dependencies import get_identity_service
from app.core.auth import get_current_user
from app.core.config import settings
from app.core.security import SessionPayload
from app.domains.identity.schemas import CurrentUserResponse, UserResponse
from app.domains.identity.services import IdentityService

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.get("/me", response_model=CurrentUserResponse)
async def get_current_user_info(current_user: SessionPayload = Depends(get_current_user)):
    """Identity of the signed-in user"""
    return CurrentUserResponse(
        id=current_user.user_id,
        email=current_user.email,
        name=current_user.name
    )


@router.get("/profile", response_model=UserResponse)
async def get_profile(
    current_user: SessionPayload = Depends(get_current_user),
    identity_service: IdentityService = Depends(get_identity_service)
):
    """Stored profile of the signed-in user"""
    user = await identity_service.get_user(current_user.user_id)
    return UserResponse.model_validate(user)


@router.post("/logout")
async def logout(response: Response):
    """Drop the session cookie"""
    response.delete_cookie(settings.session_cookie_name, path="/")
    return {"message": "Successfully logged out"}
