"""User account API endpoints."""

from typing import List

from fastapi import APIRouter, Depends, status

from ..core.schemas.auth import UserResponse, UserUpdateRequest
from ..core.services import UserService
from ..middleware.auth import get_current_user_id
from .dependencies import get_user_service

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/", response_model=List[UserResponse])
async def list_users(
    current_user_id: int = Depends(get_current_user_id),
    user_service: UserService = Depends(get_user_service),
):
    """List registered users."""
    users = await user_service.list_users()
    return [UserResponse.model_validate(user) for user in users]


@router.get("/me", response_model=UserResponse)
async def get_current_user(
    current_user_id: int = Depends(get_current_user_id),
    user_service: UserService = Depends(get_user_service),
):
    user = await user_service.get_user(current_user_id)
    return UserResponse.model_validate(user)


@router.put("/", response_model=UserResponse)
async def update_current_user(
    request: UserUpdateRequest,
    current_user_id: int = Depends(get_current_user_id),
    user_service: UserService = Depends(get_user_service),
):
    """Change the current user's email and username."""
    user = await user_service.update_user(current_user_id, request)
    return UserResponse.model_validate(user)


@router.delete("/", status_code=status.HTTP_204_NO_CONTENT)
async def delete_current_user(
    current_user_id: int = Depends(get_current_user_id),
    user_service: UserService = Depends(get_user_service),
):
    """Delete the current user with their records and sharing token."""
    await user_service.delete_user(current_user_id)
