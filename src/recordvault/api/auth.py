"""Authentication API endpoints."""

from fastapi import APIRouter, Depends, status

from ..core.schemas.auth import LoginRequest, RegisterRequest, TokenResponse
from ..core.services import AuthService
from .dependencies import get_auth_service

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def register(request: RegisterRequest, auth_service: AuthService = Depends(get_auth_service)):
    """Register a new user and log them in."""
    return await auth_service.register(request)


@router.post("/login", response_model=TokenResponse)
async def login(request: LoginRequest, auth_service: AuthService = Depends(get_auth_service)):
    """Login user and get a JWT."""
    return await auth_service.login(request)
