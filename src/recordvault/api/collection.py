"""Collection sharing API endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from ..core.schemas.collection import CollectionTokenResponse
from ..core.schemas.records import RecordResponse
from ..core.services import CollectionService
from ..middleware.auth import get_current_user_id
from .dependencies import get_collection_service

router = APIRouter(prefix="/collection", tags=["collection"])


@router.post("/tokens", response_model=CollectionTokenResponse, status_code=status.HTTP_201_CREATED)
async def create_token(
    current_user_id: int = Depends(get_current_user_id),
    collection_service: CollectionService = Depends(get_collection_service),
):
    """Issue a sharing token for the current user."""
    token = await collection_service.create_token(current_user_id)
    return CollectionTokenResponse.model_validate(token)


@router.get("/tokens", response_model=CollectionTokenResponse)
async def get_token(
    current_user_id: int = Depends(get_current_user_id),
    collection_service: CollectionService = Depends(get_collection_service),
):
    """Get the current user's sharing token."""
    token = await collection_service.get_user_token(current_user_id)
    return CollectionTokenResponse.model_validate(token)


@router.delete("/tokens/{token}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_token(
    token: str,
    current_user_id: int = Depends(get_current_user_id),
    collection_service: CollectionService = Depends(get_collection_service),
):
    """Revoke a sharing token."""
    await collection_service.delete_token(token, current_user_id)


@router.get("/{token}", response_model=List[RecordResponse])
async def get_collection(
    token: str,
    owned: Optional[bool] = Query(None),
    wanted: Optional[bool] = Query(None),
    collection_service: CollectionService = Depends(get_collection_service),
):
    """Read a shared collection. No login needed, the token is the credential."""
    records = await collection_service.get_collection(token, owned, wanted)
    return [RecordResponse.model_validate(record) for record in records]
