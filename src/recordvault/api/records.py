"""Records API endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from ..core.schemas.records import RecordBulkInput, RecordInput, RecordResponse
from ..core.services import RecordService
from ..middleware.auth import get_current_user_id
from .dependencies import get_record_service

router = APIRouter(prefix="/records", tags=["records"])


@router.get("/", response_model=List[RecordResponse])
async def list_records(
    owned: Optional[bool] = Query(None),
    wanted: Optional[bool] = Query(None),
    current_user_id: int = Depends(get_current_user_id),
    record_service: RecordService = Depends(get_record_service),
):
    """List the current user's records, optionally filtered by flags."""
    records = await record_service.list_records(current_user_id, owned, wanted)
    return [RecordResponse.model_validate(record) for record in records]


@router.post("/", response_model=RecordResponse, status_code=status.HTTP_201_CREATED)
async def create_record(
    request: RecordInput,
    current_user_id: int = Depends(get_current_user_id),
    record_service: RecordService = Depends(get_record_service),
):
    """Add a record."""
    record = await record_service.create_record(current_user_id, request)
    return RecordResponse.model_validate(record)


@router.post("/bulk", response_model=List[RecordResponse], status_code=status.HTTP_201_CREATED)
async def create_records(
    request: RecordBulkInput,
    current_user_id: int = Depends(get_current_user_id),
    record_service: RecordService = Depends(get_record_service),
):
    """Import several records at once, all or nothing."""
    records = await record_service.create_records(current_user_id, request.records)
    return [RecordResponse.model_validate(record) for record in records]


@router.get("/random", response_model=Optional[RecordResponse])
async def random_record(
    owned: Optional[bool] = Query(None),
    wanted: Optional[bool] = Query(None),
    current_user_id: int = Depends(get_current_user_id),
    record_service: RecordService = Depends(get_record_service),
):
    """Pick a random record, null when nothing matches."""
    record = await record_service.get_random_record(current_user_id, owned, wanted)
    return RecordResponse.model_validate(record) if record else None


@router.get("/{record_id}", response_model=RecordResponse)
async def get_record(
    record_id: int,
    current_user_id: int = Depends(get_current_user_id),
    record_service: RecordService = Depends(get_record_service),
):
    """Get a specific record."""
    record = await record_service.get_record(record_id, current_user_id)
    return RecordResponse.model_validate(record)


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_record(
    record_id: int,
    current_user_id: int = Depends(get_current_user_id),
    record_service: RecordService = Depends(get_record_service),
):
    """Delete a record."""
    await record_service.delete_record(record_id, current_user_id)
