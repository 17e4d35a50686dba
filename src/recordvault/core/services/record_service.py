"""Record service implementation."""

from typing import List, Optional, Sequence

from ..exceptions import NotFoundError, UnauthorizedError
from ..logging import get_logger
from ..models import Record
from ..repositories.interfaces import IRecordRepository
from ..schemas.records import RecordInput
from .interfaces import IRecordService

logger = get_logger("services.records")


class RecordService(IRecordService):
    """Record service implementation."""

    def __init__(self, record_repo: IRecordRepository):
        self.record_repo = record_repo

    async def create_record(self, user_id: int, record_input: RecordInput) -> Record:
        record = await self.record_repo.create(user_id, record_input)
        logger.info(f"User {user_id} added record {record.id}")
        return record

    async def create_records(
        self, user_id: int, record_inputs: Sequence[RecordInput]
    ) -> List[Record]:
        records = await self.record_repo.create_multiple(user_id, record_inputs)
        logger.info(f"User {user_id} imported {len(records)} records")
        return records

    async def get_record(self, record_id: int, user_id: int) -> Record:
        """Get record by ID.

        Missing records raise ``NotFoundError``; records of other users raise
        ``UnauthorizedError``.
        """
        record = await self.record_repo.find_by_id(record_id)
        if record is None:
            raise NotFoundError("record", record_id)
        if not record.is_owned_by(user_id):
            logger.warning(f"User {user_id} denied access to record {record_id}")
            raise UnauthorizedError(f"Record {record_id} belongs to another user")
        return record

    async def list_records(
        self, user_id: int, owned: Optional[bool] = None, wanted: Optional[bool] = None
    ) -> List[Record]:
        return await self.record_repo.find_all_by_user(user_id, owned, wanted)

    async def get_random_record(
        self, user_id: int, owned: Optional[bool] = None, wanted: Optional[bool] = None
    ) -> Optional[Record]:
        return await self.record_repo.get_random_by_user(user_id, owned, wanted)

    async def delete_record(self, record_id: int, user_id: int) -> None:
        # ownership check first
        await self.get_record(record_id, user_id)
        await self.record_repo.delete(record_id)
        logger.info(f"User {user_id} deleted record {record_id}")
