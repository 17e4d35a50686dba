"""
Collection sharing schemas.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CollectionTokenResponse(BaseModel):
    """Sharing token handed to its owner."""

    token: str = Field(description="Opaque token, append to /api/collection/")
    user_id: int = Field(description="Owner id")
    created_at: datetime = Field(description="Issue timestamp")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "token": "b7kX3q2a9Zr1T0m8Vn4wPc6yLd5sEf2h",
                "user_id": 7,
                "created_at": "2025-09-13T10:30:00Z",
            }
        },
    )
