"""
Pydantic schemas for validating and documenting API requests and responses.

This package exposes the Pydantic models used across the application to
define input/output contracts for authentication, records, collection
sharing, and common responses (errors and health).
"""

from .auth import LoginRequest, RegisterRequest, TokenResponse, UserResponse, UserUpdateRequest
from .collection import CollectionTokenResponse
from .common import ErrorResponse, HealthCheckResponse
from .records import RecordBulkInput, RecordInput, RecordResponse, TagResponse

__all__ = [
    # Auth schemas
    "LoginRequest",
    "TokenResponse",
    "RegisterRequest",
    "UserResponse",
    "UserUpdateRequest",
    # Record schemas
    "RecordInput",
    "RecordBulkInput",
    "RecordResponse",
    "TagResponse",
    # Collection schemas
    "CollectionTokenResponse",
    # Common schemas
    "ErrorResponse",
    "HealthCheckResponse",
]
