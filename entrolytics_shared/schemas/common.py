"""
Common Response Schemas

Shared response models used across multiple endpoints.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from entrolytics_shared.constants import HttpStatus, to_snake
from entrolytics_shared.messages import ERROR_MESSAGES, SUCCESS_MESSAGES


class MessageResponse(BaseModel):
    """Standard message response"""
    message: str
    success: bool = True

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "message": "Website created successfully",
                "success": True,
            }
        }
    )

    @classmethod
    def from_key(cls, key: str) -> "MessageResponse":
        """Build from a SUCCESS_MESSAGES key (KeyError if unknown)"""
        return cls(message=SUCCESS_MESSAGES[to_snake(key)])


class ErrorResponse(BaseModel):
    """Standard error response"""
    error: str
    message: str
    status_code: int = int(HttpStatus.BAD_REQUEST)
    detail: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": "token_expired",
                "message": "Token has expired",
                "status_code": 401,
                "detail": None,
            }
        }
    )

    @classmethod
    def from_key(
        cls,
        key: str,
        status_code: int = HttpStatus.BAD_REQUEST,
        detail: Optional[str] = None,
    ) -> "ErrorResponse":
        """Build from an ERROR_MESSAGES key (KeyError if unknown)"""
        key = to_snake(key)
        return cls(error=key, message=ERROR_MESSAGES[key], status_code=int(status_code), detail=detail)


class HealthResponse(BaseModel):
    """Health check response"""
    status: str
    service: str
    version: str
    timestamp: datetime

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "healthy",
                "service": "entrolytics-edge",
                "version": "1.0.0",
                "timestamp": "2026-01-07T10:00:00Z",
            }
        }
    )
