"""
Pydantic schemas for API responses.

Every response body, success or error, is wrapped in the HttpResponse
envelope: ``{"code": ..., "message": ..., "data": ...}`` where absent
fields are omitted rather than serialized as null.
No business logic belongs here.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

STATUS_OK = 200
STATUS_BAD_REQUEST = 400
STATUS_TOO_MANY_REQUESTS = 429
STATUS_INTERNAL_ERROR = 500


class HttpResponse(BaseModel):
    """Uniform response envelope.

    Attributes:
        code: Mirrors the HTTP status code. Always present.
        message: Human-readable message, mostly set on error responses.
        data: Payload for success responses or validation-error lists.
    """

    model_config = ConfigDict(frozen=True)

    code: int = Field(..., description="Response Code", examples=[200])
    message: str | None = Field(default=None, description="Response Message", examples=["Ok"])
    data: Any = Field(default=None, description="Response Data")

    def to_content(self) -> dict[str, Any]:
        """Return the JSON-ready body, omitting null top-level fields."""
        dumped = self.model_dump(mode="json")
        return {key: value for key, value in dumped.items() if value is not None}


class HealthResponse(BaseModel):
    """Payload of the health check endpoint."""

    status: str
    version: str
