"""
Base models for the Users API.
"""

from typing import Any, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict


class UserPayload(BaseModel):
    """Body of create and update requests.

    Fields are untyped: handlers only check presence and the store receives
    the values as given.
    """

    model_config = ConfigDict(extra='ignore')

    name: Any = None
    age: Any = None

    def is_complete(self) -> bool:
        # Truthy check: an empty name or an age of 0 counts as missing
        return bool(self.name) and bool(self.age)


class Envelope(BaseModel):
    """Uniform response shape shared by every users endpoint."""

    success: bool
    data: Optional[Any] = None
    message: Optional[str] = None
    error: Optional[str] = None

    def to_response(self, status_code: int = 200) -> JSONResponse:
        # Only keys that were explicitly given end up in the body
        return JSONResponse(
            status_code=status_code,
            content=jsonable_encoder(self.model_dump(exclude_unset=True)),
        )


class HealthStatus(BaseModel):
    status: str
    message: str
