from typing import Any

from pydantic import BaseModel


class BaseResponse(BaseModel):
    """Uniform response envelope; unset fields are dropped on the wire."""

    data: Any | None = None
    message: str | None = None
    error: str | None = None
    error_description: str | None = None
