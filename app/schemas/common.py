from typing import Any, Literal

from pydantic import BaseModel, Field

from app.utils.misc import get_utc_iso_now


class APIResponse(BaseModel):
    """Envelope returned by the error handlers."""

    status: Literal["success", "error"] = "success"
    data: Any = None
    message: str | None = None
    timestamp: str = Field(default_factory=get_utc_iso_now)
