"""Common schemas used across the API."""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Standard acknowledgement/error envelope.

    Format: { "success": bool, "msg": str }
    """

    success: bool
    msg: str
