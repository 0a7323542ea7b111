"""Schemas shared across routes."""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str
