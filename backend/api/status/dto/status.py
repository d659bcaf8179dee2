"""Status Data Transfer Objects."""

from pydantic import BaseModel


class StatusResponse(BaseModel):
    status: str
    time: str
