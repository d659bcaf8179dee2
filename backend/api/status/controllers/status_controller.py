"""Status controller — health probe for the desktop client."""

from datetime import datetime

from fastapi import APIRouter

from api.status.dto.status import StatusResponse

router = APIRouter(prefix="/api/status", tags=["Status"])


@router.get("", response_model=StatusResponse)
async def status():
    now = datetime.now().astimezone()
    return StatusResponse(status="running", time=now.isoformat(timespec="seconds"))
