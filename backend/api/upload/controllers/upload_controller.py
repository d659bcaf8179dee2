"""Upload controller — handles multipart file uploads."""

from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import PlainTextResponse
from starlette.datastructures import UploadFile
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routing import ANY_METHOD, method_not_allowed
from api.upload.services import upload_service
from config import MAX_UPLOAD_SIZE
from storage import UnsafePathError, get_files_dir

router = APIRouter(tags=["Upload"])


@router.api_route("/api/upload", methods=ANY_METHOD, response_class=PlainTextResponse)
async def upload_file(request: Request, files_dir: Path = Depends(get_files_dir)):
    """Store the multipart field `file` under its own filename."""
    if request.method != "POST":
        raise method_not_allowed("POST")

    _check_content_length(request)

    content_type = request.headers.get("content-type", "")
    if not content_type.startswith("multipart/form-data"):
        raise HTTPException(status_code=400, detail="Failed to parse form")
    try:
        form = await request.form()
    except StarletteHTTPException:
        raise HTTPException(status_code=400, detail="Failed to parse form")

    try:
        upload = form.get("file")
        if not isinstance(upload, UploadFile) or not upload.filename:
            raise HTTPException(status_code=400, detail="Error retrieving file")

        try:
            filename = await upload_service.save_upload(files_dir, upload)
        except upload_service.UploadTooLargeError as e:
            raise HTTPException(status_code=413, detail=str(e))
        except UnsafePathError:
            raise HTTPException(status_code=400, detail="Invalid filename")
        except upload_service.UploadWriteError as e:
            raise HTTPException(status_code=500, detail=e.detail)
    finally:
        await form.close()

    return f"File uploaded successfully: {filename}"


def _check_content_length(request: Request):
    """Enforce the body cap up front.

    The server frames the body by Content-Length, so the declared value
    bounds everything the form parser will spool.
    """
    declared = request.headers.get("content-length")
    if not declared:
        raise HTTPException(status_code=411, detail="Content-Length required")
    try:
        length = int(declared)
    except ValueError:
        raise HTTPException(status_code=400, detail="Failed to parse form")
    if length > MAX_UPLOAD_SIZE:
        raise HTTPException(
            status_code=413,
            detail=f"Request body exceeds max size of {MAX_UPLOAD_SIZE} bytes",
        )
