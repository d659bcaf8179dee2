"""Files controller — list, download and delete stored files."""

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, Request, responses

from api.files.dto.file import FileResponse
from api.files.services import files_service
from api.routing import ANY_METHOD, method_not_allowed
from storage import UnsafePathError, get_files_dir

router = APIRouter(prefix="/api/files", tags=["Files"])

logger = logging.getLogger("drop.files")


@router.api_route("", methods=ANY_METHOD, response_model=list[FileResponse])
async def list_files(request: Request, files_dir: Path = Depends(get_files_dir)):
    if request.method != "GET":
        raise method_not_allowed("GET")

    try:
        return files_service.list_files(files_dir)
    except OSError as e:
        logger.warning("Failed to read %s: %s", files_dir, e)
        raise HTTPException(status_code=500, detail="Failed to read files directory")


@router.api_route("/{filename:path}", methods=ANY_METHOD)
async def file_operation(
    request: Request,
    filename: str,
    files_dir: Path = Depends(get_files_dir),
):
    """Download (GET) or delete (DELETE) a stored file by name."""
    if not filename:
        raise HTTPException(status_code=400, detail="Filename not provided")
    if request.method not in ("GET", "DELETE"):
        raise method_not_allowed("GET", "DELETE")

    try:
        if request.method == "GET":
            return _download(files_dir, filename)
        return _delete(files_dir, filename)
    except UnsafePathError:
        raise HTTPException(status_code=400, detail="Invalid filename")


def _download(files_dir: Path, filename: str) -> responses.FileResponse:
    try:
        filepath = files_service.get_file_for_download(files_dir, filename)
    except OSError as e:
        logger.warning("Failed to read %s: %s", filename, e)
        raise HTTPException(status_code=500, detail="Failed to read file")
    if not filepath:
        raise HTTPException(status_code=404, detail="File not found")

    # Content type is guessed from the name; range requests are handled by FileResponse
    return responses.FileResponse(filepath)


def _delete(files_dir: Path, filename: str) -> responses.PlainTextResponse:
    try:
        deleted = files_service.delete_file(files_dir, filename)
    except OSError as e:
        logger.warning("Failed to delete %s: %s", filename, e)
        raise HTTPException(status_code=500, detail="Failed to delete file")

    if not deleted:
        raise HTTPException(status_code=404, detail="File not found")
    return responses.PlainTextResponse(f"File deleted successfully: {filename}")
