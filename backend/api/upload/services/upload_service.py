"""Upload service — handles file upload logic."""

import logging
import os
import tempfile
from pathlib import Path

from fastapi import UploadFile

from config import MAX_UPLOAD_SIZE, UPLOAD_CHUNK_SIZE, UPLOAD_TEMP_PREFIX
from storage import UnsafePathError, resolve_within

logger = logging.getLogger("drop.upload")

# Read once: os.umask can only be queried by setting it
_UMASK = os.umask(0)
os.umask(_UMASK)
FILE_MODE = 0o666 & ~_UMASK


class UploadTooLargeError(ValueError):
    pass


class UploadWriteError(OSError):
    """Raised when the uploaded content cannot be written to disk."""

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


def stored_name(client_filename: str) -> str:
    """Multipart filenames are reduced to their last path component."""
    return os.path.basename(client_filename)


async def save_upload(
    files_dir: Path,
    upload: UploadFile,
    max_size: int = MAX_UPLOAD_SIZE,
) -> str:
    """Copy the uploaded content into the storage directory.

    The content is written to a temporary file next to the destination and
    moved over it, replacing any file of the same name. Returns the stored name.
    """
    filename = stored_name(upload.filename)
    if filename.startswith(UPLOAD_TEMP_PREFIX):
        raise UnsafePathError(filename)
    final_path = resolve_within(files_dir, filename)

    try:
        tmp = tempfile.NamedTemporaryFile(
            delete=False, dir=str(files_dir), prefix=UPLOAD_TEMP_PREFIX
        )
    except OSError as e:
        logger.warning("Failed to create %s: %s", filename, e)
        raise UploadWriteError("Failed to create file") from e

    try:
        size = 0
        with tmp:
            while chunk := await upload.read(UPLOAD_CHUNK_SIZE):
                size += len(chunk)
                if size > max_size:
                    raise UploadTooLargeError(
                        f"File exceeds max size of {max_size} bytes"
                    )
                tmp.write(chunk)
        os.chmod(tmp.name, FILE_MODE)
        os.replace(tmp.name, final_path)
    except UploadTooLargeError:
        _discard(tmp.name)
        raise
    except OSError as e:
        _discard(tmp.name)
        logger.warning("Failed to save %s: %s", filename, e)
        raise UploadWriteError("Failed to save file") from e

    logger.info("Stored %s (%d bytes)", filename, size)
    return filename


def _discard(path: str):
    try:
        os.unlink(path)
    except FileNotFoundError:
        pass
