"""Files service — business logic for file management."""

import logging
from pathlib import Path

from api.files.dto.file import FileResponse
from api.files.repositories import files_repository
from storage import resolve_within

logger = logging.getLogger("drop.files")


def list_files(files_dir: Path) -> list[FileResponse]:
    return files_repository.list_all(files_dir)


def resolve_file(files_dir: Path, filename: str) -> Path:
    """Map a client-supplied filename to its path inside the storage directory.

    Raises UnsafePathError for names that escape the directory.
    """
    return resolve_within(files_dir, filename)


def get_file_for_download(files_dir: Path, filename: str) -> Path | None:
    """Return the path to serve, or None if no regular file is stored under that name."""
    filepath = resolve_file(files_dir, filename)
    if not files_repository.is_file(filepath):
        return None
    return filepath


def delete_file(files_dir: Path, filename: str) -> bool:
    """Delete a stored file. Returns False if nothing exists under that name.

    Any other failure (permissions, a directory in the way) raises OSError.
    """
    filepath = resolve_file(files_dir, filename)
    if not files_repository.exists(filepath):
        return False

    try:
        files_repository.delete(filepath)
    except FileNotFoundError:
        # Removed by someone else in the meantime
        return False

    logger.info("Deleted %s", filepath.name)
    return True
