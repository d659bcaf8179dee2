"""Files repository — filesystem access layer.

The storage directory is the only source of truth: every call goes straight
to the filesystem, nothing is cached.
"""

import errno
import logging
import os
import stat
from datetime import datetime
from pathlib import Path

from api.files.dto.file import FileResponse
from config import UPLOAD_TEMP_PREFIX

logger = logging.getLogger("drop.files")

# Lookup errors that mean "no such entry" rather than an I/O failure
_ABSENT_ERRNOS = (errno.ENOENT, errno.ENOTDIR, errno.ENAMETOOLONG, errno.ELOOP)


def _entry_to_dto(entry: os.DirEntry) -> FileResponse:
    st = entry.stat()
    modified = datetime.fromtimestamp(st.st_mtime).astimezone()
    return FileResponse(
        name=entry.name,
        size=st.st_size,
        upload_date=modified.isoformat(timespec="seconds"),
    )


def list_all(files_dir: Path) -> list[FileResponse]:
    """Return every regular entry in directory order.

    Entries whose metadata cannot be read are skipped, as are uploads
    still being written.
    """
    files = []
    with os.scandir(files_dir) as entries:
        for entry in entries:
            if entry.name.startswith(UPLOAD_TEMP_PREFIX):
                continue
            try:
                if entry.is_dir():
                    continue
                files.append(_entry_to_dto(entry))
            except OSError as e:
                logger.warning("Skipping %s: %s", entry.name, e)
    return files


def _stat(path: Path, follow_symlinks: bool = True) -> os.stat_result | None:
    try:
        return path.stat() if follow_symlinks else path.lstat()
    except OSError as e:
        if e.errno in _ABSENT_ERRNOS:
            return None
        raise


def exists(path: Path) -> bool:
    """True if a directory entry exists, including dangling symlinks."""
    return _stat(path, follow_symlinks=False) is not None


def is_file(path: Path) -> bool:
    st = _stat(path)
    return st is not None and stat.S_ISREG(st.st_mode)


def delete(path: Path) -> None:
    path.unlink()
