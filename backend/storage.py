"""Storage directory management and path resolution."""

from pathlib import Path

import config


class UnsafePathError(ValueError):
    """Raised when a filename resolves outside the storage directory."""

    def __init__(self, name: str):
        super().__init__(f"Invalid filename: {name!r}")
        self.name = name


def init_storage(path: Path) -> Path:
    """Create the storage directory if it does not exist yet.

    Errors propagate: a storage directory that cannot be created is fatal.
    """
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_files_dir() -> Path:
    return config.FILES_DIR


def get_static_dir() -> Path:
    return config.STATIC_DIR


def resolve_within(base: Path, name: str) -> Path:
    """Join name onto base and ensure the entry it names stays inside base.

    Only the parent directory is canonicalized: the final component is left
    as is, so a symlink entry names the link itself, not its target.
    """
    root = base.resolve()
    joined = root / name
    if joined.name in ("", ".", ".."):
        raise UnsafePathError(name)
    try:
        parent = joined.parent.resolve()
    except ValueError:
        raise UnsafePathError(name)

    if not parent.is_relative_to(root):
        raise UnsafePathError(name)
    return parent / joined.name
