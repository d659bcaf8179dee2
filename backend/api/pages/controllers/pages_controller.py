"""Pages controller — serves the prebuilt web UI with SPA fallback.

Registered last: it answers every GET the API routers did not claim.
Unknown non-API paths get the bundle's index.html so client-side routes
resolve on reload.
"""

from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse

from config import API_PREFIX
from storage import UnsafePathError, get_static_dir, resolve_within

router = APIRouter(tags=["Pages"])

INDEX_FILE = "index.html"


def is_api_route(path: str) -> bool:
    return path.startswith(API_PREFIX)


def find_asset(static_dir: Path, path: str) -> Path | None:
    """Return the file that serves `path`, or None if the bundle has none."""
    if not path.strip("/"):
        candidate = static_dir / INDEX_FILE
        return candidate if candidate.is_file() else None

    try:
        target = resolve_within(static_dir, path)
    except UnsafePathError:
        return None

    if target.is_dir():
        target = target / INDEX_FILE
    return target if target.is_file() else None


@router.get("/{path:path}", include_in_schema=False)
async def serve_page(path: str, static_dir: Path = Depends(get_static_dir)):
    asset = find_asset(static_dir, path)
    if asset is None and not is_api_route(f"/{path}"):
        asset = find_asset(static_dir, "")
    if asset is None:
        raise HTTPException(status_code=404, detail="Not found")
    return FileResponse(asset)
