"""Shared routing helpers for the API controllers."""

from fastapi import HTTPException, status

# API routes accept every method and reject the unsupported ones themselves,
# so the SPA catch-all never answers for an API path.
ANY_METHOD = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"]


def method_not_allowed(*allowed: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        detail="Method not allowed",
        headers={"Allow": ", ".join(allowed)},
    )
