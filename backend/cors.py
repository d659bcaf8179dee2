"""CORS — a fixed, permissive policy for the local desktop client."""

import logging

from fastapi import Request, Response
from fastapi.responses import PlainTextResponse

import config

logger = logging.getLogger("drop.http")


def cors_headers() -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": config.CORS_ALLOW_ORIGIN,
        "Access-Control-Allow-Methods": config.CORS_ALLOW_METHODS,
        "Access-Control-Allow-Headers": config.CORS_ALLOW_HEADERS,
    }


async def cors_middleware(request: Request, call_next):
    """Add CORS headers to every response; answer OPTIONS without routing.

    Unhandled errors are turned into a 500 here so the client still gets
    the CORS headers and can read the failure.
    """
    if request.method == "OPTIONS":
        response = Response(status_code=200)
    else:
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            response = PlainTextResponse("Internal Server Error", status_code=500)
    response.headers.update(cors_headers())
    return response
