"""Drop Local — Main application entry point."""

import argparse
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI

import config
from cors import cors_middleware
from logging_config import logger, setup_logging
from storage import init_storage

from api.files.controllers.files_controller import router as files_router
from api.pages.controllers.pages_controller import router as pages_router
from api.status.controllers.status_controller import router as status_router
from api.upload.controllers.upload_controller import router as upload_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_storage(config.FILES_DIR)
    logger.info("Storing files in %s", config.FILES_DIR.resolve())
    logger.info("Server running at: http://localhost:%d", config.PORT)
    yield


def create_app() -> FastAPI:
    app = FastAPI(title="Drop Local", version="0.1.0", lifespan=lifespan)

    # CORS
    app.middleware("http")(cors_middleware)

    # Router registration order matters:
    # 1. API routers (every method, so the catch-all never sees them)
    app.include_router(status_router)
    app.include_router(upload_router)
    app.include_router(files_router)

    # 2. Static bundle with SPA fallback (catch-all GET /{path})
    app.include_router(pages_router)

    return app


app = create_app()


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Local file server")
    parser.add_argument("--port", type=int, default=config.PORT, help="Port to run the server on")
    parser.add_argument("--host", default=config.HOST, help="Interface to bind")
    parser.add_argument("--files-dir", type=Path, default=config.FILES_DIR, help="Storage directory")
    parser.add_argument("--static-dir", type=Path, default=config.STATIC_DIR, help="Prebuilt web UI")
    parser.add_argument(
        "--cors-methods",
        default=config.CORS_ALLOW_METHODS,
        help="Value of Access-Control-Allow-Methods",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    config.PORT = args.port
    config.HOST = args.host
    config.FILES_DIR = args.files_dir
    config.STATIC_DIR = args.static_dir
    config.CORS_ALLOW_METHODS = args.cors_methods

    setup_logging()
    uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    main()
