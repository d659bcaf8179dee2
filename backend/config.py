"""Application configuration."""

import os
from pathlib import Path

# Storage
FILES_DIR = Path(os.environ.get("DROP_FILES_DIR", "files"))
STATIC_DIR = Path(os.environ.get("DROP_STATIC_DIR", str(Path("..") / "dist")))

# Server
HOST = os.environ.get("DROP_HOST", "0.0.0.0").strip()
PORT = int(os.environ.get("DROP_PORT", "8080"))
LOG_LEVEL = os.environ.get("DROP_LOG_LEVEL", "INFO").strip().upper()

API_PREFIX = "/api"

# Uploads
MAX_UPLOAD_SIZE = 32 * 1024 * 1024  # 32MB
UPLOAD_CHUNK_SIZE = 1024 * 1024  # 1MB
UPLOAD_TEMP_PREFIX = ".upload-"

# CORS
CORS_ALLOW_ORIGIN = "*"
CORS_ALLOW_METHODS = os.environ.get(
    "DROP_CORS_METHODS", "GET, POST, PUT, DELETE, OPTIONS, HEAD"
).strip()
CORS_ALLOW_HEADERS = "Content-Type, Authorization"
