"""
Backend entry point for the course schedule service.

Serves the schedule API used by the course page's "Weekly Schedule"
section: meeting rows in, per-timezone meeting cards out.

Run with: python main.py [--port PORT] [--dev]
"""

import logging
import os
import sys
from pathlib import Path

# Set up import paths before any local imports
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

# Load .env.local first (if exists), then .env as fallback
# .env.local is gitignored and used for local dev overrides
load_dotenv(project_root / ".env.local")  # Local overrides (gitignored)
load_dotenv()  # Fallback to .env

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from schedule_core.config import (
    check_required_env_vars,
    get_allowed_origins,
    get_api_port,
    is_production,
)
from web_api.routes.schedule import router as schedule_router

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Error reporting (only when a DSN is configured)
SENTRY_DSN = os.environ.get("SENTRY_DSN")
if SENTRY_DSN:
    sentry_sdk.init(
        dsn=SENTRY_DSN,
        environment="production" if is_production() else "development",
        traces_sample_rate=0.1,
    )

_, _env_warnings = check_required_env_vars()
for warning in _env_warnings:
    logger.warning(warning)


app = FastAPI(title="Course Schedule API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_allowed_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(schedule_router)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import argparse
    import uvicorn

    parser = argparse.ArgumentParser(description="Course Schedule Server")
    parser.add_argument(
        "--port",
        type=int,
        default=get_api_port(),
        help="Port to run the server on (default: API_PORT or 8000)",
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Enable development mode (allows the Vite dev server origin)",
    )
    args = parser.parse_args()

    # Set env var so it persists across uvicorn reloads
    if args.dev:
        os.environ["DEV_MODE"] = "true"

    # Pass app object directly (not string) to avoid module reimport issues
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=args.port,
    )
