"""FastAPI entry point."""

from __future__ import annotations

import argparse
import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api import api_router
from .config import get_settings
from .database import DatabaseUnavailableError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

settings = get_settings()

app = FastAPI(title=settings.app_name)
app.include_router(api_router, prefix="/api")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"],
    allow_headers=["*"],
)


@app.exception_handler(DatabaseUnavailableError)
async def database_unavailable_handler(request: Request, exc: DatabaseUnavailableError) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": str(exc)})


@app.get("/")
def root() -> dict[str, str]:
    return {"app": settings.app_name}


def configure_logging(level: str) -> None:
    """Configure root logging once for the whole process."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def run(argv: Optional[list[str]] = None) -> None:
    """Run the API server."""
    parser = argparse.ArgumentParser(description="Serve card status records as JSON")
    parser.add_argument("--host", default=settings.api_host, help="Interface to bind")
    parser.add_argument("--port", type=int, default=settings.api_port, help="Port to run the API server on")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    args = parser.parse_args(argv)

    configure_logging(settings.log_level)
    logger.info("Starting %s on %s:%s", settings.app_name, args.host, args.port)
    uvicorn.run(
        "cardmonitor.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
