"""
FastAPI application entry point.

Run with: uvicorn api.main:app --reload
"""
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Load environment variables from backend/.env (optional) before other imports that read env
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(env_path)

from api.database import build_book_store
from api.routes import books
from domain.errors import BookStoreError
from repositories import BookStore
from settings import Settings, settings

logger = logging.getLogger(__name__)


async def book_store_error_handler(request: Request, exc: BookStoreError) -> JSONResponse:
    """Surface backend failures as 500 with the backend's message."""
    logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": str(exc)})


def create_app(store: Optional[BookStore] = None, config: Optional[Settings] = None) -> FastAPI:
    """
    Build the API around ``store``.

    When no store is given one is built from ``config``; missing database
    credentials raise ConfigurationError here, so the service never starts
    half-configured.
    """
    config = config or settings
    logging.basicConfig(level=config.LOG_LEVEL)

    app = FastAPI(
        title="Book Catalog API",
        description="CRUD API for a catalog of books",
        version="0.1.0",
    )
    app.state.book_store = store if store is not None else build_book_store(config)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(BookStoreError, book_store_error_handler)

    app.include_router(books.router, prefix="/books", tags=["books"])

    @app.get("/")
    async def root():
        """Health check endpoint."""
        return {"status": "ok", "service": "Book Catalog API"}

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()
