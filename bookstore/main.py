"""
Main application entry point.
"""

import logging
import os

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from bookstore.api.v1.book_endpoints import router as books_router

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging() -> None:
    """Configure root logging from BOOKSTORE_LOG_LEVEL when run as a server."""
    logging.basicConfig(
        level=os.getenv("BOOKSTORE_LOG_LEVEL", "INFO").upper(),
        format=LOG_FORMAT,
    )


app = FastAPI(
    title="Bookstore Catalog API",
    description="Create and list books, their authors and illustrators.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Include API routers
app.include_router(books_router, prefix="/api/v1", tags=["books"])


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies are client errors, reported like rule violations."""
    errors = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        errors.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": errors})


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Unexpected failures become a 500 without business detail."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


@app.get("/")
def read_root():
    """Root endpoint."""
    return {
        "message": "Welcome to the Bookstore Catalog API",
        "docs": "/docs",
        "health": "/api/v1/health"
    }


if __name__ == "__main__":
    import uvicorn
    configure_logging()
    uvicorn.run("bookstore.main:app", host="0.0.0.0", port=8000, reload=True)
