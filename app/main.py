"""Main FastAPI application."""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from app import config
from app.errors import ArticleError
from app.routers import api, pages
from app.utils.logger import configure_logging
from app.views import ERROR_TITLE, NOT_FOUND_MESSAGE, NOT_FOUND_TITLE, render_error_page

configure_logging()

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup/shutdown events."""
    logger.info("Starting article server...")
    logger.info(f"Serving articles from {config.ARTICLES_DIR}")

    yield

    logger.info("Shutting down article server...")

# Create FastAPI app
app = FastAPI(
    title="Article Library",
    description="Markdown articles served as HTML pages",
    version="1.0.0",
    lifespan=lifespan
)

@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    """Render HTML error pages, leaving the JSON API with JSON errors."""
    if request.url.path.startswith("/api/"):
        return await http_exception_handler(request, exc)
    if exc.status_code == 404:
        return HTMLResponse(
            content=render_error_page(NOT_FOUND_TITLE, NOT_FOUND_MESSAGE),
            status_code=404
        )
    return HTMLResponse(
        content=render_error_page(ERROR_TITLE, str(exc.detail)),
        status_code=exc.status_code
    )

@app.exception_handler(ArticleError)
async def article_error_handler(request: Request, exc: ArticleError):
    """Log the failure and render the generic error page."""
    logger.error(f"Error loading articles for {request.url.path}: {exc}", exc_info=exc)
    return HTMLResponse(
        content=render_error_page(ERROR_TITLE),
        status_code=500
    )

@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    """Log any other failure and render the generic error page."""
    logger.error(f"Unexpected error for {request.url.path}: {exc}", exc_info=exc)
    if request.url.path.startswith("/api/"):
        return JSONResponse(
            content={"detail": "Internal server error"},
            status_code=500
        )
    return HTMLResponse(
        content=render_error_page(ERROR_TITLE),
        status_code=500
    )

@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}

# Mount static files
app.mount("/static", StaticFiles(directory=str(config.BASE_DIR / "static"), check_dir=False), name="static")
app.mount("/img", StaticFiles(directory=str(config.IMG_DIR), check_dir=False), name="img")

# Include routers; pages last since /{slug} matches any single segment
app.include_router(api.router)
app.include_router(pages.router)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.HOST, port=config.PORT)
