"""
Main FastAPI application entry point
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from cms_admin import __version__
from cms_admin.api.routes import (auth, auth_pages, books_pages,
                                  dashboard_pages, health, manifest,
                                  posts_pages, profiles_pages,
                                  taxonomy_pages)
from cms_admin.core.auth import DatabaseAuthProvider
from cms_admin.core.config import get_settings
from cms_admin.core.logging_config import LoggingConfig
from cms_admin.core.middleware import (LoggingContextMiddleware,
                                       SessionMiddleware)
from cms_admin.core.templates import STATIC_DIR

# Configure logging first
LoggingConfig.configure()

logger = LoggingConfig.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan events for FastAPI app"""
    settings = get_settings()
    logger.info(f"Starting {settings.app_name} in {settings.app_env} mode...")
    yield
    logger.info(f"Shutting down {settings.app_name}...")


_settings = get_settings()
app = FastAPI(
    title=_settings.app_name,
    description="Content administration: posts, books, profiles, roles and tasks",
    version=__version__,
    lifespan=lifespan,
)

# The session layer talks to the auth backend through this object only
app.state.auth_provider = DatabaseAuthProvider()

# Added first so it sits innermost, inside the logging context
app.add_middleware(SessionMiddleware)
app.add_middleware(LoggingContextMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler to log all unhandled errors"""
    logger.error(
        "Unhandled exception",
        exc_info=exc,
        extra={
            "error": str(exc),
            "error_type": type(exc).__name__,
            "path": request.url.path,
            "method": request.method,
        }
    )

    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "type": type(exc).__name__
        }
    )


app.mount("/static", StaticFiles(directory=str(STATIC_DIR), check_dir=False), name="static")

app.include_router(health.router)
app.include_router(manifest.router)
app.include_router(auth.router)
app.include_router(auth_pages.router)
app.include_router(dashboard_pages.router)
app.include_router(posts_pages.router)
app.include_router(profiles_pages.router)
app.include_router(books_pages.router)
app.include_router(taxonomy_pages.router)


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.app_env == "development",
    )
