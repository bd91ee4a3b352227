"""FastAPI application entry point."""
import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from vidextract.api.router import api_router
from vidextract.core.config import Settings, settings
from vidextract.core.errors import ExtractorError
from vidextract.core.http_client import close_client, get_client
from vidextract.core.logging_config import configure_logging

logger = logging.getLogger(__name__)


def mount_static(app: FastAPI, static_root: Path) -> None:
    """
    Serve the bundled front end from ``static_root``.

    ``/`` answers with ``index.html``; any other path is served only if it names
    a file inside the root. Registered last so API routes always win.
    """
    root = static_root.resolve()
    if not root.is_dir():
        logger.info("Static root %s not found, front end disabled", root)
        return

    @app.get("/", include_in_schema=False)
    async def serve_index():
        index = root / "index.html"
        if not index.is_file():
            return JSONResponse(status_code=404, content={"error": "Not found"})
        return FileResponse(index)

    @app.get("/{full_path:path}", include_in_schema=False)
    async def serve_asset(full_path: str):
        file_path = (root / full_path).resolve()
        if file_path.is_relative_to(root) and file_path.is_file():
            return FileResponse(file_path)
        return JSONResponse(status_code=404, content={"error": "Not found"})


def create_app(config: Settings = settings) -> FastAPI:
    app = FastAPI(
        title=config.app_name,
        version=config.api_version,
        debug=config.debug,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins_list,
        # A wildcard origin is never combined with credentials
        allow_credentials="*" not in config.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ExtractorError)
    async def extractor_error_handler(request: Request, exc: ExtractorError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        error = "Not found" if exc.status_code == 404 else str(exc.detail)
        return JSONResponse(status_code=exc.status_code, content={"error": error})

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler to log all errors."""
        logger.exception("%s %s failed", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={"error": type(exc).__name__, "detail": str(exc)},
        )

    @app.on_event("startup")
    async def startup_event():
        """Run on application startup."""
        configure_logging(config.log_level)
        get_client()
        logger.info("%s v%s", config.app_name, config.api_version)
        logger.info("Listening on http://%s:%s", config.host, config.port)
        logger.info("CORS origins: %s", config.cors_origins_list)
        logger.info("Static root: %s", config.static_root)
        logger.info("Headless browser: %s", config.headless)

    @app.on_event("shutdown")
    async def shutdown_event():
        """Run on application shutdown."""
        await close_client()
        logger.info("Stopped")

    app.include_router(api_router)
    mount_static(app, config.static_path)
    return app


app = create_app()
