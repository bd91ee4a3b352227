"""Main API router - aggregates all route modules."""
from fastapi import APIRouter

from vidextract.api.routes import download, extract
from vidextract.core.config import settings

api_router = APIRouter()

api_router.include_router(extract.router)
api_router.include_router(download.router)


@api_router.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": settings.api_version}
