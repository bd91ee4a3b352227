"""Run the backend server locally."""
import uvicorn

from vidextract.core.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "vidextract.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
