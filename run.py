import uvicorn

from app.core.config import settings
from app.utils.logging import setup_logging

if __name__ == "__main__":
    setup_logging("backend.log")
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_dev,
        log_config=None,
        log_level=None,
    )
