"""
Serve the API with uvicorn: ``python -m app``.
"""

import logging

import uvicorn

from app.core.config import settings
from app.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    """Start the full application on the configured host and port."""
    configure_logging(level=settings.log_level)
    logger.info(
        "Starting %s at http://%s:%d",
        settings.project_name,
        settings.host,
        settings.port,
    )
    uvicorn.run("app.main:app", host=settings.host, port=settings.port, reload=False)


if __name__ == "__main__":
    main()
