"""
Run the API with uvicorn. From the project root:

  python -m app.server

Host and port come from HOST / PORT (default 0.0.0.0:3000).
"""

import logging
import sys

import uvicorn

from app.core.config import get_settings
from app.core.logging_config import configure_logging

logger = logging.getLogger(__name__)


def main() -> int:
    """Serve app.main:app until interrupted."""
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    logger.info("Server running on %s:%s", settings.HOST, settings.PORT)
    try:
        uvicorn.run(
            "app.main:app",
            host=settings.HOST,
            port=settings.PORT,
            log_level=settings.LOG_LEVEL.lower(),
            access_log=False,
        )
    except Exception as e:
        logger.exception("Server failed: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
