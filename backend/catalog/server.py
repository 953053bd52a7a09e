import sys

import uvicorn
from loguru import logger

from catalog.core.config import settings
from catalog.core.log import configure_logging


def main() -> None:
    configure_logging(settings.LOG_LEVEL)
    logger.info("Starting server at http://{}:{}", settings.HOST, settings.PORT)
    try:
        uvicorn.run("catalog.main:app", host=settings.HOST, port=settings.PORT, log_config=None)
    except SystemExit as exc:
        # uvicorn handles bind and lifespan failures itself and exits non-zero
        if exc.code:
            logger.error("Server failed to start (exit code {})", exc.code)
        raise


if __name__ == "__main__":
    sys.exit(main())
