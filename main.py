from __future__ import annotations

import logging
import sys

import uvicorn
from dotenv import load_dotenv

from app import create_app
from persistence.errors import StoreError
from settings import get_settings

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"


def configure_logging(level: str) -> None:
    for noisy in ["asyncio", "httpx"]:
        logging.getLogger(noisy).setLevel(logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)


def main() -> None:
    load_dotenv("local.env")
    settings = get_settings()
    configure_logging(settings.log_level)

    try:
        app = create_app(settings)
    except StoreError as e:
        logger.critical("unable to create file storage: %s", e)
        sys.exit(1)

    logger.info("STARTUP: serving on %s:%s (data file %s)", settings.host, settings.port, settings.data_file)
    # uvicorn logs and exits non-zero if the port cannot be bound.
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
