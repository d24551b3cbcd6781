"""Arranca la API con uvicorn: `python -m app` o el script `jobs-api`."""

import logging
import sys

import uvicorn

from app.core.config import get_settings
from app.core.log import configure_logging

logger = logging.getLogger("app")


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)

    logger.info("Starting %s on http://%s:%d", settings.app_name, settings.host, settings.port)
    try:
        uvicorn.run(
            "app.main:app",
            host=settings.host,
            port=settings.port,
            log_level=settings.log_level.lower(),
        )
    except SystemExit as e:
        # uvicorn sale con SystemExit(1) si no puede abrir el puerto
        if e.code:
            logger.critical("Server exited with status %s", e.code)
        raise
    except Exception:
        logger.exception("Server crashed")
        sys.exit(1)


if __name__ == "__main__":
    main()
