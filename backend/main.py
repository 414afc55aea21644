import logging

import uvicorn

from app import app
from app.config import settings


def _configure_logging() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s:%(levelname)s:%(name)s:%(message)s",
    )


def _uvicorn_log_level() -> str:
    # uvicorn only knows lowercase level names
    return settings.log_level.strip().lower()


if __name__ == "__main__":
    _configure_logging()
    logging.getLogger(__name__).info(
        "Starting server on http://%s:%d", settings.host, settings.port
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=_uvicorn_log_level())
