import logging

from .config import settings


def configure_logging():
    """Root logging for the job portal API, level from ``LOG_LEVEL``.

    INFO covers the MongoDB startup ping and shutdown, job posts and
    application submit/status/delete. WARNING is client-caused write
    rejections, ERROR is store outages, DEBUG is rejected auth tokens.
    The first call wins so uvicorn reloads don't stack handlers.
    """
    if logging.getLogger().handlers:
        return
    fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    logging.basicConfig(level=settings.LOG_LEVEL.upper(), format=fmt)


def get_logger(name: str):
    configure_logging()
    return logging.getLogger(name)
