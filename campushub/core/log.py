import logging.config

from campushub.core.config import settings


def setup_logging(level: str = None) -> None:
    """Настройка корневого логгера приложения"""
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": "%(asctime)s %(levelname)s [%(name)s] %(message)s"},
        },
        "handlers": {
            "console": {"class": "logging.StreamHandler", "formatter": "default"},
        },
        "root": {"level": (level or settings.log_level).upper(), "handlers": ["console"]},
    })
