from logging.config import dictConfig


def configure_debug_logging(verbosity: str = "DEBUG") -> None:
    dictConfig(
        {
            "version": 1,
            "formatters": {
                "simple": {"format": "%(message)s"},
                "detailed": {
                    "format": "[%(asctime)s] %(levelname)-8s - %(message)s",
                    "datefmt": "%Y-%m-%dT%H:%M:%S%z",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": "DEBUG",
                    "formatter": "detailed" if verbosity == "DEBUG" else "simple",
                    "stream": "ext://sys.stdout",
                },
            },
            "loggers": {
                "madax": {
                    "level": verbosity,
                    "handlers": ["console"],
                    "propagate": False,
                },
            },
            "root": {"level": "ERROR", "handlers": ["console"]},
            "disable_existing_loggers": False,
        }
    )
