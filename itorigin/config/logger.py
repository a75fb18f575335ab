""" Logging configuration... """

# Python Packages
import logging.config

# Constants
from ..base import constants





LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
        }
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default"
        }
    },
    "loggers": {
        "itorigin": {
            "handlers": ["console"],
            "level": constants.LOG_LEVEL,
            "propagate": True
        }
    }
}


def init_logging():
    """
    Configure the `itorigin` logger tree once per process
    """

    logging.config.dictConfig(LOGGING)
