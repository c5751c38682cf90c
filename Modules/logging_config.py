import logging
import logging.config

from Modules.config import LOG_LEVEL

_configured = False


def configure_logging() -> None:
    """Configures the root logger once per process; Streamlit reruns call this on every page load."""
    global _configured
    if _configured:
        return

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "plain": {"format": "%(asctime)s - %(levelname)s - %(name)s - %(message)s"},
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": "plain",
                },
            },
            "root": {
                "handlers": ["default"],
                "level": LOG_LEVEL.upper(),
            },
        }
    )
    _configured = True
