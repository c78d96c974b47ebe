import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"
NOISY_LOGGERS = ("urllib3", "requests", "watchdog")


def resolve_level(name=None):
    level_name = (name or os.getenv("DASHBOARD_LOG_LEVEL") or "INFO").upper()
    return getattr(logging, level_name, logging.INFO)


def configure_logging(level_name=None):
    """Streamlit reruns the script per interaction; basicConfig only applies once."""
    level = resolve_level(level_name)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("dashboard").setLevel(level)
    return level
