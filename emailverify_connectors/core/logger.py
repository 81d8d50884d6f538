import logging
import os

ROOT_LOGGER_NAME = "emailverify_connectors"


def _log_level() -> str:
    # EMAIL_VERIFY_LOG_LEVEL prioritaire sur LOG_LEVEL
    return (os.getenv("EMAIL_VERIFY_LOG_LEVEL") or os.getenv("LOG_LEVEL") or "INFO").upper()


def get_logger(name: str) -> logging.Logger:
    """
    Retourne un logger de la librairie.

    Le handler et le niveau sont posés une seule fois sur le logger racine
    'emailverify_connectors'; les loggers des modules (__name__) propagent vers lui.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        log_level = _log_level()
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))
        root.addHandler(handler)
        root.setLevel(log_level)
        root.debug("Logger initialized for '%s' with level=%s", ROOT_LOGGER_NAME, log_level)

    return logging.getLogger(name)
