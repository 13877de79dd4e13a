"""
Logging setup shared by the API process and CLI entry points
"""
import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO"):
    """Configure root and audit loggers once"""
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(level.upper())

    # raw-record reads are recorded separately from application logs
    audit = logging.getLogger("audit")
    audit.setLevel(logging.INFO)
