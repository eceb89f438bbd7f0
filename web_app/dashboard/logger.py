# web_app/dashboard/logger.py
import logging
import os
from config import Config


def _file_handler(log_path: str) -> logging.Handler:
    os.makedirs(os.path.dirname(os.path.abspath(log_path)), exist_ok=True)
    fh = logging.FileHandler(log_path, encoding="utf-8")
    fh.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(message)s"))
    return fh


# one common logger for the endpoint, the client and the pages
logger = logging.getLogger("reportdash")

if not logger.handlers:
    # Config.LOG_LEVEL = "DEBUG" | "INFO" | "WARNING" | "ERROR"
    logger.setLevel(getattr(logging, str(Config.LOG_LEVEL).upper(), logging.INFO))
    logger.addHandler(_file_handler(Config.APP_LOG))

    # no double logging via root logger
    logger.propagate = False
